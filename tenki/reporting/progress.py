"""Terminal spinner shown while a forecast is being fetched."""

import itertools
import sys
import threading
from typing import TextIO

FRAMES = "|/-\\"


class Spinner:
    """Context manager that animates a spinner on a TTY stream.

    Does nothing when the stream is not a terminal. The animation thread is
    stopped on exit whether or not the body raised.
    """

    def __init__(self, message: str = "Fetching", stream: TextIO | None = None, interval: float = 0.1):
        self.message = message
        self.stream = stream if stream is not None else sys.stderr
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _spin(self) -> None:
        for frame in itertools.cycle(FRAMES):
            self.stream.write(f"\r{self.message} {frame}")
            self.stream.flush()
            if self._stop.wait(self.interval):
                break
        self.stream.write("\r" + " " * (len(self.message) + 2) + "\r")
        self.stream.flush()

    def __enter__(self) -> "Spinner":
        if self.stream.isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
