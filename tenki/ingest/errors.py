"""Errors raised while fetching and extracting a forecast."""


class FetchError(Exception):
    """Base class for every error that aborts a forecast fetch."""


class InvalidLocationError(FetchError):
    """The location key cannot form a valid request target."""

    def __init__(self, location_key: str):
        self.location_key = location_key
        super().__init__(f"Invalid location: {location_key!r}")


class NetworkError(FetchError):
    """Transport failure or non-success HTTP status."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class StructuralError(FetchError):
    """The page does not have the shape the extractor expects."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid HTML: {detail}")
