"""tenki.jp point forecast page client."""

import logging
import re

import httpx

from tenki.ingest.errors import InvalidLocationError, NetworkError
from tenki.models.common import Granularity

logger = logging.getLogger(__name__)

TENKI_BASE_URL = "https://tenki.jp/forecast"
DEFAULT_USER_AGENT = "tenki-cli/0.1.0"

# e.g. "3/11/4020/8220"
_LOCATION_RE = re.compile(r"^[0-9A-Za-z_-]+(?:/[0-9A-Za-z_-]+)*$")


class TenkiClient:
    def __init__(
        self,
        base_url: str = TENKI_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def forecast_url(self, location_key: str, granularity: Granularity) -> str:
        if not _LOCATION_RE.match(location_key):
            raise InvalidLocationError(location_key)
        return f"{self.base_url}/{location_key}/{granularity.value}.html"

    def get_forecast_page(self, location_key: str, granularity: Granularity) -> str:
        """Fetch the forecast page HTML for a location.

        Raises InvalidLocationError before any request is made if the key
        cannot form a URL, NetworkError on transport failure or non-2xx.
        """
        url = self.forecast_url(location_key, granularity)
        headers = {"User-Agent": self.user_agent}
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
            logger.info("GET %s -> %d", url, resp.status_code)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("tenki.jp returned an error for %s: %s", location_key, e)
            raise NetworkError(str(e)) from e
        except httpx.InvalidURL as e:
            raise InvalidLocationError(location_key) from e
        except httpx.RequestError as e:
            logger.error("tenki.jp request failed for %s: %s", location_key, e)
            raise NetworkError(str(e)) from e
        resp.encoding = "utf-8"
        return resp.text
