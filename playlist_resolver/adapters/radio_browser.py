import logging
from typing import Any, List, Optional

import requests
from pymonad.either import Either, Left, Right

from playlist_resolver.adapters.requests_transport import USER_AGENT
from playlist_resolver.domain.errors import StationDirectoryError
from playlist_resolver.domain.models import Station, Tag
from playlist_resolver.domain.ports import StationDirectory

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://de1.api.radio-browser.info"
DEFAULT_LIMIT = 100


def filter_stations(stations: List[Station], parts: List[str]) -> List[Station]:
    """
    Keeps the stations whose lowercased name contains every keyword after the
    first one. The first keyword is the one sent to the directory.

    Args:
        stations: Stations returned by the directory.
        parts: Lowercased keywords of the search string.

    Returns:
        The matching stations, in their original order.
    """
    keywords = parts[1:]
    return [
        station
        for station in stations
        if all(keyword in station.name.lower() for keyword in keywords)
    ]


class RadioBrowserAdapter(StationDirectory):
    """
    Adapter for the radio-browser.info JSON API.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        limit: int = DEFAULT_LIMIT,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._limit = limit
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = USER_AGENT

    def _get_json(self, path: str, params: Optional[dict] = None) -> Any:
        response = self._session.get(
            f"{self._base_url}{path}", params=params, timeout=self._timeout
        )
        response.raise_for_status()
        return response.json()

    def search_stations(self, search_string: str) -> Either[StationDirectoryError, List[Station]]:
        """
        Searches stations by name, most voted first, then narrows the result
        down with the remaining keywords of the search string.
        """
        parts = search_string.lower().split()
        name = parts[0] if parts else search_string
        logger.info(f"Searching stations named '{name}' (limit {self._limit}).")

        params = {
            "name": name,
            "order": "votes",
            "reverse": "true",
            "limit": str(self._limit),
        }
        try:
            payload = self._get_json("/json/stations/search", params)
            stations = [Station.from_api(item) for item in payload]
        except requests.RequestException as e:
            logger.error(f"Station search for '{search_string}' failed: {e}")
            return Left(StationDirectoryError(f"Station search failed: {e}"))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected station search response: {e}")
            return Left(StationDirectoryError(f"Invalid response from station directory: {e}"))

        matching = filter_stations(stations, parts)
        logger.info(f"{len(matching)} of {len(stations)} stations match '{search_string}'.")
        return Right(matching)

    def list_tags(self) -> Either[StationDirectoryError, List[Tag]]:
        logger.info("Fetching station tags.")
        try:
            payload = self._get_json("/json/tags")
            tags = [Tag.from_api(item) for item in payload]
        except requests.RequestException as e:
            logger.error(f"Tag listing failed: {e}")
            return Left(StationDirectoryError(f"Tag listing failed: {e}"))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected tag listing response: {e}")
            return Left(StationDirectoryError(f"Invalid response from station directory: {e}"))

        return Right(tags)
