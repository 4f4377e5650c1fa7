import logging
from typing import Optional

import requests

from playlist_resolver.domain.ports import PlaylistTransport

logger = logging.getLogger(__name__)

USER_AGENT = "playlist-resolver/0.1"


class RequestsTransport(PlaylistTransport):
    """
    Playlist transport backed by a requests session.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = USER_AGENT

    def get_text(self, url: str, timeout: float) -> str:
        logger.debug(f"GET {url}")
        response = self._session.get(url, timeout=timeout)
        response.raise_for_status()
        return response.text
