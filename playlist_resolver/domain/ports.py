from abc import ABC, abstractmethod
from typing import List

from pymonad.either import Either

from .errors import StationDirectoryError
from .models import Station, Tag


class PlaylistTransport(ABC):
    """
    Port defining the HTTP capability the playlist fetcher relies on.
    """

    @abstractmethod
    def get_text(self, url: str, timeout: float) -> str:
        """
        Performs a single GET request and returns the response body as text.

        Raises:
            Exception: on any network, timeout or HTTP status failure.
        """
        pass


class StationDirectory(ABC):
    """
    Port defining the contract for a radio station directory.
    """

    @abstractmethod
    def search_stations(self, search_string: str) -> Either[StationDirectoryError, List[Station]]:
        """
        Searches stations by name.

        Returns:
            Either: A Right(list of stations) or a Left(StationDirectoryError).
        """
        pass

    @abstractmethod
    def list_tags(self) -> Either[StationDirectoryError, List[Tag]]:
        """
        Returns:
            Either: A Right(list of tags) or a Left(StationDirectoryError).
        """
        pass
