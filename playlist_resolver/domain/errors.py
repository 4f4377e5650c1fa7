# playlist_resolver/domain/errors.py
from dataclasses import dataclass

@dataclass(frozen=True)
class AppError:
    """Base class for application errors."""
    message: str

@dataclass(frozen=True)
class TransportError(AppError):
    """Network, timeout or HTTP status failure while fetching a playlist."""
    pass

@dataclass(frozen=True)
class PlaylistFormatError(AppError):
    """Playlist text without a valid header or without a stream entry."""
    pass

@dataclass(frozen=True)
class StationDirectoryError(AppError):
    """Error while talking to the station directory API."""
    pass

@dataclass(frozen=True)
class ConfigError(AppError):
    """Unreadable or invalid configuration."""
    pass
