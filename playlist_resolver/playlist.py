import logging
import re

from pymonad.either import Either, Left, Right

from playlist_resolver.domain.errors import AppError, PlaylistFormatError, TransportError
from playlist_resolver.domain.ports import PlaylistTransport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
PLAYLIST_SUFFIX = ".pls"
HEADER_MARKER = "playlist"
ENTRY_PREFIX = "File"

_QUERY_OR_FRAGMENT = re.compile(r"[?#]")
_LINE_SEPARATORS = re.compile(r"[\r\n]+")


def is_playlist_url(url: str) -> bool:
    """
    Tells whether a URL points to a playlist rather than directly to a stream.
    Query strings and fragments are ignored; the suffix test is case-sensitive.

    Args:
        url: Stream or playlist URL.

    Returns:
        True if the URL points to a .pls playlist.
    """
    path = _QUERY_OR_FRAGMENT.split(url, maxsplit=1)[0]
    return path.endswith(PLAYLIST_SUFFIX)


def fetch_playlist_data(
    url: str, transport: PlaylistTransport, timeout: float = DEFAULT_TIMEOUT
) -> Either[TransportError, str]:
    """
    Fetches a remotely hosted playlist and returns its raw text.

    Args:
        url: URL pointing to a playlist file.
        transport: The HTTP capability used for the request.
        timeout: Request timeout in seconds.

    Returns:
        Either: A Right(playlist text) on success, or a Left(TransportError).
    """
    logger.info(f"Fetching playlist '{url}' (timeout {timeout}s).")
    try:
        body = transport.get_text(url, timeout)
    except Exception as e:
        logger.error(f"Failed to fetch playlist '{url}': {e}")
        return Left(TransportError(f"Could not fetch playlist '{url}': {e}"))

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    elif not isinstance(body, str):
        logger.error(f"Transport returned a {type(body).__name__} body for '{url}'.")
        return Left(TransportError(f"Playlist '{url}' did not return text."))

    logger.debug(f"Fetched {len(body)} characters from '{url}'.")
    return Right(body)


def parse_playlist(playlist: str) -> Either[PlaylistFormatError, str]:
    """
    Parses playlist text and returns the first declared stream URL.

    The first line must contain the 'playlist' marker. The value of the first
    'File' line holding a non-empty value after '=' is returned; 'File' lines
    without '=' are skipped.

    Args:
        playlist: String containing playlist data.

    Returns:
        Either: A Right(stream URL) or a Left(PlaylistFormatError).
    """
    lines = _LINE_SEPARATORS.split(playlist)

    if HEADER_MARKER not in lines[0]:
        logger.warning("Playlist header is missing, refusing to parse.")
        return Left(PlaylistFormatError("Invalid playlist header."))

    for line in lines:
        if not line.startswith(ENTRY_PREFIX):
            continue
        _, separator, value = line.partition("=")
        if separator and value:
            logger.debug(f"Stream URL found on line '{line}'.")
            return Right(value)

    logger.warning("Playlist does not declare any stream entry.")
    return Left(PlaylistFormatError("No stream entry found in playlist."))


def resolve_stream_url(
    url: str, transport: PlaylistTransport, timeout: float = DEFAULT_TIMEOUT
) -> Either[AppError, str]:
    """
    Turns a station URL into a playable stream URL.
    Direct stream URLs are returned as-is, playlists are fetched and parsed.
    """
    if not is_playlist_url(url):
        logger.info(f"'{url}' is a direct stream URL.")
        return Right(url)

    return fetch_playlist_data(url, transport, timeout).bind(parse_playlist)
