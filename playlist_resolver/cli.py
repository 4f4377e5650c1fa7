import typer
import logging
from rich.console import Console
from rich.table import Table
from pathlib import Path
from typing import Optional, List
from toolz import pipe

# App-specific imports
from playlist_resolver.adapters.radio_browser import RadioBrowserAdapter
from playlist_resolver.adapters.requests_transport import RequestsTransport
from playlist_resolver.config import Settings, load_settings
from playlist_resolver.domain.errors import AppError
from playlist_resolver.domain.models import Station, Tag
from playlist_resolver.i18n import get_message, set_lang
from playlist_resolver.logger_config import setup_logger
from playlist_resolver.playlist import is_playlist_url, parse_playlist, resolve_stream_url

# Initialization
console = Console()
logger = logging.getLogger(__name__)

# Create the Typer app object
app = typer.Typer(
    name="playlist-resolver",
    help="Resolve internet radio playlists and search radio stations.",
    add_completion=False,
)

# --- State and Callbacks ---

state = {"settings": Settings()}


@app.callback()
def main_callback(
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        help=get_message("help_lang"),
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=get_message("help_config"),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=get_message("help_verbose")),
):
    """Resolve internet radio playlists and search radio stations."""
    if lang:
        set_lang(lang)
    settings = load_settings(config).either(
        lambda err: _handle_error(AppError(get_message("config_error", error=err.message))),
        lambda s: s,
    )
    state["settings"] = settings

    setup_logger("DEBUG" if verbose else settings.log_level)
    set_lang(lang or settings.lang)
    logger.debug(f"Settings in use: {settings}")


# --- Helper Functions ---


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]Error:[/bold red] {error.message}")
    raise typer.Exit(code=1)


def _render_stations(stations: List[Station]) -> Table:
    table = Table(title=get_message("stations_title"))
    table.add_column(get_message("column_name"), style="bold cyan")
    table.add_column(get_message("column_codec"))
    table.add_column(get_message("column_bitrate"), justify="right")
    table.add_column(get_message("column_url"), overflow="fold")
    for station in stations:
        table.add_row(station.name, station.codec, str(station.bitrate), station.url)
    return table


def _render_tags(tags: List[Tag]) -> Table:
    table = Table(title=get_message("tags_title"))
    table.add_column(get_message("column_tag"), style="bold cyan")
    table.add_column(get_message("column_stationcount"), justify="right")
    for tag in tags:
        table.add_row(tag.name, str(tag.stationcount))
    return table


def _station_directory() -> RadioBrowserAdapter:
    settings = state["settings"]
    return RadioBrowserAdapter(
        base_url=settings.radio_browser_url,
        limit=settings.station_limit,
        timeout=settings.timeout,
    )


# --- CLI Commands ---


@app.command(name="check")
def check_url(
    url: str = typer.Argument(..., help=get_message("help_url")),
):
    """Tells whether a URL points to a playlist or to a stream."""
    logger.info(f"Command 'check' initiated for URL: {url}")
    key = "is_playlist" if is_playlist_url(url) else "is_stream"
    console.print(get_message(key, url=url))


@app.command(name="resolve")
def resolve(
    url: str = typer.Argument(..., help=get_message("help_url")),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", min=0.1, help=get_message("help_timeout")
    ),
):
    """Resolves a station URL to a playable stream URL."""
    logger.info(f"Command 'resolve' initiated for URL: {url}")
    console.print(f"📡 {get_message('resolving', url=url)}")

    def on_success(stream_url: str) -> None:
        console.print(
            f"[bold green]✓ {get_message('stream_resolved', stream_url=stream_url)}[/bold green]"
        )

    def on_error(error: AppError) -> None:
        _handle_error(AppError(get_message("resolve_error", error=error.message)))

    pipe(
        resolve_stream_url(url, RequestsTransport(), timeout or state["settings"].timeout),
        lambda e: e.either(on_error, on_success),
    )


@app.command(name="parse")
def parse_file(
    file_path: Path = typer.Argument(
        ...,
        help=get_message("help_file"),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
):
    """Extracts the stream URL from a local playlist file."""
    logger.info(f"Command 'parse' initiated for file: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except IOError as e:
        _handle_error(AppError(get_message("file_read_error", file=str(file_path), error=e)))
        return

    parse_playlist(content).either(
        lambda err: _handle_error(
            AppError(get_message("parse_error", file=str(file_path), error=err.message))
        ),
        lambda stream_url: console.print(
            f"[bold green]✓ {get_message('stream_resolved', stream_url=stream_url)}[/bold green]"
        ),
    )


@app.command(name="stations")
def search_stations(
    search: List[str] = typer.Argument(..., help=get_message("help_search")),
):
    """Searches radio stations by name and keywords."""
    search_string = " ".join(search)
    logger.info(f"Command 'stations' initiated for: {search_string}")
    console.print(f"🔍 {get_message('searching_stations', search=search_string)}")

    def on_success(stations: List[Station]) -> None:
        if not stations:
            console.print(f"[yellow]{get_message('no_stations', search=search_string)}[/yellow]")
            return
        console.print(_render_stations(stations))
        console.print(get_message("stations_found", count=len(stations)))

    def on_error(error: AppError) -> None:
        _handle_error(AppError(get_message("directory_error", error=error.message)))

    _station_directory().search_stations(search_string).either(on_error, on_success)


@app.command(name="tags")
def list_tags():
    """Lists the tags known to the station directory."""
    logger.info("Command 'tags' initiated.")
    console.print(f"🏷️ {get_message('fetching_tags')}")

    def on_success(tags: List[Tag]) -> None:
        console.print(_render_tags(tags))
        console.print(get_message("tags_found", count=len(tags)))

    def on_error(error: AppError) -> None:
        _handle_error(AppError(get_message("directory_error", error=error.message)))

    _station_directory().list_tags().either(on_error, on_success)


if __name__ == "__main__":
    app()
