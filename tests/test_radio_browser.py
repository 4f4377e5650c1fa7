import pytest
import requests
from unittest.mock import MagicMock

from playlist_resolver.adapters.requests_transport import USER_AGENT
from playlist_resolver.adapters.radio_browser import (
    DEFAULT_BASE_URL,
    RadioBrowserAdapter,
    filter_stations,
)
from playlist_resolver.domain.errors import StationDirectoryError
from playlist_resolver.domain.models import Station, Tag

API_STATIONS = [
    {
        "name": "station1",
        "stationuuid": "uuid1",
        "url": "url1",
        "url_resolved": "",
        "homepage": "homepage1",
        "favicon": "favicon1",
        "codec": "codec1",
        "bitrate": 128,
        "clickcount": 10,
        "votes": 5,
    },
    {
        "name": "station2",
        "stationuuid": "uuid2",
        "url": "url2",
        "homepage": "homepage2",
        "favicon": "favicon2",
        "codec": "codec2",
        "bitrate": 128,
        "clickcount": 10,
        "votes": 5,
    },
]


def make_stations():
    return [Station.from_api(item) for item in API_STATIONS]


@pytest.fixture
def session():
    """Provides a mocked requests session."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


def json_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


# --- filter_stations ---


def test_filter_stations_without_keywords_keeps_all():
    result = filter_stations(make_stations(), [])

    assert [s.name for s in result] == ["station1", "station2"]


def test_filter_stations_single_keyword_keeps_all():
    result = filter_stations(make_stations(), ["anything"])

    assert len(result) == 2


def test_filter_stations_returns_only_string_match():
    result = filter_stations(make_stations(), ["", "sta", "ion2"])

    assert len(result) == 1
    assert result[0].name == "station2"


def test_filter_stations_returns_empty_list():
    assert filter_stations(make_stations(), ["", "gabblesnack"]) == []


def test_filter_stations_ignores_name_case():
    stations = [Station(name="Radio PARIS Jazz", url="u")]

    assert filter_stations(stations, ["radio", "jazz", "paris"]) == stations


# --- Station / Tag ---


def test_station_from_api_defaults_missing_fields():
    station = Station.from_api({"name": "  Lonely FM ", "bitrate": None})

    assert station.name == "Lonely FM"
    assert station.url == ""
    assert station.bitrate == 0
    assert station.codec == ""


def test_tag_from_api():
    assert Tag.from_api({"name": "jazz", "stationcount": 42}) == Tag("jazz", 42)


# --- search_stations ---


def test_search_stations_queries_first_keyword(session):
    """
    Given a multi-word search string,
    When search_stations is called,
    Then the directory is queried with the first keyword, most voted first,
    And the result is narrowed down with the other keywords.
    """
    session.get.return_value = json_response(API_STATIONS)
    adapter = RadioBrowserAdapter(limit=50, timeout=10, session=session)

    result = adapter.search_stations("Station ION2")

    assert result.is_right()
    assert [s.name for s in result.value] == ["station2"]
    session.get.assert_called_once_with(
        f"{DEFAULT_BASE_URL}/json/stations/search",
        params={"name": "station", "order": "votes", "reverse": "true", "limit": "50"},
        timeout=10,
    )


def test_search_stations_empty_search_string(session):
    session.get.return_value = json_response([])
    adapter = RadioBrowserAdapter(session=session)

    result = adapter.search_stations("")

    assert result.value == []
    assert session.get.call_args.kwargs["params"]["name"] == ""


def test_search_stations_strips_trailing_slash_from_base_url(session):
    session.get.return_value = json_response([])
    adapter = RadioBrowserAdapter(base_url="http://mirror.local/", session=session)

    adapter.search_stations("jazz")

    assert session.get.call_args.args[0] == "http://mirror.local/json/stations/search"


def test_search_stations_network_error(session, caplog):
    session.get.side_effect = requests.ConnectionError("Name or service not known")
    adapter = RadioBrowserAdapter(session=session)

    result = adapter.search_stations("jazz")

    assert result.is_left()
    error, _ = result.monoid
    assert isinstance(error, StationDirectoryError)
    assert "Name or service not known" in error.message
    assert "Station search for 'jazz' failed" in caplog.text


def test_search_stations_invalid_payload(session):
    session.get.return_value = json_response({"unexpected": "object"})
    adapter = RadioBrowserAdapter(session=session)

    result = adapter.search_stations("jazz")

    assert result.is_left()
    assert "Invalid response" in result.monoid[0].message


# --- list_tags ---


def test_list_tags_success(session):
    session.get.return_value = json_response(
        [{"name": "jazz", "stationcount": 12}, {"name": "rock", "stationcount": 3}]
    )
    adapter = RadioBrowserAdapter(session=session)

    result = adapter.list_tags()

    assert result.value == [Tag("jazz", 12), Tag("rock", 3)]
    session.get.assert_called_once_with(
        f"{DEFAULT_BASE_URL}/json/tags", params=None, timeout=30.0
    )


def test_list_tags_http_error(session):
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    session.get.return_value = response
    adapter = RadioBrowserAdapter(session=session)

    result = adapter.list_tags()

    assert result.is_left()
    assert "503" in result.monoid[0].message


def test_adapter_replaces_requests_user_agent():
    adapter = RadioBrowserAdapter(session=requests.Session())

    assert adapter._session.headers["User-Agent"] == USER_AGENT
