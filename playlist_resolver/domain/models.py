from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Station:
    """Represents a radio station listed by the station directory."""
    name: str
    url: str
    codec: str = ""
    bitrate: int = 0
    url_resolved: str = ""
    stationuuid: str = ""
    homepage: str = ""
    favicon: str = ""
    tags: str = ""
    country: str = ""
    votes: int = 0
    clickcount: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Station":
        return cls(
            name=(data.get("name") or "").strip(),
            url=data.get("url") or "",
            codec=data.get("codec") or "",
            bitrate=int(data.get("bitrate") or 0),
            url_resolved=data.get("url_resolved") or "",
            stationuuid=data.get("stationuuid") or "",
            homepage=data.get("homepage") or "",
            favicon=data.get("favicon") or "",
            tags=data.get("tags") or "",
            country=data.get("country") or "",
            votes=int(data.get("votes") or 0),
            clickcount=int(data.get("clickcount") or 0),
        )


@dataclass(frozen=True)
class Tag:
    """A station directory tag and the number of stations carrying it."""
    name: str
    stationcount: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Tag":
        return cls(name=data.get("name") or "", stationcount=int(data.get("stationcount") or 0))
