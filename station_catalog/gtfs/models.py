"""Data models for GTFS stops and the station catalog."""

from dataclasses import dataclass, field
from typing import Any


class LocationType:
    """GTFS location_type codes used by the catalog."""

    STATION = 1


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive latitude/longitude rectangle."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        """Check whether a coordinate lies inside the box, edges included."""
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon


# Approximate extent of Switzerland
SWITZERLAND_BBOX = BoundingBox(min_lat=45.8, max_lat=47.9, min_lon=5.8, max_lon=10.6)


@dataclass(frozen=True)
class Station:
    """Catalog entry built from one stops.txt row."""

    id: str
    name: str
    lat: float
    lon: float
    type: str  # "station" or "stop"
    code: str | None = None
    platform: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializable form; optional keys are omitted when unset."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "type": self.type,
        }
        if self.code:
            data["code"] = self.code
        if self.platform:
            data["platform"] = self.platform
        return data


@dataclass
class FeedSummary:
    """Column set and first data row of a stops file."""

    columns: list[str]
    example_row: dict[str, str] = field(default_factory=dict)


@dataclass
class ExtractReport:
    """Result of an extraction run."""

    stations: list[Station]
    rows_read: int
    outputs: dict[str, str]  # artifact name -> path
    output_size_bytes: int
    stats: dict[str, int] = field(default_factory=dict)


@dataclass
class ExtractConfig:
    """Configuration for the extraction process."""

    input_path: str = "stops.txt"
    output_path: str = "cff_stations.json"
    sample_path: str = "cff_stations_sample.json"
    write_sample: bool = False
    sample_size: int = 50
    bbox: BoundingBox = SWITZERLAND_BBOX
    locale: str = "fr"
    delimiter: str = ","
    quotechar: str = '"'  # also the escape character
    indent: int = 2
    progress_every: int = 100
