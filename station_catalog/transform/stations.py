"""Station filtering and projection."""

import re
from collections.abc import Mapping

from station_catalog.gtfs.models import LocationType, Station

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: str | None) -> int:
    """Parse the leading integer of a field, 0 when there is none."""
    if not value:
        return 0
    match = _INT_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def parse_float(value: str | None) -> float:
    """Parse the leading decimal of a field, 0.0 when there is none or it is zero."""
    if not value:
        return 0.0
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return 0.0
    # Normalizes -0.0 to 0.0
    return float(match.group(1)) or 0.0


def is_catalog_candidate(row: Mapping[str, str]) -> bool:
    """
    Decide whether a stops.txt row belongs in the catalog.

    A row qualifies when it is a station (location_type 1) or a top-level stop
    (no parent_station), and it has a non-blank stop_name.
    """
    location_type = parse_int(row.get("location_type"))
    is_main_station = location_type == LocationType.STATION
    is_main_stop = not row.get("parent_station")
    has_valid_name = bool((row.get("stop_name") or "").strip())

    return (is_main_station or is_main_stop) and has_valid_name


def project_station(row: Mapping[str, str], accepted_count: int) -> Station | None:
    """
    Build a Station from a stops.txt row, or None if the row is filtered out.

    accepted_count is the number of stations kept so far; it names the
    synthetic id used when the row has no stop_id.
    """
    if not is_catalog_candidate(row):
        return None

    location_type = parse_int(row.get("location_type"))

    return Station(
        id=row.get("stop_id") or f"station_{accepted_count}",
        name=row["stop_name"].strip(),
        lat=parse_float(row.get("stop_lat")),
        lon=parse_float(row.get("stop_lon")),
        type="station" if location_type == LocationType.STATION else "stop",
        code=row.get("stop_code") or None,
        platform=row.get("platform_code") or None,
    )
