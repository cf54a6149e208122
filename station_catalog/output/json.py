"""JSON catalog output."""

import json
import logging
from pathlib import Path

from station_catalog.errors import WriteFailure
from station_catalog.gtfs.models import Station

logger = logging.getLogger(__name__)


def serialize_stations(stations: list[Station], indent: int = 2) -> str:
    """Render stations as a pretty-printed JSON array."""
    return json.dumps(
        [station.to_dict() for station in stations],
        indent=indent,
        ensure_ascii=False,
    )


def write_stations_json(output_path: Path, stations: list[Station], indent: int = 2) -> int:
    """
    Write the station catalog, replacing any existing file.

    The document is fully rendered before the file is opened.

    Returns:
        Size of the written file in bytes
    """
    data = serialize_stations(stations, indent=indent)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(data)
        size = output_path.stat().st_size
    except OSError as e:
        logger.error(f"Failed to write {output_path}: {e}")
        raise WriteFailure(str(output_path), str(e)) from e

    logger.info(f"Wrote {len(stations)} stations to {output_path}")
    return size


def write_sample_json(
    output_path: Path, stations: list[Station], size: int = 50, indent: int = 2
) -> int:
    """Write the first `size` stations of an already sorted catalog."""
    sample = stations[:size]
    logger.info(f"Writing sample of {len(sample)} stations")
    return write_stations_json(output_path, sample, indent=indent)
