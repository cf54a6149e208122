"""Public API for station-catalog."""

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from pathlib import Path

from station_catalog.gtfs.models import (
    SWITZERLAND_BBOX,
    BoundingBox,
    ExtractConfig,
    ExtractReport,
    FeedSummary,
    Station,
)
from station_catalog.gtfs.reader import StopsReader
from station_catalog.gtfs.validator import is_within_bounds
from station_catalog.output.json import write_sample_json, write_stations_json
from station_catalog.transform.collation import sort_stations
from station_catalog.transform.stations import project_station

logger = logging.getLogger(__name__)


def filter_stations(
    rows: Iterable[Mapping[str, str]],
    bbox: BoundingBox = SWITZERLAND_BBOX,
    progress_every: int = 100,
) -> tuple[list[Station], dict[str, int]]:
    """
    Keep catalog stations from a stream of stops.txt rows, in file order.

    Returns:
        Accepted stations and counters for the pass
    """
    stations: list[Station] = []
    stats = {"rows_read": 0, "rejected_filter": 0, "rejected_bounds": 0}

    for row in rows:
        stats["rows_read"] += 1
        if stats["rows_read"] <= 3:
            logger.debug(f"Row {stats['rows_read']} columns: {list(row)}")

        station = project_station(row, len(stations))
        if station is None:
            stats["rejected_filter"] += 1
            continue

        if not is_within_bounds(station, bbox):
            stats["rejected_bounds"] += 1
            continue

        stations.append(station)
        if progress_every and len(stations) % progress_every == 0:
            logger.info(f"{len(stations)} stations processed...")

    return stations, stats


def extract(config: ExtractConfig | None = None) -> ExtractReport:
    """
    Build the station catalog from a GTFS stops file.

    Args:
        config: Optional extraction configuration

    Returns:
        ExtractReport with the sorted stations and written artifacts
    """
    if config is None:
        config = ExtractConfig()

    logger.info(f"Starting extraction: {config.input_path} -> {config.output_path}")
    start_time = datetime.now(UTC)

    # Read and filter
    reader = StopsReader(config.input_path, delimiter=config.delimiter, quotechar=config.quotechar)
    stations, stats = filter_stations(reader, config.bbox, config.progress_every)

    logger.info(f"Total rows read: {stats['rows_read']}")
    logger.info(f"Stations extracted: {len(stations)}")

    # Sort for autocomplete
    stations = sort_stations(stations, config.locale)

    # Write outputs
    outputs: dict[str, str] = {}
    output_path = Path(config.output_path)
    size = write_stations_json(output_path, stations, indent=config.indent)
    outputs["catalog"] = str(output_path)
    logger.info(f"File size: {round(size / 1024)} KB")

    sample_count = 0
    if config.write_sample:
        sample_path = Path(config.sample_path)
        write_sample_json(sample_path, stations, size=config.sample_size, indent=config.indent)
        outputs["sample"] = str(sample_path)
        sample_count = min(config.sample_size, len(stations))

    if stations:
        logger.info("Example stations:")
        for idx, station in enumerate(stations[:5], start=1):
            logger.info(f"   {idx}. {station.name} ({station.id}) - {station.type}")

    stats.update(
        {
            "stations": len(stations),
            "main_stations": sum(1 for s in stations if s.type == "station"),
            "stops": sum(1 for s in stations if s.type == "stop"),
            "sample": sample_count,
        }
    )

    elapsed = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(f"Extraction completed in {elapsed:.2f}s")

    return ExtractReport(
        stations=stations,
        rows_read=stats["rows_read"],
        outputs=outputs,
        output_size_bytes=size,
        stats=stats,
    )


def analyze(input_path: str, delimiter: str = ",", quotechar: str = '"') -> FeedSummary:
    """
    Report the column layout of a stops file and one example row.

    Args:
        input_path: Path to stops.txt

    Returns:
        FeedSummary with the header columns and first data row
    """
    logger.info(f"Analyzing structure of {input_path}")

    reader = StopsReader(input_path, delimiter=delimiter, quotechar=quotechar)
    summary = reader.inspect()

    logger.info("Detected columns:")
    for idx, column in enumerate(summary.columns, start=1):
        logger.info(f"   {idx}. {column}")

    logger.info("Example row:")
    logger.info(json.dumps(summary.example_row, indent=2, ensure_ascii=False))

    return summary
