"""Pytest configuration and fixtures."""

import csv
from collections.abc import Callable
from pathlib import Path

import pytest

FIELDNAMES = [
    "stop_id",
    "stop_name",
    "stop_lat",
    "stop_lon",
    "location_type",
    "parent_station",
    "stop_code",
    "platform_code",
]


@pytest.fixture
def stops_basic() -> Path:
    """Path to a small Swiss stops.txt fixture."""
    return Path(__file__).parent / "fixtures" / "stops_basic" / "stops.txt"


@pytest.fixture
def stops_edgecases() -> Path:
    """Path to a stops.txt with missing and extra columns."""
    return Path(__file__).parent / "fixtures" / "stops_edgecases" / "stops.txt"


@pytest.fixture
def stops_malformed() -> Path:
    """Path to a stops.txt with broken quoting."""
    return Path(__file__).parent / "fixtures" / "stops_malformed" / "stops.txt"


@pytest.fixture
def write_stops(tmp_path: Path) -> Callable[[list[dict[str, str]]], Path]:
    """Factory writing rows to a temporary stops.txt."""

    def _write(rows: list[dict[str, str]]) -> Path:
        path = tmp_path / "stops.txt"
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return path

    return _write


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Temporary output directory."""
    output_dir = tmp_path / "catalog"
    output_dir.mkdir()
    return output_dir
