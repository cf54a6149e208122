"""Tests for JSON output."""

import json
from pathlib import Path

import pytest

from station_catalog.errors import WriteFailure
from station_catalog.gtfs.models import Station
from station_catalog.output.json import (
    serialize_stations,
    write_sample_json,
    write_stations_json,
)


def _stations(count: int) -> list[Station]:
    return [
        Station(id=str(i), name=f"Station {i:03d}", lat=46.0, lon=7.0, type="stop")
        for i in range(count)
    ]


def test_write_stations_json(tmp_output: Path) -> None:
    """Test writing the catalog."""
    stations = [
        Station(id="1", name="Genève", lat=46.2102, lon=6.1424, type="station", code="GE"),
        Station(id="2", name="Unbekannt", lat=0.0, lon=0.0, type="stop"),
    ]
    path = tmp_output / "cff_stations.json"

    size = write_stations_json(path, stations)

    assert size == path.stat().st_size
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    assert data == [
        {
            "id": "1",
            "name": "Genève",
            "lat": 46.2102,
            "lon": 6.1424,
            "type": "station",
            "code": "GE",
        },
        {"id": "2", "name": "Unbekannt", "lat": 0.0, "lon": 0.0, "type": "stop"},
    ]


def test_json_preserves_accents_and_indent() -> None:
    """Test accented names are written as-is with two-space indentation."""
    text = serialize_stations([Station(id="1", name="Zürich HB", lat=0.0, lon=0.0, type="stop")])

    assert "Zürich HB" in text
    assert "\\u00fc" not in text
    assert text.startswith('[\n  {\n    "id": "1"')


def test_write_overwrites(tmp_output: Path) -> None:
    """Test an existing file is fully replaced."""
    path = tmp_output / "cff_stations.json"
    write_stations_json(path, _stations(10))
    write_stations_json(path, _stations(2))

    with open(path, encoding="utf-8") as f:
        assert len(json.load(f)) == 2


def test_write_creates_parent(tmp_output: Path) -> None:
    """Test missing parent directories are created."""
    path = tmp_output / "nested" / "cff_stations.json"
    write_stations_json(path, _stations(1))

    assert path.exists()


def test_write_failure(tmp_output: Path) -> None:
    """Test an unwritable destination raises WriteFailure."""
    path = tmp_output / "is_a_dir"
    path.mkdir()

    with pytest.raises(WriteFailure) as exc_info:
        write_stations_json(path, _stations(1))

    assert isinstance(exc_info.value.__cause__, OSError)
    assert exc_info.value.path == str(path)


@pytest.mark.parametrize(("count", "expected"), [(120, 50), (50, 50), (7, 7), (0, 0)])
def test_write_sample(tmp_output: Path, count: int, expected: int) -> None:
    """Test the sample holds the first min(50, n) stations."""
    stations = _stations(count)
    path = tmp_output / "cff_stations_sample.json"

    write_sample_json(path, stations)

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    assert len(data) == expected
    assert data == [s.to_dict() for s in stations[:expected]]


def test_json_stable_output(tmp_output: Path) -> None:
    """Test output is deterministic."""
    path = tmp_output / "cff_stations.json"

    write_stations_json(path, _stations(5))
    content1 = path.read_text(encoding="utf-8")
    write_stations_json(path, _stations(5))
    content2 = path.read_text(encoding="utf-8")

    assert content1 == content2


def test_json_whole_coordinates_written_as_floats() -> None:
    """Test whole-number and unknown coordinates keep their float form."""
    text = serialize_stations(
        [
            Station(id="1", name="Rand", lat=47.0, lon=8.0, type="stop"),
            Station(id="2", name="Unbekannt", lat=0.0, lon=0.0, type="stop"),
        ]
    )

    assert '"lat": 47.0' in text
    assert '"lon": 8.0' in text
    assert '"lat": 0.0' in text
