"""GTFS stops.txt reader."""

import csv
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from station_catalog.errors import InputNotFound, MalformedRow
from station_catalog.gtfs.models import FeedSummary

logger = logging.getLogger(__name__)


class StopsReader:
    """Stream rows from a GTFS stops file."""

    def __init__(self, stops_path: str, delimiter: str = ",", quotechar: str = '"') -> None:
        """Initialize reader, failing early if the file is missing."""
        self.stops_path = Path(stops_path)
        if not self.stops_path.is_file():
            listing = self._list_directory(self.stops_path.parent)
            logger.error(f"Input file {stops_path} does not exist")
            logger.error("Directory contents:")
            for name in listing:
                logger.error(f"   - {name}")
            raise InputNotFound(str(stops_path), listing)

        self.delimiter = delimiter
        self.quotechar = quotechar

    def __iter__(self) -> Iterator[dict[str, str]]:
        return self.rows()

    def rows(self) -> Iterator[dict[str, str]]:
        """Yield one mapping of column name to value per data row, in file order."""
        logger.info(f"Reading {self.stops_path}")
        with self._open() as f:
            reader = self._dict_reader(f)
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    break
                except csv.Error as e:
                    raise MalformedRow(str(self.stops_path), reader.line_num, str(e)) from e

                yield self._clean_row(row)

    def inspect(self) -> FeedSummary:
        """Return the header columns and the first data row."""
        with self._open() as f:
            reader = self._dict_reader(f)
            try:
                first = next(reader, None)
                columns = list(reader.fieldnames or [])
            except csv.Error as e:
                raise MalformedRow(str(self.stops_path), reader.line_num, str(e)) from e

        example = self._clean_row(first) if first is not None else {}
        return FeedSummary(columns=columns, example_row=example)

    def _open(self) -> TextIO:
        # Undecodable bytes become U+FFFD instead of failing the row
        return open(self.stops_path, encoding="utf-8-sig", errors="replace", newline="")

    def _dict_reader(self, f: TextIO) -> csv.DictReader:
        return csv.DictReader(
            f,
            delimiter=self.delimiter,
            quotechar=self.quotechar,
            doublequote=True,
            strict=True,
        )

    @staticmethod
    def _clean_row(row: dict) -> dict[str, str]:
        """Drop overflow columns and padding for short rows."""
        return {key: value for key, value in row.items() if key is not None and value is not None}

    @staticmethod
    def _list_directory(directory: Path) -> list[str]:
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError:
            return []
