"""Station Catalog - Extract a sorted station list from GTFS stops for autocomplete."""

from station_catalog.api import analyze, extract
from station_catalog.version import VERSION

__version__ = VERSION
__all__ = ["VERSION", "analyze", "extract"]
