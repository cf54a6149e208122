"""Locale-aware ordering of station names."""

import logging
from functools import cache

from pyuca import Collator

from station_catalog.gtfs.models import Station

logger = logging.getLogger(__name__)

# French uses the root collation order; no tailoring is needed
SUPPORTED_LOCALES = ("fr",)


@cache
def _collator() -> Collator:
    logger.debug("Loading Unicode collation table")
    return Collator()


def collation_key(name: str, locale: str = "fr") -> tuple[int, ...]:
    """
    Build a primary-strength sort key for a name.

    Only base letters count: case and diacritics are ignored, so two names
    with equal keys compare as equal and a stable sort keeps their order.
    Punctuation and spaces keep their collation weights.
    """
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported collation locale: {locale}")

    # Full key is primary weights, 0, secondary weights, 0, tertiary weights
    key = _collator().sort_key(name)
    return key[: key.index(0)] if 0 in key else key


def sort_stations(stations: list[Station], locale: str = "fr") -> list[Station]:
    """Return stations sorted by name, ascending; ties keep their input order."""
    logger.info(f"Sorting {len(stations)} stations by name ({locale} collation)")
    return sorted(stations, key=lambda station: collation_key(station.name, locale))
