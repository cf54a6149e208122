"""Geographic validation of catalog stations."""

import logging

from station_catalog.gtfs.models import SWITZERLAND_BBOX, BoundingBox, Station

logger = logging.getLogger(__name__)


def has_unknown_coordinates(station: Station) -> bool:
    """Check for the (0, 0) pair used when a stop has no coordinates."""
    return station.lat == 0 and station.lon == 0


def is_within_bounds(station: Station, bbox: BoundingBox = SWITZERLAND_BBOX) -> bool:
    """Accept stations inside the bounding box or with unknown coordinates."""
    if bbox.contains(station.lat, station.lon) or has_unknown_coordinates(station):
        return True

    logger.debug(
        f"Station {station.id} ({station.name}) outside bounds: {station.lat}, {station.lon}"
    )
    return False
