"""Input preprocessing for waypoint coordinates."""

import logging
from typing import Optional
from dataclasses import dataclass

from .interfaces import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class ParsedCoordinate:
    """Represents a parsed coordinate with validation status."""
    latitude: float
    longitude: float
    is_valid: bool
    error_message: Optional[str] = None

    def as_coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


def parse_coordinates(coord_input: str) -> ParsedCoordinate:
    """Parse a "lat,lon" waypoint into decimal degrees.

    The pair may be wrapped in [] or () and separated by a comma or by
    whitespace.
    """
    cleaned = coord_input.strip().strip('[]()').replace(',', ' ')
    parts = cleaned.split()
    if len(parts) != 2:
        logger.debug(f"Unrecognised coordinate input: {coord_input!r}")
        return ParsedCoordinate(0, 0, False, "Expected a latitude and a longitude")

    try:
        lat, lon = float(parts[0]), float(parts[1])
    except ValueError as e:
        return ParsedCoordinate(0, 0, False, f"Error parsing coordinates: {str(e)}")
    return validate_coordinates(lat, lon)


def validate_coordinates(lat: float, lon: float) -> ParsedCoordinate:
    """Validate that coordinates are within valid ranges."""
    if not (-90 <= lat <= 90):
        return ParsedCoordinate(lat, lon, False, "Latitude must be between -90 and 90")
    if not (-180 <= lon <= 180):
        return ParsedCoordinate(lat, lon, False, "Longitude must be between -180 and 180")
    return ParsedCoordinate(lat, lon, True)
