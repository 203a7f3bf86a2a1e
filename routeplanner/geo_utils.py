"""Geographic utility functions for route planning."""

from typing import List, Optional, Sequence
from shapely.geometry import LineString, MultiPoint
from geopy.distance import geodesic

from .interfaces import BoundingRegion, Coordinate


def bounding_region(coordinates: Sequence[Coordinate]) -> Optional[BoundingRegion]:
    """Get the bounding region enclosing every coordinate of a path.

    A single point yields a zero-area region; an empty path yields None.
    """
    if not coordinates:
        return None
    min_lon, min_lat, max_lon, max_lat = MultiPoint([c.as_lonlat() for c in coordinates]).bounds
    return BoundingRegion(min_lat, min_lon, max_lat, max_lon)


def path_length_km(coordinates: Sequence[Coordinate]) -> float:
    """Geodesic length of a path in kilometers."""
    total = 0.0
    for start, end in zip(coordinates, coordinates[1:]):
        total += geodesic(start.as_latlon(), end.as_latlon()).km
    return total


def get_midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    """Get the point halfway along the straight line between two coordinates."""
    if start == end:
        return start
    line = LineString([start.as_lonlat(), end.as_lonlat()])
    mid = line.interpolate(0.5, normalized=True)
    return Coordinate(mid.y, mid.x)


def coordinates_from_lonlat(pairs) -> List[Coordinate]:
    """Build coordinates from GeoJSON-style [lon, lat] pairs."""
    return [Coordinate(float(lat), float(lon)) for lon, lat, *_ in pairs]
