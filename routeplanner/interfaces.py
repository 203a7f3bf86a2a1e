"""Type definitions and interfaces for route planning."""

from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .config import (
    DEFAULT_EDGE_PADDING, OVERLAY_COLOR, OVERLAY_LINE_WIDTH, OVERLAY_OPACITY
)
from .route_types import OverlayLevel, SegmentState, TransportType


@dataclass(frozen=True)
class Coordinate:
    """A geographic point in decimal degrees."""
    latitude: float
    longitude: float

    @classmethod
    def from_value(cls, value) -> 'Coordinate':
        """Build a Coordinate from a Coordinate or a (lat, lon) pair."""
        if isinstance(value, Coordinate):
            return value
        lat, lon = value
        return cls(float(lat), float(lon))

    def as_lonlat(self) -> Tuple[float, float]:
        return (self.longitude, self.latitude)

    def as_latlon(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Waypoint:
    """A user-placed coordinate and its insertion order."""
    coordinate: Coordinate
    index: int


@dataclass(frozen=True)
class SegmentRequest:
    """One directions query between consecutive waypoints."""
    start: Waypoint
    end: Waypoint
    transport_type: str = TransportType.DRIVING

    def describe(self) -> str:
        s, e = self.start.coordinate, self.end.coordinate
        return (f"#{self.start.index} ({s.latitude:.5f}, {s.longitude:.5f}) -> "
                f"#{self.end.index} ({e.latitude:.5f}, {e.longitude:.5f})")


@dataclass(frozen=True)
class BoundingRegion:
    """Axis-aligned extent of a path."""
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> Coordinate:
        return Coordinate((self.min_lat + self.max_lat) / 2.0,
                          (self.min_lon + self.max_lon) / 2.0)

    def as_folium_bounds(self) -> List[List[float]]:
        return [[self.min_lat, self.min_lon], [self.max_lat, self.max_lon]]


@dataclass(frozen=True)
class EdgePadding:
    """Screen-space margin kept around a fitted region, in points."""
    top: float = DEFAULT_EDGE_PADDING
    left: float = DEFAULT_EDGE_PADDING
    bottom: float = DEFAULT_EDGE_PADDING
    right: float = DEFAULT_EDGE_PADDING


@dataclass(frozen=True)
class OverlayStyle:
    """Stroke settings used when drawing overlays."""
    line_width: float = OVERLAY_LINE_WIDTH
    color: str = OVERLAY_COLOR
    opacity: float = OVERLAY_OPACITY


@dataclass
class RouteOverlay:
    """A renderable path: the direct polyline or one routed segment."""
    coordinates: List[Coordinate]
    level: str = OverlayLevel.ABOVE_LABELS
    segment: Optional[SegmentRequest] = None

    @classmethod
    def from_waypoints(cls, waypoints: Sequence[Waypoint]) -> 'RouteOverlay':
        return cls([wp.coordinate for wp in waypoints])

    @property
    def is_degenerate(self) -> bool:
        """True when the path has fewer than two points to connect."""
        return len(self.coordinates) < 2

    def bounds(self) -> Optional[BoundingRegion]:
        from .geo_utils import bounding_region
        return bounding_region(self.coordinates)

    def length_km(self) -> float:
        from .geo_utils import path_length_km
        return path_length_km(self.coordinates)


@dataclass
class SegmentResult:
    """Terminal outcome of a segment request."""
    request: SegmentRequest
    state: str
    overlay: Optional[RouteOverlay] = None
    reason: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.state == SegmentState.RESOLVED


class MapPresenter:
    """Rendering surface the route builder draws on.

    Implementations only need to draw what they are given; the builder owns
    ordering and clearing.
    """

    def clear_overlays(self) -> None:
        raise NotImplementedError

    def add_overlay(self, overlay: RouteOverlay) -> None:
        raise NotImplementedError

    def fit_view(self, region: BoundingRegion, padding: EdgePadding) -> None:
        raise NotImplementedError

    def present_placement_feedback(self, coordinate: Coordinate) -> None:
        raise NotImplementedError
