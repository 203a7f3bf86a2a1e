"""Route planning package."""

from .interfaces import (
    BoundingRegion, Coordinate, EdgePadding, MapPresenter, OverlayStyle,
    RouteOverlay, SegmentRequest, SegmentResult, Waypoint
)
from .route_types import BuildMode, GestureState, OverlayLevel, SegmentState, TransportType
from .waypoint_store import WaypointStore
from .directions import (
    DirectionsProvider, OSMnxDirectionsProvider, OSRMDirectionsProvider, SegmentResolutionFailed
)
from .route_builder import RouteBuilder, RoutedBuild
from .planner import RoutePlanner
from .visualization import FoliumMapPresenter
from .preprocessing import ParsedCoordinate, parse_coordinates

__all__ = [
    'BoundingRegion', 'Coordinate', 'EdgePadding', 'MapPresenter', 'OverlayStyle',
    'RouteOverlay', 'SegmentRequest', 'SegmentResult', 'Waypoint',
    'BuildMode', 'GestureState', 'OverlayLevel', 'SegmentState', 'TransportType',
    'WaypointStore', 'DirectionsProvider', 'OSMnxDirectionsProvider',
    'OSRMDirectionsProvider', 'SegmentResolutionFailed', 'RouteBuilder', 'RoutedBuild',
    'RoutePlanner', 'FoliumMapPresenter', 'ParsedCoordinate', 'parse_coordinates'
]
