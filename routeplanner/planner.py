"""Session controller mapping map input events onto the route planning core."""

import logging
from typing import Optional

from .directions import DirectionsProvider
from .interfaces import MapPresenter, RouteOverlay, Waypoint
from .route_builder import RouteBuilder, RoutedBuild
from .route_types import GestureState
from .waypoint_store import WaypointStore

logger = logging.getLogger(__name__)


class RoutePlanner:
    """One map session: a waypoint store, a route builder and a presenter."""

    def __init__(self, presenter: MapPresenter, provider: DirectionsProvider = None,
                 builder: RouteBuilder = None):
        self.presenter = presenter
        self.store = WaypointStore()
        self.builder = builder or RouteBuilder(presenter, provider, padding=getattr(presenter, 'padding', None))

    def handle_long_press(self, state: str, coordinate) -> Optional[Waypoint]:
        """Handle a long-press gesture update.

        Only the end of the gesture places a waypoint; intermediate
        updates are ignored.

        Args:
            state: One of the GestureState constants
            coordinate: Map coordinate under the press, Coordinate or (lat, lon)

        Returns:
            The placed Waypoint, or None if the update was ignored
        """
        if state != GestureState.ENDED:
            return None
        return self.place_waypoint(coordinate)

    def place_waypoint(self, coordinate) -> Waypoint:
        waypoint = self.store.append(coordinate)
        self.presenter.present_placement_feedback(waypoint.coordinate)
        return waypoint

    def draw_polyline(self) -> RouteOverlay:
        """Connect every waypoint with a straight line."""
        return self.builder.build_direct(self.store.snapshot())

    def draw_route(self) -> RoutedBuild:
        """Request driving directions between consecutive waypoints."""
        return self.builder.build_routed(self.store.snapshot())

    def remove_annotations(self) -> None:
        """Drop all overlays and waypoints."""
        logger.info(f"Removing {len(self.store)} waypoints and all overlays")
        self.builder.invalidate()
        self.presenter.clear_overlays()
        clear_markers = getattr(self.presenter, 'clear_waypoint_markers', None)
        if clear_markers is not None:
            clear_markers()
        self.store.clear()

    clear_all = remove_annotations

    @property
    def waypoints(self):
        return self.store.snapshot()

    def close(self) -> None:
        self.builder.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
