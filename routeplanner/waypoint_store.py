"""Ordered storage of user-placed waypoints."""

import logging
from typing import Iterator, List, Tuple

from .interfaces import Coordinate, Waypoint

logger = logging.getLogger(__name__)


class WaypointStore:
    """Append-only sequence of waypoints, cleared as a whole.

    Duplicates are allowed and there is no upper bound. Access is expected
    from a single writer (the UI event stream), so no locking is done here.
    """

    def __init__(self):
        self._waypoints: List[Waypoint] = []

    def append(self, coordinate) -> Waypoint:
        """Add a waypoint at the end of the sequence.

        Args:
            coordinate: Coordinate or (lat, lon) pair

        Returns:
            The new Waypoint
        """
        waypoint = Waypoint(Coordinate.from_value(coordinate), len(self._waypoints))
        self._waypoints.append(waypoint)
        logger.debug(f"Placed waypoint #{waypoint.index} at {waypoint.coordinate.as_latlon()}")
        return waypoint

    def clear(self) -> None:
        """Remove every waypoint."""
        if self._waypoints:
            logger.debug(f"Clearing {len(self._waypoints)} waypoints")
        self._waypoints = []

    def snapshot(self) -> Tuple[Waypoint, ...]:
        """Current waypoints in insertion order, detached from later changes."""
        return tuple(self._waypoints)

    def coordinates(self) -> List[Coordinate]:
        return [wp.coordinate for wp in self._waypoints]

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.snapshot())
