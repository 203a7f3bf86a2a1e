"""Constant definitions for route planning."""

class TransportType:
    """Transport modes understood by directions providers."""
    DRIVING = "driving"
    WALKING = "walking"


class OverlayLevel:
    """Drawing level of an overlay relative to the base map."""
    ABOVE_ROADS = "above_roads"
    ABOVE_LABELS = "above_labels"


class SegmentState:
    """Lifecycle of a single segment request."""
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


class GestureState:
    """Phases of a long-press gesture."""
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"


class BuildMode:
    """How waypoints are turned into overlays."""
    DIRECT = "direct"
    ROUTED = "routed"
