"""Folium rendering of waypoints and route overlays."""

import os
import logging
import folium
from typing import List, Optional, Tuple

from .config import DEFAULT_MAP_CENTER, DEFAULT_TILES, DEFAULT_ZOOM
from .interfaces import (
    BoundingRegion, Coordinate, EdgePadding, MapPresenter, OverlayStyle, RouteOverlay
)
from .route_types import OverlayLevel

logger = logging.getLogger(__name__)


class FoliumMapPresenter(MapPresenter):
    """Presenter that keeps map state and renders it to a folium map.

    Overlays and pins are kept as plain data; ``build_map`` draws a fresh
    ``folium.Map`` from them, so clearing never has to touch folium internals.
    """

    def __init__(self, style: OverlayStyle = None, fit_on_render: bool = True,
                 zoom_start: int = DEFAULT_ZOOM, tiles: str = DEFAULT_TILES,
                 padding: EdgePadding = None):
        self.style = style or OverlayStyle()
        self.padding = padding or EdgePadding()
        self.fit_on_render = fit_on_render
        self.zoom_start = zoom_start
        self.tiles = tiles
        self.overlays: List[RouteOverlay] = []
        self.markers: List[Coordinate] = []
        self.view: Optional[Tuple[BoundingRegion, EdgePadding]] = None
        self.focus: Optional[Coordinate] = None

    @property
    def overlay_count(self) -> int:
        return len(self.overlays)

    def clear_overlays(self) -> None:
        logger.debug(f"Clearing {len(self.overlays)} overlays")
        self.overlays = []

    def clear_waypoint_markers(self) -> None:
        self.markers = []
        self.focus = None

    def add_overlay(self, overlay: RouteOverlay) -> None:
        if overlay.is_degenerate:
            logger.debug(f"Skipping degenerate overlay with {len(overlay.coordinates)} points")
            return
        self.overlays.append(overlay)
        # Each rendered overlay pulls the view onto itself
        if self.fit_on_render:
            self.fit_view(overlay.bounds(), self.padding)

    def fit_view(self, region: BoundingRegion, padding: EdgePadding) -> None:
        logger.debug(f"Fitting view to {region.as_folium_bounds()}")
        self.view = (region, padding)

    def present_placement_feedback(self, coordinate: Coordinate) -> None:
        self.markers.append(coordinate)
        self.focus = coordinate

    def _center(self) -> Tuple[float, float]:
        if self.view is not None:
            return self.view[0].center.as_latlon()
        if self.focus is not None:
            return self.focus.as_latlon()
        return DEFAULT_MAP_CENTER

    def build_map(self) -> folium.Map:
        """Draw the current state onto a new folium map."""
        m = folium.Map(location=list(self._center()), zoom_start=self.zoom_start, tiles=self.tiles)

        for i, coord in enumerate(self.markers):
            folium.Marker(
                list(coord.as_latlon()),
                popup=f'Waypoint {i+1}',
                icon=folium.Icon(color='red', icon='map-marker')
            ).add_to(m)

        for overlay in self.overlays:
            tooltip = None
            if overlay.segment is not None:
                tooltip = f"Segment {overlay.segment.start.index + 1} → {overlay.segment.end.index + 1}"
            folium.PolyLine(
                [c.as_latlon() for c in overlay.coordinates],
                weight=self.style.line_width,
                color=self.style.color,
                opacity=self.style.opacity,
                dash_array=None if overlay.level == OverlayLevel.ABOVE_ROADS else '6',
                tooltip=tooltip
            ).add_to(m)

        if self.view is not None:
            region, padding = self.view
            m.fit_bounds(
                region.as_folium_bounds(),
                padding_top_left=(padding.left, padding.top),
                padding_bottom_right=(padding.right, padding.bottom)
            )
        return m

    def save(self, filename: str = "route_map.html") -> str:
        """Render the map to an HTML file.

        Returns:
            Absolute path of the written file
        """
        output_path = os.path.abspath(filename)
        self.build_map().save(output_path)
        logger.info(f"Map with {len(self.markers)} waypoints and {len(self.overlays)} overlays saved to {output_path}")
        return output_path
