"""Configuration constants for route planning."""

import os

# Directions service
DEFAULT_OSRM_URL = os.getenv('ROUTEPLANNER_OSRM_URL', 'https://router.project-osrm.org')
REQUEST_TIMEOUT = float(os.getenv('ROUTEPLANNER_REQUEST_TIMEOUT', '10'))
MAX_CONCURRENT_REQUESTS = int(os.getenv('ROUTEPLANNER_MAX_WORKERS', '4'))

# Offline drive graph search radius around a segment midpoint, in meters
OSMNX_GRAPH_DIST = 2000

# Camera fit padding in screen points (top, left, bottom, right)
DEFAULT_EDGE_PADDING = 50

# Overlay rendering
OVERLAY_LINE_WIDTH = 3.0
OVERLAY_COLOR = 'orange'
OVERLAY_OPACITY = 0.5

# Map defaults
DEFAULT_ZOOM = 13
DEFAULT_TILES = 'OpenStreetMap'
DEFAULT_MAP_CENTER = (25.0330, 121.5654)  # (lat, lon)

