"""Directions providers resolving one segment request into a routed path."""

import logging
from typing import Dict, List, Optional, Tuple

import networkx as nx
import osmnx as ox
import requests
from osmnx._errors import InsufficientResponseError

from .config import DEFAULT_OSRM_URL, OSMNX_GRAPH_DIST, REQUEST_TIMEOUT
from .geo_utils import coordinates_from_lonlat, get_midpoint
from .interfaces import Coordinate, RouteOverlay, SegmentRequest
from .route_types import OverlayLevel, TransportType

logger = logging.getLogger(__name__)


class SegmentResolutionFailed(RuntimeError):
    """Raised when a directions provider returns an error or no route."""

    def __init__(self, reason: str, request: Optional[SegmentRequest] = None):
        super().__init__(reason)
        self.reason = reason
        self.request = request


class DirectionsProvider:
    """Base class for services that compute a path between two points.

    Subclasses implement ``_fetch_path``; ``resolve`` turns its result into a
    segment overlay and normalises empty results into failures.
    """

    def resolve(self, request: SegmentRequest) -> RouteOverlay:
        """Resolve a segment request.

        Args:
            request: Segment to route

        Returns:
            RouteOverlay for the segment, drawn above roads

        Raises:
            SegmentResolutionFailed: the provider failed or found no route
        """
        start = request.start.coordinate
        end = request.end.coordinate
        logger.debug(f"Requesting {request.transport_type} directions for {request.describe()}")
        try:
            path = self._fetch_path(start, end, request.transport_type)
        except SegmentResolutionFailed as e:
            if e.request is None:
                e.request = request
            raise

        if not path:
            raise SegmentResolutionFailed("Directions not available: no route returned", request)

        logger.debug(f"Route found with {len(path)} points")
        return RouteOverlay(path, OverlayLevel.ABOVE_ROADS, request)

    def _fetch_path(self, start: Coordinate, end: Coordinate, transport_type: str) -> List[Coordinate]:
        raise NotImplementedError


class OSRMDirectionsProvider(DirectionsProvider):
    """Directions from an OSRM HTTP routing service."""

    PROFILES = {
        TransportType.DRIVING: 'driving',
        TransportType.WALKING: 'foot',
    }

    def __init__(self, base_url: str = None, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        if not base_url:
            base_url = DEFAULT_OSRM_URL
            logger.debug(f"No URL provided, using default: {base_url}")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_url(self, start: Coordinate, end: Coordinate, transport_type: str) -> str:
        profile = self.PROFILES.get(transport_type)
        if profile is None:
            raise SegmentResolutionFailed(f"Unsupported transport type: {transport_type}")
        return (f"{self.base_url}/route/v1/{profile}/"
                f"{start.longitude},{start.latitude};{end.longitude},{end.latitude}")

    def _fetch_path(self, start: Coordinate, end: Coordinate, transport_type: str) -> List[Coordinate]:
        url = self.build_url(start, end, transport_type)
        params = {'overview': 'full', 'geometries': 'geojson'}

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise SegmentResolutionFailed(f"Directions request failed: {str(e)}") from e
        except ValueError as e:
            raise SegmentResolutionFailed(f"Invalid directions response: {str(e)}") from e

        code = data.get('code')
        if code != 'Ok':
            message = data.get('message', 'no message')
            raise SegmentResolutionFailed(f"Directions not available ({code}): {message}")

        routes = data.get('routes') or []
        if not routes:
            return []

        # Only the first (preferred) route is used
        route = routes[0]
        return coordinates_from_lonlat(route['geometry']['coordinates'])


class OSMnxDirectionsProvider(DirectionsProvider):
    """Shortest driving path on an OpenStreetMap road graph.

    The graph around each segment's midpoint is downloaded once and cached.
    """

    NETWORK_TYPES = {
        TransportType.DRIVING: 'drive',
        TransportType.WALKING: 'walk',
    }

    def __init__(self, dist: float = OSMNX_GRAPH_DIST):
        self.dist = dist
        self._graphs: Dict[Tuple[float, float, str], nx.MultiDiGraph] = {}

    def _road_graph(self, centre: Coordinate, network_type: str) -> nx.MultiDiGraph:
        key = (round(centre.latitude, 3), round(centre.longitude, 3), network_type)
        if key not in self._graphs:
            logger.info(f"Fetching OSM {network_type} graph around {centre.as_latlon()}")
            self._graphs[key] = ox.graph_from_point(
                centre.as_latlon(), dist=self.dist, network_type=network_type
            )
        return self._graphs[key]

    def _fetch_path(self, start: Coordinate, end: Coordinate, transport_type: str) -> List[Coordinate]:
        network_type = self.NETWORK_TYPES.get(transport_type)
        if network_type is None:
            raise SegmentResolutionFailed(f"Unsupported transport type: {transport_type}")

        try:
            G = self._road_graph(get_midpoint(start, end), network_type)
            orig_id = ox.distance.nearest_nodes(G, start.longitude, start.latitude)
            dest_id = ox.distance.nearest_nodes(G, end.longitude, end.latitude)
            route_nodes = nx.shortest_path(G, orig_id, dest_id, weight='length')
        except InsufficientResponseError as e:
            raise SegmentResolutionFailed(f"OSM returned no road data: {str(e)}") from e
        except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
            raise SegmentResolutionFailed("No path in road graph") from e

        return [Coordinate(G.nodes[n]['y'], G.nodes[n]['x']) for n in route_nodes]
