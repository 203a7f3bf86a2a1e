"""Turns waypoint snapshots into route overlays."""

import logging
import threading
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from functools import partial
from typing import List, Optional, Sequence

from .config import MAX_CONCURRENT_REQUESTS
from .directions import DirectionsProvider, OSRMDirectionsProvider, SegmentResolutionFailed
from .interfaces import (
    EdgePadding, MapPresenter, RouteOverlay, SegmentRequest, SegmentResult, Waypoint
)
from .route_types import SegmentState, TransportType

logger = logging.getLogger(__name__)


class RoutedBuild:
    """Progress of one routed-mode build.

    Results are appended in completion order, which need not match waypoint
    order. A build whose generation has been superseded is ``cancelled``: its
    remaining segments still complete but are never rendered.
    """

    def __init__(self, generation: int, requests: Sequence[SegmentRequest]):
        self.generation = generation
        self.requests: List[SegmentRequest] = list(requests)
        self.results: List[SegmentResult] = []
        self.cancelled = False
        self._remaining = len(self.requests)
        self._finished = threading.Event()
        if self._remaining == 0:
            self._finished.set()

    @property
    def overlays(self) -> List[RouteOverlay]:
        return [r.overlay for r in self.results if r.resolved]

    @property
    def failures(self) -> List[SegmentResult]:
        return [r for r in self.results if r.state == SegmentState.FAILED]

    def state_of(self, request: SegmentRequest) -> str:
        for result in self.results:
            if result.request == request:
                return result.state
        return SegmentState.PENDING

    def done(self) -> bool:
        return self._finished.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every segment reached a terminal state.

        Returns:
            True if the build finished within the timeout
        """
        return self._finished.wait(timeout)

    def _record(self, result: SegmentResult) -> None:
        self.results.append(result)
        self._remaining -= 1
        if self._remaining <= 0:
            self._finished.set()


class RouteBuilder:
    """Builds direct polylines and routed paths onto a presenter.

    Every build clears the presenter's overlays first. Routed segments are
    resolved on an executor and rendered as they complete; presenter calls
    are serialized by a single lock.
    """

    def __init__(self, presenter: MapPresenter, provider: DirectionsProvider = None,
                 executor: Executor = None, padding: EdgePadding = None):
        self.presenter = presenter
        self.provider = provider or OSRMDirectionsProvider()
        self.padding = padding or EdgePadding()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=MAX_CONCURRENT_REQUESTS, thread_name_prefix='segment'
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._current: Optional[RoutedBuild] = None
        self._closed = False

    @property
    def generation(self) -> int:
        return self._generation

    def invalidate(self) -> None:
        """Supersede any routed build still in flight."""
        with self._lock:
            self._supersede()

    def _supersede(self) -> None:
        self._generation += 1
        if self._current is not None and not self._current.done():
            logger.debug(f"Superseding routed build {self._current.generation}")
            self._current.cancelled = True
        self._current = None

    @staticmethod
    def segment_requests(waypoints: Sequence[Waypoint],
                         transport_type: str = TransportType.DRIVING) -> List[SegmentRequest]:
        """Pair each waypoint with its successor."""
        return [
            SegmentRequest(waypoints[i], waypoints[i + 1], transport_type)
            for i in range(len(waypoints) - 1)
        ]

    def build_direct(self, waypoints: Sequence[Waypoint]) -> RouteOverlay:
        """Draw one straight polyline through every waypoint in order.

        Fewer than two waypoints give a degenerate overlay, not an error.
        """
        overlay = RouteOverlay.from_waypoints(waypoints)
        with self._lock:
            self._supersede()
            self.presenter.clear_overlays()
            self.presenter.add_overlay(overlay)
        logger.info(f"Direct polyline through {len(overlay.coordinates)} waypoints")
        return overlay

    def build_routed(self, waypoints: Sequence[Waypoint]) -> RoutedBuild:
        """Request driving directions between consecutive waypoints.

        The view is fitted to the straight-line extent of all waypoints
        before any segment is requested. Segments are added as they arrive;
        failed ones are logged and dropped.

        Raises:
            RuntimeError: the builder has been shut down
        """
        if self._closed:
            raise RuntimeError("RouteBuilder has been shut down")
        segment_requests = self.segment_requests(waypoints)
        region = RouteOverlay.from_waypoints(waypoints).bounds()

        with self._lock:
            self._supersede()
            build = RoutedBuild(self._generation, segment_requests)
            self._current = build
            self.presenter.clear_overlays()
            if region is not None:
                self.presenter.fit_view(region, self.padding)

        logger.info(f"Routing {len(segment_requests)} segments (build {build.generation})")
        for request in segment_requests:
            try:
                future = self._executor.submit(self.provider.resolve, request)
            except RuntimeError as e:
                # Executor already shut down
                future = Future()
                future.set_exception(SegmentResolutionFailed(f"Request not submitted: {str(e)}", request))
            future.add_done_callback(partial(self._on_segment_done, build, request))
        return build

    def _on_segment_done(self, build: RoutedBuild, request: SegmentRequest, future) -> None:
        try:
            overlay = future.result()
        except CancelledError:
            result = SegmentResult(request, SegmentState.FAILED, reason="cancelled")
        except SegmentResolutionFailed as e:
            logger.error(f"Error: {e.reason} [{request.describe()}]")
            result = SegmentResult(request, SegmentState.FAILED, reason=e.reason)
        except Exception as e:
            logger.error(f"Error: {str(e)} [{request.describe()}]")
            result = SegmentResult(request, SegmentState.FAILED, reason=str(e))
        else:
            result = SegmentResult(request, SegmentState.RESOLVED, overlay=overlay)

        with self._lock:
            try:
                if result.resolved:
                    if build.generation == self._generation:
                        self.presenter.add_overlay(overlay)
                    else:
                        logger.debug(f"Dropping segment {request.describe()} from superseded build {build.generation}")
            except Exception:
                logger.exception(f"Presenter failed to draw segment {request.describe()}")
            finally:
                build._record(result)
                finished = build.done()
                if finished and self._current is build:
                    self._current = None

        if finished:
            logger.info(f"Build {build.generation} finished: {len(build.overlays)} resolved, "
                        f"{len(build.failures)} failed")

    def shutdown(self) -> None:
        """Release the executor if this builder created it.

        Routed builds are refused afterwards; direct builds still work.
        """
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
