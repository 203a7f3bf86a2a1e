import argparse
import logging
import sys

from dotenv import load_dotenv

from routeplanner import (
    BuildMode, FoliumMapPresenter, OSMnxDirectionsProvider, OSRMDirectionsProvider,
    RoutePlanner, parse_coordinates
)
from routeplanner.config import REQUEST_TIMEOUT

load_dotenv()

logger = logging.getLogger("plan_route")


def make_provider(name: str, osrm_url: str = None):
    if name == "osmnx":
        return OSMnxDirectionsProvider()
    return OSRMDirectionsProvider(osrm_url)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drop waypoints and draw a polyline or driving route between them.")
    parser.add_argument("-p", "--point", action="append", default=[], dest="points",
                        help='Waypoint as "lat,lon" (repeatable, in visiting order)')
    parser.add_argument("-m", "--mode", choices=[BuildMode.DIRECT, BuildMode.ROUTED], default=BuildMode.ROUTED)
    parser.add_argument("--provider", choices=["osrm", "osmnx"], default="osrm")
    parser.add_argument("--osrm-url", default=None, help="Base URL of the OSRM service")
    parser.add_argument("-o", "--output", default="route_map.html")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    coordinates = []
    for raw in args.points:
        parsed = parse_coordinates(raw)
        if not parsed.is_valid:
            logger.error(f"Invalid waypoint {raw!r}: {parsed.error_message}")
            return 2
        coordinates.append(parsed.as_coordinate())

    presenter = FoliumMapPresenter()
    with RoutePlanner(presenter, make_provider(args.provider, args.osrm_url)) as planner:
        for coordinate in coordinates:
            planner.place_waypoint(coordinate)

        if args.mode == BuildMode.DIRECT:
            planner.draw_polyline()
        else:
            build = planner.draw_route()
            # Every request has its own timeout, so bound the total wait by it
            if not build.wait(timeout=REQUEST_TIMEOUT * max(1, len(build.requests))):
                logger.warning("Some segments did not finish in time")
            logger.info(f"{len(build.overlays)}/{len(build.requests)} segments routed")

        path = presenter.save(args.output)

    print(f"Map saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
