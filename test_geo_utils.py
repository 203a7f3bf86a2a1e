import unittest

from routeplanner import BoundingRegion, Coordinate, RouteOverlay
from routeplanner.geo_utils import (
    bounding_region, coordinates_from_lonlat, get_midpoint, path_length_km
)


class TestGeoUtils(unittest.TestCase):
    def test_bounding_region(self):
        coords = [Coordinate(1, 5), Coordinate(-2, 3), Coordinate(4, -1)]
        self.assertEqual(bounding_region(coords), BoundingRegion(-2, -1, 4, 5))

    def test_bounding_region_single_and_empty(self):
        self.assertEqual(bounding_region([Coordinate(1, 2)]), BoundingRegion(1, 2, 1, 2))
        self.assertIsNone(bounding_region([]))

    def test_region_center_and_folium_bounds(self):
        region = BoundingRegion(0, 0, 10, 20)
        self.assertEqual(region.center, Coordinate(5, 10))
        self.assertEqual(region.as_folium_bounds(), [[0, 0], [10, 20]])

    def test_path_length(self):
        self.assertAlmostEqual(path_length_km([Coordinate(0, 0), Coordinate(1, 1)]), 156.9, delta=1)
        self.assertEqual(path_length_km([Coordinate(0, 0)]), 0.0)
        overlay = RouteOverlay([Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)])
        self.assertAlmostEqual(overlay.length_km(), 222.6, delta=1)

    def test_midpoint(self):
        mid = get_midpoint(Coordinate(0, 0), Coordinate(2, 4))
        self.assertAlmostEqual(mid.latitude, 1)
        self.assertAlmostEqual(mid.longitude, 2)
        self.assertEqual(get_midpoint(Coordinate(1, 1), Coordinate(1, 1)), Coordinate(1, 1))

    def test_coordinates_from_lonlat(self):
        self.assertEqual(coordinates_from_lonlat([[10, 20], [11, 21, 5]]),
                         [Coordinate(20, 10), Coordinate(21, 11)])


if __name__ == '__main__':
    unittest.main()
