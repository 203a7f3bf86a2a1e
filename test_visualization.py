import os
import tempfile
import unittest

import folium

from routeplanner import (
    BoundingRegion, Coordinate, EdgePadding, FoliumMapPresenter, OverlayLevel, RouteOverlay
)


class TestFoliumMapPresenter(unittest.TestCase):
    def setUp(self):
        self.presenter = FoliumMapPresenter()
        self.line = RouteOverlay([Coordinate(25.0, 121.5), Coordinate(25.1, 121.6)])

    def test_degenerate_overlay_is_not_drawn(self):
        self.presenter.add_overlay(RouteOverlay([]))
        self.presenter.add_overlay(RouteOverlay([Coordinate(1, 1)]))
        self.assertEqual(self.presenter.overlay_count, 0)
        self.assertIsNone(self.presenter.view)

    def test_add_overlay_fits_view_to_overlay(self):
        self.presenter.add_overlay(self.line)
        self.assertEqual(self.presenter.overlay_count, 1)
        region, padding = self.presenter.view
        self.assertEqual(region, BoundingRegion(25.0, 121.5, 25.1, 121.6))
        self.assertEqual(padding, EdgePadding(50, 50, 50, 50))

    def test_refit_uses_configured_padding(self):
        presenter = FoliumMapPresenter(padding=EdgePadding(10, 20, 30, 40))
        presenter.add_overlay(self.line)
        region, padding = presenter.view
        self.assertEqual(padding, EdgePadding(10, 20, 30, 40))

    def test_fit_on_render_disabled(self):
        presenter = FoliumMapPresenter(fit_on_render=False)
        presenter.add_overlay(self.line)
        self.assertIsNone(presenter.view)

    def test_clear_overlays_keeps_markers(self):
        self.presenter.present_placement_feedback(Coordinate(25.0, 121.5))
        self.presenter.add_overlay(self.line)
        self.presenter.clear_overlays()
        self.assertEqual(self.presenter.overlay_count, 0)
        self.assertEqual(self.presenter.markers, [Coordinate(25.0, 121.5)])
        self.presenter.clear_waypoint_markers()
        self.assertEqual(self.presenter.markers, [])

    def test_build_map_centres_on_view(self):
        self.presenter.fit_view(BoundingRegion(0, 0, 2, 4), EdgePadding())
        m = self.presenter.build_map()
        self.assertIsInstance(m, folium.Map)
        self.assertEqual(list(m.location), [1.0, 2.0])

    def test_build_map_centres_on_last_pin(self):
        self.presenter.present_placement_feedback(Coordinate(10, 20))
        m = self.presenter.build_map()
        self.assertEqual(list(m.location), [10.0, 20.0])

    def test_save_writes_html(self):
        self.presenter.present_placement_feedback(Coordinate(25.0, 121.5))
        self.presenter.present_placement_feedback(Coordinate(25.1, 121.6))
        self.presenter.add_overlay(RouteOverlay(self.line.coordinates, OverlayLevel.ABOVE_ROADS))
        with tempfile.TemporaryDirectory() as tmp:
            path = self.presenter.save(os.path.join(tmp, 'map.html'))
            self.assertTrue(os.path.exists(path))
            with open(path, encoding='utf-8') as f:
                html = f.read()
        self.assertIn('polyline', html.lower())
        self.assertIn('orange', html)


if __name__ == '__main__':
    unittest.main()
