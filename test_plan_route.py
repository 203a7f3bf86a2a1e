import os
import tempfile
import unittest
from unittest.mock import patch

import plan_route
from routeplanner import OSMnxDirectionsProvider, OSRMDirectionsProvider


class TestPlanRouteCli(unittest.TestCase):
    def test_direct_mode_writes_map(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = os.path.join(tmp, 'out.html')
            status = plan_route.main(['-p', '25.03,121.56', '-p', '25.05,121.52',
                                      '--mode', 'direct', '-o', output, '--log-level', 'WARNING'])
            self.assertEqual(status, 0)
            self.assertTrue(os.path.exists(output))

    def test_invalid_point_exits_with_error(self):
        with self.assertLogs('plan_route', level='ERROR'):
            status = plan_route.main(['-p', 'not a place', '--mode', 'direct'])
        self.assertEqual(status, 2)

    @patch('plan_route.OSRMDirectionsProvider.resolve')
    def test_routed_mode_uses_provider(self, mock_resolve):
        from routeplanner.directions import SegmentResolutionFailed
        mock_resolve.side_effect = SegmentResolutionFailed("offline")
        with tempfile.TemporaryDirectory() as tmp:
            output = os.path.join(tmp, 'out.html')
            status = plan_route.main(['-p', '25.03,121.56', '-p', '25.05,121.52',
                                      '-o', output, '--log-level', 'CRITICAL'])
            self.assertEqual(status, 0)
        self.assertEqual(mock_resolve.call_count, 1)

    def test_make_provider(self):
        self.assertIsInstance(plan_route.make_provider('osmnx'), OSMnxDirectionsProvider)
        provider = plan_route.make_provider('osrm', 'http://osrm.test')
        self.assertIsInstance(provider, OSRMDirectionsProvider)
        self.assertEqual(provider.base_url, 'http://osrm.test')


if __name__ == '__main__':
    unittest.main()
