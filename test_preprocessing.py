import unittest

from routeplanner import Coordinate, parse_coordinates
from routeplanner.preprocessing import validate_coordinates


class TestParseCoordinates(unittest.TestCase):
    def test_decimal_pair(self):
        parsed = parse_coordinates("25.0330, 121.5654")
        self.assertTrue(parsed.is_valid)
        self.assertEqual(parsed.as_coordinate(), Coordinate(25.0330, 121.5654))

    def test_bracketed_pair(self):
        parsed = parse_coordinates("[-33.9, 18.4]")
        self.assertTrue(parsed.is_valid)
        self.assertAlmostEqual(parsed.latitude, -33.9)
        self.assertAlmostEqual(parsed.longitude, 18.4)

    def test_whitespace_separated_pair(self):
        parsed = parse_coordinates("(51.92 4.48)")
        self.assertTrue(parsed.is_valid)
        self.assertEqual(parsed.as_coordinate(), Coordinate(51.92, 4.48))

    def test_wrong_number_of_parts(self):
        for text in ("somewhere nice and far", "12.5", "1, 2, 3", ""):
            parsed = parse_coordinates(text)
            self.assertFalse(parsed.is_valid, text)
            self.assertEqual(parsed.error_message, "Expected a latitude and a longitude")

    def test_bad_number(self):
        parsed = parse_coordinates("abc, 12")
        self.assertFalse(parsed.is_valid)
        self.assertIn("Error parsing coordinates", parsed.error_message)

    def test_out_of_range(self):
        self.assertFalse(parse_coordinates("91, 0").is_valid)
        self.assertFalse(validate_coordinates(0, -181).is_valid)
        self.assertTrue(validate_coordinates(-90, 180).is_valid)


if __name__ == '__main__':
    unittest.main()
