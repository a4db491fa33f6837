"""
Unit tests for day part classification.
"""

import unittest

from heliocron.api.astronomy.day_part import DayPart
from heliocron.api.core.types import Altitude


class TestDayPart(unittest.TestCase):
    """Test suite for DayPart.from_elevation_angle"""

    def test_display_values(self):
        """Test the display names"""
        self.assertEqual(str(DayPart.DAY), "Day")
        self.assertEqual(str(DayPart.CIVIL_TWILIGHT), "Civil Twilight")
        self.assertEqual(str(DayPart.NAUTICAL_TWILIGHT), "Nautical Twilight")
        self.assertEqual(str(DayPart.ASTRONOMICAL_TWILIGHT), "Astronomical Twilight")
        self.assertEqual(str(DayPart.NIGHT), "Night")

    def test_boundaries_belong_to_brighter_part(self):
        """Test that each boundary value classifies into the brighter category"""
        cases = {
            -18.0: DayPart.ASTRONOMICAL_TWILIGHT,
            -12.0: DayPart.NAUTICAL_TWILIGHT,
            -6.0: DayPart.CIVIL_TWILIGHT,
            0.833: DayPart.DAY,
        }
        for angle, expected in cases.items():
            with self.subTest(angle=angle):
                self.assertIs(DayPart.from_elevation_angle(angle), expected)

    def test_just_below_boundaries(self):
        """Test values just below each boundary"""
        cases = {
            -18.0001: DayPart.NIGHT,
            -12.0001: DayPart.ASTRONOMICAL_TWILIGHT,
            -6.0001: DayPart.NAUTICAL_TWILIGHT,
            0.8329: DayPart.CIVIL_TWILIGHT,
        }
        for angle, expected in cases.items():
            with self.subTest(angle=angle):
                self.assertIs(DayPart.from_elevation_angle(angle), expected)

    def test_extremes(self):
        """Test the ends of the elevation range"""
        self.assertIs(DayPart.from_elevation_angle(-90.0), DayPart.NIGHT)
        self.assertIs(DayPart.from_elevation_angle(90.0), DayPart.DAY)

    def test_interior_values(self):
        """Test typical values inside each band"""
        self.assertIs(DayPart.from_elevation_angle(-30.0), DayPart.NIGHT)
        self.assertIs(DayPart.from_elevation_angle(-15.0), DayPart.ASTRONOMICAL_TWILIGHT)
        self.assertIs(DayPart.from_elevation_angle(-9.0), DayPart.NAUTICAL_TWILIGHT)
        self.assertIs(DayPart.from_elevation_angle(0.0), DayPart.CIVIL_TWILIGHT)
        self.assertIs(DayPart.from_elevation_angle(45.0), DayPart.DAY)

    def test_accepts_altitude(self):
        """Test classification of an Altitude value"""
        self.assertIs(DayPart.from_elevation_angle(Altitude(-7.5)), DayPart.NAUTICAL_TWILIGHT)


if __name__ == "__main__":
    unittest.main()
