"""
Unit tests for constants module.
"""

import unittest

from heliocron.api.core import constants


class TestThresholds(unittest.TestCase):
    """Test suite for event threshold constants"""

    def test_threshold_values(self):
        """Test degrees below the horizon for each fixed event"""
        self.assertEqual(constants.SUNRISE_DEGREES, 0.833)
        self.assertEqual(constants.CIVIL_TWILIGHT_DEGREES, 6.0)
        self.assertEqual(constants.NAUTICAL_TWILIGHT_DEGREES, 12.0)
        self.assertEqual(constants.ASTRONOMICAL_TWILIGHT_DEGREES, 18.0)

    def test_thresholds_increase_with_darkness(self):
        """Test that darker twilights have deeper thresholds"""
        self.assertLess(constants.SUNRISE_DEGREES, constants.CIVIL_TWILIGHT_DEGREES)
        self.assertLess(constants.CIVIL_TWILIGHT_DEGREES, constants.NAUTICAL_TWILIGHT_DEGREES)
        self.assertLess(constants.NAUTICAL_TWILIGHT_DEGREES, constants.ASTRONOMICAL_TWILIGHT_DEGREES)


class TestTimeConstants(unittest.TestCase):
    """Test suite for time and calendar constants"""

    def test_rotation(self):
        """Test Earth rotation constants are consistent"""
        self.assertEqual(constants.DEGREES_PER_HOUR_ANGLE * 24, 360.0)
        self.assertEqual(constants.MINUTES_PER_DEGREE_OF_LONGITUDE * 360, constants.MINUTES_PER_DAY)

    def test_julian(self):
        """Test Julian epoch constants"""
        self.assertEqual(constants.J2000_JULIAN_DAY, 2451545.0)
        self.assertEqual(constants.JULIAN_DAYS_PER_CENTURY, 36525.0)


class TestDefaultLocation(unittest.TestCase):
    """Test suite for the default location constants"""

    def test_greenwich(self):
        """Test default coordinates are the Royal Observatory, Greenwich"""
        self.assertEqual(constants.DEFAULT_LATITUDE, 51.4769)
        self.assertEqual(constants.DEFAULT_LONGITUDE, -0.0005)


if __name__ == "__main__":
    unittest.main()
