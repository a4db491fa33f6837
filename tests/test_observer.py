"""
Unit tests for observer.py

Tests config file loading, fallback to the default location and
precedence between the command line, the config file and the default.
"""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import deal

from heliocron.api.core.enums import LocationSource
from heliocron.api.core.exceptions import InvalidConfigurationError
from heliocron.api.core.types import Coordinates, Latitude, Longitude
from heliocron.api.location.observer import (
    DEFAULT_LOCATION,
    ObserverLocation,
    get_config_path,
    load_location,
    read_config_file,
    resolve_observer_location,
)


class TestObserverLocation(unittest.TestCase):
    """Test suite for ObserverLocation dataclass"""

    def test_creation(self):
        """Test creating ObserverLocation"""
        coords = Coordinates.from_degrees(49.8077, 7.9647)
        location = ObserverLocation(coordinates=coords, source=LocationSource.CONFIG_FILE, name="Bad Kreuznach")
        self.assertEqual(location.coordinates, coords)
        self.assertEqual(location.source, LocationSource.CONFIG_FILE)
        self.assertEqual(location.name, "Bad Kreuznach")

    def test_frozen(self):
        """Test that ObserverLocation is frozen (immutable)"""
        with self.assertRaises(Exception):  # dataclass frozen raises FrozenInstanceError
            DEFAULT_LOCATION.name = "Elsewhere"  # type: ignore[misc]


class TestDefaultLocation(unittest.TestCase):
    """Test suite for DEFAULT_LOCATION"""

    def test_greenwich(self):
        """Test default location is the Royal Observatory, Greenwich"""
        self.assertEqual(DEFAULT_LOCATION.coordinates.latitude.value, 51.4769)
        self.assertEqual(DEFAULT_LOCATION.coordinates.longitude.value, -0.0005)
        self.assertEqual(DEFAULT_LOCATION.source, LocationSource.DEFAULT)
        self.assertIn("Greenwich", DEFAULT_LOCATION.name)


class TestGetConfigPath(unittest.TestCase):
    """Test suite for get_config_path"""

    def test_path(self):
        """Test config file location under the home directory"""
        with patch("heliocron.api.location.observer.Path.home", return_value=Path("/home/tester")):
            self.assertEqual(get_config_path(), Path("/home/tester/.config/heliocron.toml"))


class _ConfigFileTestCase(unittest.TestCase):
    """Base class providing a temporary config file"""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "heliocron.toml"

    def tearDown(self):
        self.temp_dir.cleanup()

    def write_config(self, content: str) -> Path:
        self.config_path.write_text(content, encoding="utf-8")
        return self.config_path


class TestReadConfigFile(_ConfigFileTestCase):
    """Test suite for read_config_file"""

    def test_valid(self):
        """Test reading a complete config file"""
        path = self.write_config('latitude = 49.8077\nlongitude = 7.9647\nname = "Bad Kreuznach"\n')
        location = read_config_file(path)
        self.assertEqual(location.coordinates, Coordinates.from_degrees(49.8077, 7.9647))
        self.assertEqual(location.source, LocationSource.CONFIG_FILE)
        self.assertEqual(location.name, "Bad Kreuznach")

    def test_integer_coordinates(self):
        """Test whole-number coordinates are accepted"""
        location = read_config_file(self.write_config("latitude = 60\nlongitude = -1\n"))
        self.assertEqual(location.coordinates.latitude.value, 60.0)
        self.assertIsNone(location.name)

    def test_missing_both(self):
        """Test a file with no coordinates"""
        with self.assertRaises(InvalidConfigurationError) as context:
            read_config_file(self.write_config('name = "Nowhere"\n'))
        self.assertEqual(str(context.exception), "Missing latitude and longitude")

    def test_missing_latitude(self):
        """Test a file missing the latitude"""
        with self.assertRaises(InvalidConfigurationError) as context:
            read_config_file(self.write_config("longitude = 7.9647\n"))
        self.assertEqual(str(context.exception), "Missing latitude")

    def test_missing_longitude(self):
        """Test a file missing the longitude"""
        with self.assertRaises(InvalidConfigurationError) as context:
            read_config_file(self.write_config("latitude = 49.8077\n"))
        self.assertEqual(str(context.exception), "Missing longitude")

    def test_out_of_range(self):
        """Test out-of-range coordinates are reported as configuration errors"""
        with self.assertRaises(InvalidConfigurationError) as context:
            read_config_file(self.write_config("latitude = 95.0\nlongitude = 0.0\n"))
        self.assertIn("Latitude must be between", str(context.exception))

    def test_not_a_number(self):
        """Test string coordinates are rejected"""
        with self.assertRaises(InvalidConfigurationError) as context:
            read_config_file(self.write_config('latitude = "51.0"\nlongitude = 0.0\n'))
        self.assertIn("Expected a number for latitude", str(context.exception))

    def test_malformed_toml(self):
        """Test a file that is not valid TOML"""
        with self.assertRaises(InvalidConfigurationError):
            read_config_file(self.write_config("latitude = = 51\n"))

    def test_missing_file(self):
        """Test reading a file that does not exist"""
        with self.assertRaises(InvalidConfigurationError):
            read_config_file(self.config_path)


class TestLoadLocation(_ConfigFileTestCase):
    """Test suite for load_location"""

    def test_missing_file_uses_default(self):
        """Test fallback when there is no config file"""
        self.assertIs(load_location(self.config_path), DEFAULT_LOCATION)

    def test_valid_file(self):
        """Test loading a valid config file"""
        path = self.write_config("latitude = -33.8688\nlongitude = 151.2093\n")
        location = load_location(path)
        self.assertEqual(location.coordinates, Coordinates.from_degrees(-33.8688, 151.2093))
        self.assertEqual(location.source, LocationSource.CONFIG_FILE)

    def test_invalid_file_warns_and_uses_default(self):
        """Test fallback with a warning when the config file is invalid"""
        path = self.write_config("latitude = 49.8077\n")
        with self.assertLogs("heliocron.api.location.observer", level="WARNING") as logs:
            location = load_location(path)
        self.assertIs(location, DEFAULT_LOCATION)
        self.assertIn("Missing longitude", logs.output[0])
        self.assertIn("Using default location", logs.output[0])

    def test_uses_default_config_path(self):
        """Test that the default config path is used when none is given"""
        path = self.write_config("latitude = 10.0\nlongitude = 20.0\n")
        with patch("heliocron.api.location.observer.get_config_path", return_value=path):
            location = load_location()
        self.assertEqual(location.coordinates, Coordinates.from_degrees(10.0, 20.0))


class TestResolveObserverLocation(_ConfigFileTestCase):
    """Test suite for resolve_observer_location precedence"""

    def test_command_line_wins(self):
        """Test explicit coordinates override the config file"""
        path = self.write_config("latitude = 10.0\nlongitude = 20.0\n")
        location = resolve_observer_location(Latitude(-1.0), Longitude(-2.0), path)
        self.assertEqual(location.coordinates, Coordinates.from_degrees(-1.0, -2.0))
        self.assertEqual(location.source, LocationSource.COMMAND_LINE)

    def test_config_file_over_default(self):
        """Test the config file is used without explicit coordinates"""
        path = self.write_config("latitude = 10.0\nlongitude = 20.0\n")
        location = resolve_observer_location(None, None, path)
        self.assertEqual(location.source, LocationSource.CONFIG_FILE)

    def test_default_last(self):
        """Test the default is used when nothing else is available"""
        self.assertIs(resolve_observer_location(None, None, self.config_path), DEFAULT_LOCATION)

    def test_latitude_without_longitude(self):
        """Test that coordinates must be given together"""
        with self.assertRaises(deal.PreContractError):
            resolve_observer_location(Latitude(1.0), None, self.config_path)


if __name__ == "__main__":
    unittest.main()
