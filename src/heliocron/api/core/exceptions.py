"""
Custom exception classes for heliocron.

This module defines specific exceptions for the errors that can occur
when validating user input or loading configuration. Astronomical
calculations never raise: an event that does not happen on a given day
is reported as an absent event time, not as an exception.
"""

from __future__ import annotations


__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    # Base exception
    "HeliocronError",
    "InvalidAltitudeError",
    "InvalidConfigurationError",
    "InvalidCoordinateError",
    # Validation exceptions
    "ValidationError",
]


class HeliocronError(Exception):
    """
    Base exception for all heliocron errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all heliocron-related errors.
    """

    pass


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(HeliocronError, ValueError):
    """
    Raised when a value is outside the range accepted by a value type.

    The message always names the expected range and the offending value.
    """

    pass


class InvalidCoordinateError(ValidationError):
    """
    Raised when coordinates are out of valid range.

    This occurs when attempting to use coordinates that are:
    - Latitude outside -90 to +90 degrees
    - Longitude outside -180 to +180 degrees
    - Not a number at all (e.g. a malformed command line value)
    """

    pass


class InvalidAltitudeError(ValidationError):
    """
    Raised when an altitude (elevation angle) is outside -90 to +90 degrees.
    """

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(HeliocronError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when the configuration file is unreadable or incomplete."""

    pass
