"""
heliocron API - Business Logic Layer

This package contains the solar calculations behind heliocron, separated
from CLI presentation concerns.

The API is organized into logical subpackages:
- core: Value types, enums, constants, exceptions and utilities
- astronomy: Solar position, event times and day-part classification
- location: Observer coordinates and configuration file loading
- reports: Report models built from the calculations
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from heliocron.api.core.types import ...
    # from heliocron.api.astronomy.solar_position import ...
    # etc.
]
