"""
CLI Commands Module

This module contains the CLI command implementations:

- report: Sunrise, sunset and twilight times for a date
- poll: Real-time solar position, optionally refreshed every second
"""
