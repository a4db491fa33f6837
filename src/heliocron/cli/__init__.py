"""Command-line interface for heliocron."""

from heliocron import __version__


__all__ = ["__version__"]
