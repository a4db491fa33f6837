"""Location subpackage: observer coordinates and configuration."""
