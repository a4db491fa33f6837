"""CLI utilities: output rendering, argument parsing and shared state."""
