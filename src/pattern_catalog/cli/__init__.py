"""Command-line interface for the pattern catalogue."""
