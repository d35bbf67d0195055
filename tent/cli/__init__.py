"""Command-line interface for Tent."""
