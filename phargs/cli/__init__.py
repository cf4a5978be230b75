"""Command-line interface for phargs."""
