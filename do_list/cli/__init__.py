"""Command-line interface for Do List."""
