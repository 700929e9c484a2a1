"""CLI commands for Do List."""
