"""Do List - Organize your tasks with a persistent to-do list."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
