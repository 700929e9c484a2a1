"""Utility modules for Do List."""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
