"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as ModelValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..models.config import DoListConfig
from ..services.exceptions import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the per-data-directory configuration."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = Path(data_dir)
        self.config_file = self.data_dir / CONFIG_FILE_NAME

    def save_config(self, config: DoListConfig):
        """Save configuration."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(config.model_dump_json(indent=2))
        except OSError as e:
            raise PersistenceError(f"Could not write {self.config_file}: {e}") from e

    def get_config(self) -> DoListConfig:
        """Load configuration, falling back to defaults."""
        if not self.config_file.exists():
            return DoListConfig()
        try:
            data = json.loads(self.config_file.read_text())
            return DoListConfig(**data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
            return DoListConfig()

    def update(self, key: str, value: Any) -> DoListConfig:
        """Set a single configuration value and save it.

        Raises:
            ValidationError: If the key is unknown or the value invalid
        """
        if key not in DoListConfig.model_fields:
            choices = ", ".join(DoListConfig.model_fields)
            raise ValidationError(f"Unknown config key '{key}' (expected one of: {choices})")

        data = self.get_config().model_dump()
        data[key] = value
        try:
            config = DoListConfig(**data)
        except ModelValidationError as e:
            raise ValidationError(f"Invalid value for {key}: {e.errors()[0]['msg']}") from e

        self.save_config(config)
        return config

    def reset(self) -> DoListConfig:
        """Reset configuration to defaults."""
        config = DoListConfig()
        self.save_config(config)
        return config
