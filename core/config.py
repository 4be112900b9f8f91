# core/config.py

"""Configuration management."""
import json
import logging
from pathlib import Path
from typing import Optional

from core.extraction import DEFAULT_CHUNK_SIZE
from core.rez_file import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


class Config:
    """Application configuration manager."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = config_file or Path.home() / '.rez_tool_config.json'
        self.default_config = {
            'language': 'en',
            'chunk_size': DEFAULT_CHUNK_SIZE,
            'max_directory_depth': DEFAULT_MAX_DEPTH,
            'show_progress': True,
            'default_output': 'text',
            'log_level': 'INFO',
        }
        self.config = self.load_config()

    def load_config(self) -> dict:
        """Load configuration from file, merged over the defaults."""
        config = self.default_config.copy()
        if not self.config_file.exists():
            return config
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.config_file, e)
            return config
        if not isinstance(loaded, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", self.config_file)
            return config
        config.update(loaded)
        return config

    def save_config(self):
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning("Could not save config file %s: %s", self.config_file, e)

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value):
        """Set configuration value."""
        self.config[key] = value
