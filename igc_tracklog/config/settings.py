"""
Settings for IGC Tracklog.
These are configurable parameters that can be changed by the user.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from .constants import (
    HEADER_WINDOW_LINES,
    ON_FIX_ERROR_ABORT,
    ON_FIX_ERROR_SKIP,
    DEFAULT_ENCODING,
    DEFAULT_GEOJSON_INDENT,
)

logger = logging.getLogger("igc_tracklog.settings")


class Settings:
    """
    Application settings that can be loaded from and saved to a configuration file.
    Uses a singleton pattern to ensure only one settings instance exists.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._settings = self._defaults()
        self.config_dir = self._get_config_dir()
        self.config_file = os.path.join(self.config_dir, "settings.json")
        self.load_settings()

        self._initialized = True

    @staticmethod
    def _defaults() -> Dict[str, Any]:
        return {
            # Parsing settings
            "header_window_lines": HEADER_WINDOW_LINES,
            "on_fix_error": ON_FIX_ERROR_ABORT,  # "abort" or "skip"
            "altitude_offset": 0,
            "encoding": DEFAULT_ENCODING,

            # Output settings
            "geojson_indent": DEFAULT_GEOJSON_INDENT,
            "output_directory": None,  # None writes next to the input file

            "log_level": "INFO",
        }

    @staticmethod
    def _get_config_dir() -> str:
        """Get the configuration directory for the application"""
        if os.name == 'nt':  # Windows
            return os.path.join(os.environ.get('APPDATA', ''), 'IGCTracklog')
        home_dir = os.path.expanduser("~")
        return os.path.join(home_dir, '.config', 'igc-tracklog')

    def load_settings(self, config_file: Optional[str] = None) -> bool:
        """
        Load settings from a configuration file on top of the current values.

        Args:
            config_file: Path to a JSON settings file (default: the user config file)

        Returns:
            bool: True if a file was read, False if it was missing or invalid
        """
        if config_file is not None:
            self.config_file = str(config_file)

        if not os.path.exists(self.config_file):
            logger.debug("No settings file found, using defaults")
            return False

        try:
            with open(self.config_file, 'r') as f:
                loaded_settings = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings from {self.config_file}: {e}")
            return False

        if not isinstance(loaded_settings, dict):
            logger.error(f"Settings file {self.config_file} does not contain an object")
            return False

        policy = loaded_settings.get("on_fix_error", ON_FIX_ERROR_ABORT)
        if policy not in (ON_FIX_ERROR_ABORT, ON_FIX_ERROR_SKIP):
            logger.warning(f"Ignoring unknown on_fix_error value {policy!r} in {self.config_file}")
            del loaded_settings["on_fix_error"]

        self._settings.update(loaded_settings)
        logger.info(f"Settings loaded from {self.config_file}")
        return True

    def save_settings(self, config_file: Optional[str] = None) -> bool:
        """Save current settings to the configuration file"""
        if config_file is not None:
            self.config_file = str(config_file)

        try:
            directory = os.path.dirname(self.config_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self._settings, f, indent=4)
            logger.info(f"Settings saved to {self.config_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key"""
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key"""
        self._settings[key] = value

    def get_all(self) -> Dict[str, Any]:
        """Get all settings as a dictionary"""
        return self._settings.copy()

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values"""
        self._settings = self._defaults()
        logger.info("Settings reset to defaults")


# Create a global settings instance
settings = Settings()
