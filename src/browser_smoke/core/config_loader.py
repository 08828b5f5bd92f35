import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union

from pydantic import ValidationError

from ..data_models import BrowserSettings

logger = logging.getLogger(__name__)

# Relative paths (settings, logs, driver cache) are resolved against the working directory
SETTINGS_ENV_VAR = "BROWSER_SMOKE_SETTINGS"
DEFAULT_SETTINGS_FILE = Path("config") / "settings.json"


def default_settings_file() -> Path:
    """$BROWSER_SMOKE_SETTINGS if set, otherwise config/settings.json under the working directory."""
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_SETTINGS_FILE


class ConfigLoader:
    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """
        Initializes the ConfigLoader.

        Args:
            settings_file (Union[str, Path], optional): Path to the settings JSON file.
                                                        Defaults to $BROWSER_SMOKE_SETTINGS,
                                                        then 'config/settings.json' in the working directory.
        """
        self.settings_file: Path = Path(settings_file) if settings_file else default_settings_file()
        self.settings: Dict[str, Any] = self._load_json(self.settings_file, default_value={})

        if not self.settings:
            logger.warning(f"Settings file '{self.settings_file}' was not found or is empty/invalid. Using empty settings.")

    def _load_json(self, file_path: Path, default_value: Dict) -> Any:
        """
        Loads a JSON file.

        Args:
            file_path (Path): The path to the JSON file.
            default_value (Dict): The default value to return if loading fails.

        Returns:
            Any: The loaded JSON data or the default value.
        """
        if not file_path.exists():
            logger.error(f"Configuration file not found: {file_path}")
            return default_value
        if not file_path.is_file():
            logger.error(f"Configuration path is not a file: {file_path}")
            return default_value

        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Could not decode JSON from {file_path}: {e}")
            return default_value
        except OSError as e:
            logger.error(f"Could not read {file_path}: {e}")
            return default_value

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object at the top of {file_path}, found {type(data).__name__}.")
            return default_value
        logger.debug(f"Successfully loaded JSON from {file_path}")
        return data

    def get_settings(self) -> Dict[str, Any]:
        """Returns all loaded settings."""
        return self.settings

    def get_setting(self, path_str: str, default: Any = None) -> Any:
        """
        Retrieves a setting value using a dot-separated path.

        Args:
            path_str (str): Dot-separated path to the setting (e.g., "logging.level").
            default (Any, optional): Default value if the setting is not found. Defaults to None.

        Returns:
            Any: The setting value or the default.
        """
        current_level = self.settings
        for key in path_str.split('.'):
            if not isinstance(current_level, dict):
                logger.warning(f"Invalid path '{path_str}' at key '{key}'. Expected a dictionary, found {type(current_level)}.")
                return default
            if key not in current_level:
                logger.debug(f"Setting '{path_str}' not found. Returning default: {default}")
                return default
            current_level = current_level[key]
        return current_level

    def get_logging_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'logging' block."""
        return self.get_setting(f'logging.{setting_name}', default)

    def get_browser_settings(self) -> BrowserSettings:
        """Returns the 'browser_settings' block as a validated model, or defaults if it is invalid."""
        raw = self.get_setting('browser_settings', {})
        if not isinstance(raw, dict):
            logger.warning(f"'browser_settings' in config is not an object: {raw!r}. Using defaults.")
            return BrowserSettings()
        try:
            return BrowserSettings(**raw)
        except ValidationError as e:
            logger.error(f"Invalid 'browser_settings' in {self.settings_file}: {e}. Using defaults.")
            return BrowserSettings()
