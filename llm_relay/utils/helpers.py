"""
Helper utilities for the LLM relay.

Provides common functions used across the package:
- Settings loading
- Clipboard writes for the default host
"""

import copy
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

from llm_relay.search.result import DEFAULT_ICON

# Settings file location
DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"

DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4.1"

# Every section is a table and every value a string
DEFAULT_SETTINGS = {
    "llm": {
        "api_base": DEFAULT_API_BASE,
        "model": DEFAULT_MODEL,
    },
    "result": {
        "icon_path": DEFAULT_ICON,
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load relay settings from TOML file.

    Args:
        settings_path: File to read, defaults to data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied. Sections or
        values of the wrong type are replaced by their defaults.

    Example settings structure:
        {
            "llm": {
                "api_base": "https://api.openai.com/v1",
                "model": "gpt-4.1"
            },
            "result": {
                "icon_path": "images/app.png"
            }
        }
    """
    defaults = copy.deepcopy(DEFAULT_SETTINGS)

    if settings_path is None:
        settings_path = DEFAULT_SETTINGS_PATH

    # Load from file if it exists
    if settings_path.exists():
        try:
            loaded = toml.load(settings_path)
        except Exception as e:
            logger.warning(f"Could not load settings from {settings_path}: {e}")
            return defaults
        # Merge loaded settings with defaults
        return _validate(_deep_merge(defaults, loaded), settings_path)
    else:
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults


def _validate(settings: Dict, settings_path: Path) -> Dict:
    """Replace known sections and values of the wrong type with defaults."""
    for section, section_defaults in DEFAULT_SETTINGS.items():
        values = settings[section]
        if not isinstance(values, dict):
            logger.warning(f"Settings [{section}] in {settings_path} is not a table, using defaults")
            settings[section] = dict(section_defaults)
            continue

        for key, default in section_defaults.items():
            if not isinstance(values.get(key), str):
                logger.warning(f"Settings {section}.{key} in {settings_path} is not a string, using {default!r}")
                values[key] = default

    return settings


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def copy_to_clipboard(text: str):
    """Copy text to clipboard using wl-copy."""
    try:
        subprocess.Popen(
            ["wl-copy", text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        logger.warning("wl-copy not found, cannot copy to clipboard")
