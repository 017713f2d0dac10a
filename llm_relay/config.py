"""
Relay Configuration - Credentials and model selection.

Read once at startup from the process environment, falling back to
data/settings.toml and then to built-in defaults:

  OPENAI_API_KEY   → API key (blank means "not configured")
  OPENAI_API_BASE  → [llm] api_base, default https://api.openai.com/v1
  OPENAI_MODEL     → [llm] model, default gpt-4.1

A missing key is a valid degraded state, not a load error.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

from llm_relay.search.result import DEFAULT_ICON
from llm_relay.utils.helpers import load_settings

API_KEY_ENV = "OPENAI_API_KEY"
API_BASE_ENV = "OPENAI_API_BASE"
MODEL_ENV = "OPENAI_MODEL"


@dataclass(frozen=True)
class RelayConfig:
    """Immutable relay configuration for the process lifetime."""
    api_key: Optional[str]
    api_base: str
    model: str
    icon_path: str = DEFAULT_ICON

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    settings_path: Optional[Path] = None,
) -> RelayConfig:
    """
    Build the relay configuration.

    Args:
        environ: Environment mapping, defaults to os.environ
        settings_path: Settings TOML file, defaults to data/settings.toml

    Returns:
        RelayConfig with environment values taking precedence
    """
    if environ is None:
        environ = os.environ

    settings = load_settings(settings_path)
    llm = settings["llm"]

    api_key = environ.get(API_KEY_ENV)
    if api_key is not None and not api_key.strip():
        api_key = None

    config = RelayConfig(
        api_key=api_key,
        api_base=environ.get(API_BASE_ENV) or llm["api_base"],
        model=environ.get(MODEL_ENV) or llm["model"],
        icon_path=settings["result"]["icon_path"],
    )
    logger.debug(
        f"Loaded relay config: model={config.model}, api_base={config.api_base}, "
        f"api_key={'set' if config.has_api_key else 'missing'}"
    )
    return config
