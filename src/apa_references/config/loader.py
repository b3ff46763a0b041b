"""Configuration loader for the APA reference formatter.

Loads a JSON configuration file and returns a validated FormatterConfig.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from apa_references.config.models import FormatterConfig
from apa_references.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, FormatterConfig] = {}

# Default config path — lives next to this module
DEFAULT_CONFIG_PATH = Path(__file__).parent / "apa7_default.json"


def load_config(path: Optional[Path] = None) -> FormatterConfig:
    """Load and validate formatter config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON config file.
        If ``None``, the built-in ``apa7_default.json`` is used.

    Returns
    -------
    FormatterConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or not a JSON object.
    pydantic.ValidationError
        If the JSON content does not match the expected schema.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a JSON object: {config_path}")

    config = FormatterConfig.model_validate(raw)
    logger.debug("Loaded formatter config from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> FormatterConfig:
    """Get the default formatter configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
