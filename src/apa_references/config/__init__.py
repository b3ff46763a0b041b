"""Formatter configuration package."""

from apa_references.config.loader import get_config, load_config
from apa_references.config.models import EtAlConfig, FormatterConfig

__all__ = ["EtAlConfig", "FormatterConfig", "get_config", "load_config"]
