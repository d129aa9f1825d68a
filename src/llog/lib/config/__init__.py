"""Configuration discovery and parsing helpers."""

from llog.lib.config.settings import LlogConfig, load_config, resolve_config_path

__all__ = ["LlogConfig", "load_config", "resolve_config_path"]
