"""Configuration package exports."""

from .loader import load_settings, read_config_file
from .model import ParserSettings

__all__ = ["ParserSettings", "load_settings", "read_config_file"]
