"""
Configuration module for YouTube Channel Feed
"""

from .app_config import AppConfig
from .config_loader import ConfigLoader, ConfigValidationError, ConfigurationMissingError

__all__ = ["AppConfig", "ConfigLoader", "ConfigValidationError", "ConfigurationMissingError"]
