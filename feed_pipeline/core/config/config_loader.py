"""
Configuration Loader
Loads and validates YAML configuration files and environment overrides
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .app_config import AppConfig, DEFAULT_USER_AGENT
from ..errors import FeedError

API_KEY_ENV_VAR = "YOUTUBE_API_KEY"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigurationMissingError(ConfigValidationError, FeedError):
    """Raised when the YouTube API key is not configured."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "YouTube feeds are disabled because no API key is configured. "
            f"Set the {API_KEY_ENV_VAR} environment variable or the 'api_key' "
            "field of the configuration file. Keys are issued at "
            "https://console.developers.google.com/"
        )


class ConfigLoader:
    """
    Loads and validates configuration from a YAML file and the environment.

    Responsibilities:
    - Read the optional YAML configuration file
    - Apply the YOUTUBE_API_KEY environment override (.env supported)
    - Validate types and value ranges
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize ConfigLoader.

        Args:
            config_path: Path to YAML configuration file (optional)
            environ: Environment mapping; defaults to os.environ after loading .env
        """
        self._config_path = config_path
        self._environ = environ

    def load(self) -> AppConfig:
        """
        Load and validate configuration.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigurationMissingError: If no API key is available
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If an explicit config file doesn't exist
        """
        config_data = self._load_yaml() if self._config_path is not None else {}

        api_key = self._validate_api_key(config_data)
        embed_videos = self._validate_embed_videos(config_data)
        cache_ttl_seconds = self._validate_cache_ttl(config_data)
        request_timeout = self._validate_request_timeout(config_data)
        user_agent = self._validate_user_agent(config_data)

        return AppConfig(
            api_key=api_key,
            embed_videos=embed_videos,
            cache_ttl_seconds=cache_ttl_seconds,
            request_timeout=request_timeout,
            user_agent=user_agent
        )

    def _env(self) -> Dict[str, str]:
        if self._environ is None:
            load_dotenv()
            return dict(os.environ)
        return self._environ

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration must be a YAML mapping/dictionary"
            )

        return data

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Environment wins over the file; a missing key is fatal."""
        api_key = self._env().get(API_KEY_ENV_VAR) or config.get("api_key")

        if api_key is None:
            raise ConfigurationMissingError()

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            raise ConfigurationMissingError()

        return api_key.strip()

    def _validate_embed_videos(self, config: Dict[str, Any]) -> bool:
        embed = config.get("embed_videos", True)

        if not isinstance(embed, bool):
            raise ConfigValidationError(
                f"Field 'embed_videos' must be a boolean, got {type(embed).__name__}"
            )

        return embed

    def _validate_cache_ttl(self, config: Dict[str, Any]) -> int:
        ttl = config.get("cache_ttl_seconds", 3600)

        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise ConfigValidationError(
                f"Field 'cache_ttl_seconds' must be an integer, got {type(ttl).__name__}"
            )

        if ttl < 0:
            raise ConfigValidationError(
                f"Field 'cache_ttl_seconds' must be 0 or greater, got {ttl}"
            )

        return ttl

    def _validate_request_timeout(self, config: Dict[str, Any]) -> float:
        timeout = config.get("request_timeout", 30.0)

        # Accept both int and float
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigValidationError(
                f"Field 'request_timeout' must be a number, got {type(timeout).__name__}"
            )

        if timeout <= 0:
            raise ConfigValidationError(
                f"Field 'request_timeout' must be greater than 0, got {timeout}"
            )

        return float(timeout)

    def _validate_user_agent(self, config: Dict[str, Any]) -> str:
        user_agent = config.get("user_agent", DEFAULT_USER_AGENT)

        if not isinstance(user_agent, str) or not user_agent.strip():
            raise ConfigValidationError("Field 'user_agent' must be a non-empty string")

        return user_agent.strip()
