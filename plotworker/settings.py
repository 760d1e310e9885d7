"""Unified Application Settings

Typed configuration for the plot worker, loaded from environment variables
with the PLOTWORKER prefix.

Design principles:
- Single source of truth for all configuration
- Environment variable overrides with sensible defaults
- Type-safe settings with validation
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from plotworker.exceptions import ConfigurationError

_ENV_PREFIX = "PLOTWORKER"

DEFAULT_WEB_PORT = 8060
DEFAULT_SETTLE_DELAY_MS = 500
DEFAULT_CACHE_MAX_AGE = 3600
DEFAULT_CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js"
DEFAULT_HTML_TO_IMAGE_URL = (
    "https://cdn.jsdelivr.net/npm/html-to-image@1.11.11/dist/html-to-image.min.js"
)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{_ENV_PREFIX}_{name}")


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{_ENV_PREFIX}_{name} must be an integer, got '{raw}'")


@dataclass
class ServerSettings:
    """HTTP server binding"""

    host: str = "0.0.0.0"
    web_port: int = DEFAULT_WEB_PORT

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=_env("HOST") or "0.0.0.0",
            web_port=_env_int("WEB_PORT", DEFAULT_WEB_PORT),
        )


@dataclass
class LogSettings:
    """Logging configuration"""

    level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(level=(_env("LOG_LEVEL") or "INFO").upper())


@dataclass
class RenderSettings:
    """Settings baked into every renderable document and image response"""

    settle_delay_ms: int = DEFAULT_SETTLE_DELAY_MS
    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    chart_js_url: str = DEFAULT_CHART_JS_URL
    html_to_image_url: str = DEFAULT_HTML_TO_IMAGE_URL

    @classmethod
    def from_env(cls) -> "RenderSettings":
        return cls(
            settle_delay_ms=_env_int("SETTLE_DELAY_MS", DEFAULT_SETTLE_DELAY_MS),
            cache_max_age=_env_int("CACHE_MAX_AGE", DEFAULT_CACHE_MAX_AGE),
            chart_js_url=_env("CHART_JS_URL") or DEFAULT_CHART_JS_URL,
            html_to_image_url=_env("HTML_TO_IMAGE_URL") or DEFAULT_HTML_TO_IMAGE_URL,
        )


@dataclass
class Settings:
    """Complete application settings"""

    server: ServerSettings = field(default_factory=ServerSettings)
    log: LogSettings = field(default_factory=LogSettings)
    render: RenderSettings = field(default_factory=RenderSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load all settings from environment variables

        Raises:
            ConfigurationError: If an integer variable cannot be parsed
        """
        return cls(
            server=ServerSettings.from_env(),
            log=LogSettings.from_env(),
            render=RenderSettings.from_env(),
        )

    def validate(self) -> None:
        """
        Check settings for values the server cannot run with

        Raises:
            ConfigurationError: On the first invalid value found
        """
        if not 0 < self.server.web_port < 65536:
            raise ConfigurationError(f"Web port must be in 1..65535, got {self.server.web_port}")
        if self.log.level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log.level}'. Use one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        if self.render.settle_delay_ms < 0:
            raise ConfigurationError(
                f"Settle delay cannot be negative, got {self.render.settle_delay_ms}"
            )
        if self.render.cache_max_age < 0:
            raise ConfigurationError(
                f"Cache max age cannot be negative, got {self.render.cache_max_age}"
            )


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """
    Get or create the global settings instance

    Args:
        reload: If True, reload settings from environment

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
        _settings.validate()
    return _settings


def reset_settings() -> None:
    """Drop the global settings instance (used by tests)"""
    global _settings
    _settings = None


__all__ = [
    "ServerSettings",
    "LogSettings",
    "RenderSettings",
    "Settings",
    "get_settings",
    "reset_settings",
    "DEFAULT_WEB_PORT",
    "DEFAULT_SETTLE_DELAY_MS",
    "DEFAULT_CACHE_MAX_AGE",
]
