"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from nomenclator.common.constants import (
    DEFAULT_WEATHER_ELEMENTS,
    LOCATOR_API_KEY_ENV,
    POSITIONSTACK_REVERSE_URL,
    VISUAL_CROSSING_TIMELINE_URL,
    WEATHER_API_KEY_ENV,
)
from nomenclator.common.errors import ConfigError
from nomenclator.common.fs import read_yaml
from nomenclator.common.schema import validate_settings_config


@dataclass(frozen=True)
class LocatorConfig:
    endpoint: str = POSITIONSTACK_REVERSE_URL
    # 0 leaves the limit parameter off the request.
    limit: int = 1


@dataclass(frozen=True)
class WeatherConfig:
    endpoint: str = VISUAL_CROSSING_TIMELINE_URL
    elements: tuple[str, ...] = DEFAULT_WEATHER_ELEMENTS
    unit_group: str = "metric"


@dataclass(frozen=True)
class HttpConfig:
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    rate_per_sec: float = 5.0


@dataclass(frozen=True)
class Settings:
    locator_api_key: str
    weather_api_key: str
    locator: LocatorConfig = field(default_factory=LocatorConfig)
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    http: HttpConfig = field(default_factory=HttpConfig)


def _require_env(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} env var not set. Please set a valid API Key")
    return value


def _load_overlay(config_path: Path | None, allow_unknown: bool) -> dict[str, Any]:
    if config_path is None:
        return {}
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    return validate_settings_config(read_yaml(config_path), allow_unknown=allow_unknown)


def load_settings(
    environ: Mapping[str, str],
    config_path: Path | None = None,
    *,
    allow_unknown: bool = False,
) -> Settings:
    locator_key = _require_env(environ, LOCATOR_API_KEY_ENV)
    weather_key = _require_env(environ, WEATHER_API_KEY_ENV)
    overlay = _load_overlay(config_path, allow_unknown)

    locator_cfg = overlay.get("locator", {})
    weather_cfg = overlay.get("weather", {})
    http_cfg = overlay.get("http", {})
    defaults_locator = LocatorConfig()
    defaults_weather = WeatherConfig()
    defaults_http = HttpConfig()

    return Settings(
        locator_api_key=locator_key,
        weather_api_key=weather_key,
        locator=LocatorConfig(
            endpoint=locator_cfg.get("endpoint", defaults_locator.endpoint),
            limit=locator_cfg.get("limit", defaults_locator.limit),
        ),
        weather=WeatherConfig(
            endpoint=weather_cfg.get("endpoint", defaults_weather.endpoint),
            elements=tuple(weather_cfg.get("elements", defaults_weather.elements)),
            unit_group=weather_cfg.get("unit_group", defaults_weather.unit_group),
        ),
        http=HttpConfig(
            connect_timeout=float(http_cfg.get("connect_timeout", defaults_http.connect_timeout)),
            read_timeout=float(http_cfg.get("read_timeout", defaults_http.read_timeout)),
            rate_per_sec=float(http_cfg.get("rate_per_sec", defaults_http.rate_per_sec)),
        ),
    )
