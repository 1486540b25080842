"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from nomenclator.common.constants import WEATHER_UNIT_GROUPS
from nomenclator.common.errors import ConfigError

SECTION_KEYS = {
    "locator": {"endpoint", "limit"},
    "weather": {"endpoint", "elements", "unit_group"},
    "http": {"connect_timeout", "read_timeout", "rate_per_sec"},
}


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_positive_number(value, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number")


def validate_settings_config(cfg, *, allow_unknown: bool = False) -> dict:
    if cfg is None:
        return {}
    _assert_mapping(cfg, "settings config")
    _assert_no_unknown_keys(cfg, set(SECTION_KEYS), "settings config", allow_unknown)

    for section, known in SECTION_KEYS.items():
        if section not in cfg:
            continue
        _assert_mapping(cfg[section], section)
        _assert_no_unknown_keys(cfg[section], known, section, allow_unknown)

    locator = cfg.get("locator", {})
    if "limit" in locator:
        limit = locator["limit"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ConfigError("locator.limit must be a non-negative integer")

    weather = cfg.get("weather", {})
    if "elements" in weather:
        elements = weather["elements"]
        if not isinstance(elements, list) or not elements or not all(isinstance(e, str) for e in elements):
            raise ConfigError("weather.elements must be a non-empty list of strings")
    if "unit_group" in weather and weather["unit_group"] not in WEATHER_UNIT_GROUPS:
        raise ConfigError(f"weather.unit_group must be one of: {', '.join(WEATHER_UNIT_GROUPS)}")

    for key in ("connect_timeout", "read_timeout", "rate_per_sec"):
        if key in cfg.get("http", {}):
            _assert_positive_number(cfg["http"][key], f"http.{key}")

    return cfg
