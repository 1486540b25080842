"""Historical weather lookups through the Visual Crossing timeline API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence
from urllib.parse import quote

from nomenclator.common.constants import (
    DEFAULT_WEATHER_ELEMENTS,
    VISUAL_CROSSING_TIMELINE_URL,
    WEATHER_UNIT_GROUPS,
)
from nomenclator.common.errors import ConfigError
from nomenclator.common.http import HttpClient, ResolverResponseError
from nomenclator.common.models import WeatherSummary
from nomenclator.resolvers.locator import coordinate_query


class VisualCrossingWeatherman:
    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = VISUAL_CROSSING_TIMELINE_URL,
        elements: Sequence[str] = DEFAULT_WEATHER_ELEMENTS,
        unit_group: str = "metric",
        http_client: HttpClient | None = None,
    ) -> None:
        if unit_group not in WEATHER_UNIT_GROUPS:
            raise ConfigError(f"Unsupported unit group: {unit_group}")
        self.api_key = api_key
        self.endpoint = endpoint.rstrip("/")
        self.elements = tuple(elements)
        self.unit_group = unit_group
        self.http_client = http_client or HttpClient()

    def build_url(self, latitude: float, longitude: float, date: datetime) -> str:
        day = date.strftime("%Y-%m-%d")
        location = quote(coordinate_query(latitude, longitude), safe=",")
        return f"{self.endpoint}/{location}/{day}/{day}"

    def build_params(self) -> dict[str, Any]:
        return {
            "unitgroup": self.unit_group,
            "elements": ",".join(self.elements),
            "include": "obs,days",
            "key": self.api_key,
            "options": "nonulls",
            "contentType": "json",
        }

    def check_weather(self, latitude: float, longitude: float, date: datetime) -> WeatherSummary:
        payload = self.http_client.get_json(
            self.build_url(latitude, longitude, date),
            params=self.build_params(),
        )
        days = payload.get("days")
        if not isinstance(days, list) or not days or not isinstance(days[0], dict):
            raise ResolverResponseError(f"No weather reported for {date:%Y-%m-%d}")
        conditions = days[0].get("conditions")
        if conditions is None:
            raise ResolverResponseError(f"No conditions reported for {date:%Y-%m-%d}")
        return WeatherSummary(condition_text=str(conditions))
