"""Lookup capabilities consumed by the enricher."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from nomenclator.common.models import PlaceDescriptor, WeatherSummary


class PlaceResolver(Protocol):
    def locate(self, latitude: float, longitude: float) -> PlaceDescriptor: ...


class WeatherResolver(Protocol):
    def check_weather(self, latitude: float, longitude: float, date: datetime) -> WeatherSummary: ...
