"""Reverse geocoding through the positionstack API."""

from __future__ import annotations

from typing import Any

from nomenclator.common.constants import POSITIONSTACK_REVERSE_URL
from nomenclator.common.http import HttpClient, ResolverResponseError
from nomenclator.common.models import PlaceDescriptor


def coordinate_query(latitude: float, longitude: float) -> str:
    return f"{latitude:f},{longitude:f}"


class PositionstackLocator:
    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = POSITIONSTACK_REVERSE_URL,
        limit: int = 0,
        http_client: HttpClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.limit = limit
        self.http_client = http_client or HttpClient()

    def build_params(self, latitude: float, longitude: float) -> dict[str, Any]:
        params: dict[str, Any] = {
            "access_key": self.api_key,
            "query": coordinate_query(latitude, longitude),
        }
        if self.limit != 0:
            params["limit"] = str(self.limit)
        return params

    def locate(self, latitude: float, longitude: float) -> PlaceDescriptor:
        payload = self.http_client.get_json(self.endpoint, params=self.build_params(latitude, longitude))
        results = payload.get("data")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            raise ResolverResponseError(f"No place found for {coordinate_query(latitude, longitude)}")

        best = results[0]
        # positionstack reports the city-level name for US addresses in "region".
        region = best.get("region")
        if not region:
            raise ResolverResponseError(f"Place for {coordinate_query(latitude, longitude)} has no region")
        return PlaceDescriptor(primary_name=region, country=best.get("country") or "")
