"""Per-row parsing and lookup orchestration."""

from __future__ import annotations

import math
import re

from nomenclator.common.errors import ParseError, ResolverError
from nomenclator.common.models import EnrichedRecord, ParsedRecord, RawRecord
from nomenclator.common.time_utils import parse_photo_timestamp
from nomenclator.resolvers.base import PlaceResolver, WeatherResolver

# ASCII only: float() would also take underscores, padding and non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


def _parse_coordinate(value: str, name: str, limit: float) -> float:
    if not isinstance(value, str) or not _DECIMAL_RE.fullmatch(value):
        raise ParseError(f"invalid {name}: {value!r}")
    parsed = float(value)
    if not math.isfinite(parsed) or not -limit <= parsed <= limit:
        raise ParseError(f"invalid {name}: {value!r}")
    return parsed


def parse_raw_record(raw: RawRecord) -> ParsedRecord:
    """Validate one raw row.

    Coordinates must be plain ASCII decimals. Values outside the WGS84 range
    (latitude beyond 90, longitude beyond 180) are rejected here rather than
    being handed to the resolvers.
    """
    if not raw or all(not str(field).strip() for field in raw):
        raise ParseError("empty row")
    if len(raw) < 3:
        raise ParseError(f"expected timestamp, latitude and longitude, got {len(raw)} field(s)")

    try:
        timestamp = parse_photo_timestamp(raw[0])
    except ValueError as exc:
        raise ParseError(f"invalid date: {exc}") from exc

    return ParsedRecord(
        timestamp=timestamp,
        latitude=_parse_coordinate(raw[1], "latitude", 90.0),
        longitude=_parse_coordinate(raw[2], "longitude", 180.0),
    )


def enrich_record(raw: RawRecord, locator: PlaceResolver, weatherman: WeatherResolver) -> EnrichedRecord:
    """Turn one raw row into an enriched record.

    Raises ``ParseError`` for a malformed row and ``ResolverError`` when either
    lookup fails. The weather lookup is skipped once the place lookup failed.
    """
    parsed = parse_raw_record(raw)

    try:
        place = locator.locate(parsed.latitude, parsed.longitude)
    except Exception as exc:
        raise ResolverError("locator", str(exc)) from exc

    try:
        weather = weatherman.check_weather(parsed.latitude, parsed.longitude, parsed.timestamp)
    except Exception as exc:
        raise ResolverError("weatherman", str(exc)) from exc

    return EnrichedRecord(place=place, weather=weather, timestamp=parsed.timestamp)
