"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence

from nomenclator.common.errors import EmptyResultError, NomenclatorError

# One CSV row as read from the source: [timestamp, latitude, longitude].
RawRecord = Sequence[str]


@dataclass(frozen=True)
class ParsedRecord:
    timestamp: datetime
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PlaceDescriptor:
    primary_name: str
    country: str


@dataclass(frozen=True)
class WeatherSummary:
    # May be a comma-joined list, e.g. "Rain, Partially cloudy".
    condition_text: str


@dataclass(frozen=True)
class EnrichedRecord:
    place: PlaceDescriptor
    weather: WeatherSummary
    timestamp: datetime


@dataclass(frozen=True)
class RowError:
    row_index: int
    row: tuple[str, ...]
    error: NomenclatorError

    def __str__(self) -> str:
        return f"row {self.row_index}: invalid photo: {self.error}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row_index,
            "content": list(self.row),
            "error_code": self.error.error_code,
            "message": str(self.error),
        }


@dataclass(frozen=True)
class ProcessingOutcome:
    title: str
    errors: tuple[RowError, ...] = field(default_factory=tuple)
    rows_in: int = 0
    rows_enriched: int = 0

    @property
    def is_partial(self) -> bool:
        return bool(self.title) and bool(self.errors)

    def require_title(self) -> str:
        if not self.title:
            raise EmptyResultError(
                f"No photo could be enriched ({len(self.errors)} of {self.rows_in} rows failed)"
            )
        return self.title

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "rows_in": self.rows_in,
            "rows_enriched": self.rows_enriched,
            "errors": [error.to_dict() for error in self.errors],
        }
