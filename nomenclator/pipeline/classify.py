"""Majority-vote classifiers that turn enriched records into title words."""

from __future__ import annotations

import re
from collections import Counter
from datetime import datetime
from typing import Iterable, Sequence

from nomenclator.common.models import EnrichedRecord

# Evaluated top-down; the first matching pattern decides the bucket.
MOOD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"rain|drizzle|shower"), "rainy"),
    (re.compile(r"snow"), "snowy"),
    (re.compile(r"storm|thunder|tornado"), "stormy"),
    (re.compile(r"ice|icy"), "chilly"),
    (re.compile(r"mist|overcast|fog"), "foggy"),
)
DEFAULT_MOOD = "sunny"

WEEKEND_DAYS = {4, 5, 6}  # Friday, Saturday, Sunday


def _leader(labels: Iterable[str]) -> str:
    """Return the most frequent label; ties go to the label that got there first."""
    counts: Counter[str] = Counter()
    leader = ""
    best = 0
    for label in labels:
        counts[label] += 1
        if counts[label] > best:
            best = counts[label]
            leader = label
    return leader


def mood_bucket(condition_text: str) -> str:
    lowered = condition_text.lower()
    for pattern, bucket in MOOD_RULES:
        if pattern.search(lowered):
            return bucket
    return DEFAULT_MOOD


def classify_mood(records: Sequence[EnrichedRecord]) -> str:
    return _leader(mood_bucket(record.weather.condition_text) for record in records)


def span_bucket(earliest: datetime, latest: datetime) -> str:
    days = (latest - earliest).total_seconds() / 3600 / 24
    if days > 3:
        return "week"
    if days > 1:
        if earliest.weekday() in WEEKEND_DAYS or latest.weekday() in WEEKEND_DAYS:
            return "weekend"
        return "few days"
    return "day"


def classify_span(records: Sequence[EnrichedRecord]) -> str:
    if not records:
        return ""
    earliest = latest = records[0].timestamp
    for record in records:
        if record.timestamp < earliest:
            earliest = record.timestamp
        if record.timestamp > latest:
            latest = record.timestamp
    return span_bucket(earliest, latest)


def classify_place(records: Sequence[EnrichedRecord]) -> str:
    return _leader(record.place.primary_name for record in records)
