"""UTC-focused helpers for photo timestamps and run metadata."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from nomenclator.common.constants import PHOTO_TIMESTAMP_FORMAT

# strptime alone accepts unpadded fields and non-ASCII digits.
_PHOTO_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z", re.ASCII)


def parse_photo_timestamp(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SSZ`` into an aware UTC datetime.

    Raises ``ValueError`` for anything else, including fractional seconds
    and numeric offsets.
    """
    if not isinstance(value, str) or not _PHOTO_TIMESTAMP_RE.fullmatch(value):
        raise ValueError(f"timestamp {value!r} does not match YYYY-MM-DDTHH:MM:SSZ")
    parsed = datetime.strptime(value, PHOTO_TIMESTAMP_FORMAT)
    return parsed.replace(tzinfo=timezone.utc)


def utc_timestamp_iso() -> str:
    return datetime.now(tz=timezone.utc).isoformat(timespec="milliseconds")
