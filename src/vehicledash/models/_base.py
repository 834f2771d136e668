"""Shared model helpers.

The vehicle service is not strict about how it serialises
``lastUpdated``: document stores emit ISO-8601 strings, other backends
emit epoch seconds or milliseconds. :data:`Timestamp` accepts all of
them and always yields a timezone-aware UTC :class:`~datetime.datetime`
(or ``None`` when the value is absent or unparseable).
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def _from_epoch(value: float) -> datetime | None:
    ts = float(value)
    if ts != ts:  # NaN
        return None
    if abs(ts) >= _MS_THRESHOLD:
        ts = ts / 1000
    try:
        return datetime.fromtimestamp(ts, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def parse_timestamp(value: Any) -> datetime | None:
    """Convert a wire timestamp to a UTC datetime.

    Returns ``None`` when the value is ``None``, empty, or not a
    recognizable timestamp.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, (int, float)):
        return _from_epoch(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return _from_epoch(float(text))
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)
    return None


Timestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces ISO strings and epoch numbers to UTC datetimes."""
