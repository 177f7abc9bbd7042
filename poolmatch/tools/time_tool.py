"""
Time Tool

Timestamp parsing and conversion used by the scoring algorithms and the
request schemas.

Functions:
- parse_timestamp(value): Parse datetime / ISO string / epoch milliseconds
- to_epoch_ms(value): Convert a datetime to epoch milliseconds (naive = UTC)

parse_timestamp never raises on bad input; it returns None.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp into an aware UTC datetime.

    Supports:
    - datetime objects (naive values are read as UTC)
    - ISO 8601 strings, with or without 'Z' / offset
    - epoch numbers, always milliseconds (as JavaScript Date values are)

    Args:
        value: datetime, string, number or None

    Returns:
        Aware datetime or None if parsing fails

    Example:
        >>> parse_timestamp("2026-02-05T09:00:00Z").hour
        9
        >>> parse_timestamp(0).year
        1970
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return _as_utc(value)

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Epoch value out of range: {value}")
            return None

    value_str = str(value).strip()
    if not value_str:
        return None

    if value_str.endswith("Z"):
        value_str = value_str[:-1] + "+00:00"

    try:
        return _as_utc(datetime.fromisoformat(value_str))
    except ValueError:
        logger.debug(f"Failed to parse timestamp: {value}")
        return None


def to_epoch_ms(value: datetime) -> float:
    """
    Convert a datetime to epoch milliseconds.

    Example:
        >>> to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1))
        1000.0
    """
    return _as_utc(value).timestamp() * 1000.0


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
