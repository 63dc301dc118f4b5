import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

# Missing date components (e.g. "2020-03") resolve to the first of the month
_PARSE_DEFAULT = datetime(2000, 1, 1)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)


def round_score(value: float, places: int = 2) -> float:
    """Round a score for presentation; keeps -0.0 out of results."""
    return round(value, places) + 0.0


def normalize_key(value: Any) -> Optional[str]:
    """
    Normalize an enum member or free-form string to an upper-case lookup key.

    Returns None for empty values so table lookups fall through to defaults.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    text = str(value).strip()
    if not text:
        return None
    return text.upper().replace("-", "_").replace(" ", "_")


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date-like value (date, datetime or string).

    Returns None when the value is missing or cannot be parsed; callers
    skip such entries instead of failing.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date_parser.parse(value, default=_PARSE_DEFAULT).date()
        except (ValueError, OverflowError) as e:
            logger.warning(f"Could not parse date {value!r}: {e}")
            return None
    logger.warning(f"Unsupported date value {value!r} ({type(value).__name__})")
    return None
