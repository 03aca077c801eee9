# app/utils/validators.py
from __future__ import annotations

from typing import Optional, Tuple
from datetime import date
import re

from app.utils.errors import ValidationError

DEFAULT_CITY_LIMIT = 10
MIN_YEAR = 1900

_ISO2 = re.compile(r"[A-Za-z]{2}")
_INTEGER = re.compile(r"\+?[0-9]+")


def validate_country_code(raw: Optional[str]) -> str:
    """Return the ISO2 code uppercased, e.g. 'no' -> 'NO'."""
    code = raw or ""
    if not _ISO2.fullmatch(code):
        raise ValidationError(
            "invalid country code. Use a valid ISO2 format (e.g., 'NO', 'US')"
        )
    return code.upper()


def parse_city_limit(raw: Optional[str]) -> int:
    if raw is None or raw == "":
        return DEFAULT_CITY_LIMIT
    if not _INTEGER.fullmatch(raw) or int(raw) <= 0:
        raise ValidationError("invalid 'limit' parameter. Must be a positive integer.")
    return int(raw)


def parse_year_range(raw: Optional[str], today: Optional[date] = None) -> Tuple[int, int]:
    """
    Parse 'startYear-endYear' into (start, end).

    An absent value means no filtering and yields (0, 0). Years must lie
    between 1900 and the current calendar year, and start must not exceed end.
    """
    if raw is None or raw == "":
        return 0, 0

    parts = raw.split("-")
    if len(parts) != 2:
        raise ValidationError("Invalid 'limit' format. Use 'startYear-endYear'.")
    if not all(_INTEGER.fullmatch(p) for p in parts):
        raise ValidationError(
            "Invalid 'limit' format. Use 'startYear-endYear' with numeric values (e.g., '2000-2020')."
        )

    start, end = int(parts[0]), int(parts[1])
    current_year = (today or date.today()).year
    if start < MIN_YEAR or end > current_year:
        raise ValidationError(
            f"Year range out of bounds. Use years between {MIN_YEAR} and {current_year}."
        )
    if start > end:
        raise ValidationError(
            f"invalid year range: startYear ({start}) cannot be greater than endYear ({end})"
        )
    return start, end
