from __future__ import annotations

from datetime import date, datetime, timezone

# Accepted on input; output is always ISO.
_DATE_FORMATS = ("%Y-%m-%d", "%d-%m-%Y")


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD (or dd-MM-yyyy) string into date."""
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unsupported date: {value!r}")


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)
