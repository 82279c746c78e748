"""
Input validation helpers shared by request schemas
"""
from datetime import datetime, timezone
from typing import Any, Optional


def is_blank(value: Any) -> bool:
    """True for None, non-strings and strings that are empty once stripped."""
    return not isinstance(value, str) or not value.strip()


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime string into a naive UTC datetime.

    Offsets (including a trailing 'Z') are converted to UTC; values without an
    offset are taken as UTC already.

    Raises:
        ValueError: if the value is not a parseable ISO string
    """
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError(f'Expected an ISO-8601 string, got {type(value).__name__}')

    parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    return parsed
