"""
Timestamp helpers shared by the normalizer, selector and snapshot builder.
"""

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """Render an instant as an ISO-8601 UTC string with millisecond precision.

    Examples:
        2026-01-17 14:00:00+00:00 -> "2026-01-17T14:00:00.000Z"
        2026-01-17 15:30:00+01:00 -> "2026-01-17T14:30:00.000Z"

    Naive datetimes are read as local time, as ``datetime.astimezone`` does.

    Args:
        moment: The instant to format

    Returns:
        The formatted timestamp
    """
    utc = moment.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp such as "2026-01-17T14:00:00Z".

    Raises:
        ValueError: If the text is not a valid ISO-8601 timestamp
    """
    return datetime.fromisoformat(text.strip())


def coerce_datetime(value: datetime | str) -> datetime:
    """Accept either a datetime or its ISO-8601 text form."""
    if isinstance(value, str):
        return parse_timestamp(value)
    return value
