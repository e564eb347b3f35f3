"""Canonical date-time strings for due dates and timestamps."""

from datetime import UTC, date, datetime

from tasklist.errors import ValidationFailure

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DD HH:MM:SS`` in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(TIMESTAMP_FORMAT)


def now_timestamp() -> str:
    """Current time in canonical form."""
    return format_timestamp(datetime.now(UTC))


def normalize_due_date(value: str | date | datetime) -> str:
    """Parse a due date and return it in canonical form.

    Accepts ISO 8601 strings ("2022-03-07", "2022-03-07 08:00",
    "2022-03-07T08:00:00Z") as well as date and datetime objects. A bare
    date becomes midnight.
    """
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return format_timestamp(datetime(value.year, value.month, value.day))
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise ValidationFailure(f"Invalid due date: {value!r}") from e
    return format_timestamp(parsed)
