"""
Calendar date handling for the expiration engine.

Dates cross the public boundary as ``YYYY-MM-DD`` strings and are validated
into ``datetime.date`` values here before any arithmetic takes place.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Optional, Union

DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date]


class InvalidDateFormat(ValueError):
    """Raised when a value cannot be parsed as a calendar date."""

    def __init__(self, message: str, context: Optional[Dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with context."""
        msg = f"Invalid Date: {self.message}"
        if self.context:
            msg += "\n\nContext:"
            for key, value in self.context.items():
                msg += f"\n  {key}: {value}"
        return msg


def parse_calendar_date(value: DateLike, field_name: str = "date") -> date:
    """
    Parse a ``YYYY-MM-DD`` string (or pass through a date) into a ``date``.

    Datetimes are truncated to their calendar date.

    Args:
        value: Date string or date/datetime value
        field_name: Name of the field being parsed, reported on failure

    Returns:
        The parsed calendar date

    Raises:
        InvalidDateFormat: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise InvalidDateFormat(
            f"{field_name} must be a YYYY-MM-DD string",
            context={"field": field_name, "value": repr(value)},
        )

    text = value.strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormat(
            f"{field_name} '{value}' is not a valid YYYY-MM-DD date",
            context={"field": field_name, "value": repr(value), "reason": str(e)},
        ) from e


def to_midnight(moment: Optional[Union[date, datetime]] = None) -> date:
    """Strip the time of day, defaulting to the local clock's current date."""
    if moment is None:
        return date.today()
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def add_months(start: date, months: int) -> date:
    """
    Add calendar months to a date with day-of-month rollover.

    The day of month is kept; when it does not exist in the target month the
    excess days roll over into the following month, e.g. 2025-11-30 plus
    3 months is 2026-03-02.

    Args:
        start: Starting date
        months: Number of months to add (may be negative)

    Returns:
        Resulting date
    """
    if months == 0:
        return start

    total_months = start.year * 12 + (start.month - 1) + months
    year, month_index = divmod(total_months, 12)

    first_of_month = date(year, month_index + 1, 1)
    return first_of_month + timedelta(days=start.day - 1)
