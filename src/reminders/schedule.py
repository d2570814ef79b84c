"""Grouping of reminders into morning, afternoon and evening doses."""

import logging
import re
from typing import Dict, Iterable, List

from ..models import MedicineReminder

logger = logging.getLogger(__name__)

MORNING = "Morning"
AFTERNOON = "Afternoon"
EVENING = "Evening"

# Afternoon runs from noon up to (not including) this hour
EVENING_START_HOUR = 17

_SCHEDULE_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")


def parse_schedule_hour(schedule: str) -> int:
    """
    Parse the hour (0-23) from a schedule such as "8:00 AM".

    12 AM is midnight (hour 0) and 12 PM is noon (hour 12).

    Raises:
        ValueError: If the schedule is not in "H:MM AM/PM" form
    """
    match = _SCHEDULE_PATTERN.match(schedule)
    if not match:
        raise ValueError(f"Schedule must look like '8:00 AM', got: {schedule!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    ampm = match.group(3).upper()

    if not 1 <= hour <= 12 or minute > 59:
        raise ValueError(f"Invalid schedule time: {schedule!r}")

    if ampm == "PM" and hour != 12:
        hour += 12
    if ampm == "AM" and hour == 12:
        hour = 0
    return hour


def time_of_day(schedule: str) -> str:
    """Morning before noon, afternoon until 5 PM, evening afterwards.

    Free-text schedules such as "Before Bed" have no hour and count as evening.
    """
    try:
        hour = parse_schedule_hour(schedule)
    except ValueError:
        logger.debug("No clock time in schedule %r, filing under %s", schedule, EVENING)
        return EVENING

    if hour < 12:
        return MORNING
    if hour < EVENING_START_HOUR:
        return AFTERNOON
    return EVENING


def group_by_time_of_day(reminders: Iterable[MedicineReminder]) -> Dict[str, List[MedicineReminder]]:
    """
    Group reminders by time of day.

    Within each group reminders are ordered by their schedule text.

    Returns:
        Dict with keys Morning, Afternoon and Evening (always present, in that order)
    """
    groups: Dict[str, List[MedicineReminder]] = {
        MORNING: [],
        AFTERNOON: [],
        EVENING: [],
    }

    for reminder in sorted(reminders, key=lambda r: r.schedule):
        groups[time_of_day(reminder.schedule)].append(reminder)

    return groups
