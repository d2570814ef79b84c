"""Medicine reminders with stock tracking and daily schedule grouping."""

from .stock import calculate_stock_status, take_dose, restock
from .schedule import (
    MORNING,
    AFTERNOON,
    EVENING,
    parse_schedule_hour,
    time_of_day,
    group_by_time_of_day,
)
from .board import ReminderBoard, sample_reminders

__all__ = [
    "calculate_stock_status",
    "take_dose",
    "restock",
    "MORNING",
    "AFTERNOON",
    "EVENING",
    "parse_schedule_hour",
    "time_of_day",
    "group_by_time_of_day",
    "ReminderBoard",
    "sample_reminders",
]
