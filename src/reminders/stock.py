"""Stock control for medicine reminders: taking doses and restocking."""

import logging

from ..models import MedicineReminder, StockStatus

logger = logging.getLogger(__name__)


def calculate_stock_status(count: int, threshold: int) -> StockStatus:
    """Stock status for a pill count against a low stock threshold."""
    return StockStatus.from_count(count, threshold)


def take_dose(reminder: MedicineReminder) -> MedicineReminder:
    """
    Record one dose taken from the reminder's supply.

    The count never drops below zero. A reminder with an empty supply is
    returned unchanged. Dropping to low or empty stock logs a restock alert.

    Args:
        reminder: Reminder whose dose was taken

    Returns:
        Updated reminder
    """
    if reminder.pills_remaining <= 0:
        return reminder

    new_count = reminder.pills_remaining - reminder.dosage
    new_status = calculate_stock_status(new_count, reminder.low_stock_threshold)
    remaining = max(new_count, 0)

    if new_status.needs_refill:
        status_text = "LOW STOCK" if new_status == StockStatus.LOW else "EMPTY STOCK"
        logger.warning(
            "%s's %s is now %s! Only %d doses remaining. Time to restock!",
            reminder.member, reminder.medicine_name, status_text, remaining
        )

    return reminder.model_copy(update={
        'pills_remaining': remaining,
        'stock_status': new_status,
    })


def restock(reminder: MedicineReminder, amount: int) -> MedicineReminder:
    """
    Add pills to the reminder's supply.

    Args:
        reminder: Reminder to restock
        amount: Pills added; non-positive amounts are ignored

    Returns:
        Updated reminder
    """
    if amount <= 0:
        return reminder

    new_count = reminder.pills_remaining + amount
    new_status = calculate_stock_status(new_count, reminder.low_stock_threshold)

    logger.info(
        "Restocked %d pills of %s. Total remaining: %d.",
        amount, reminder.medicine_name, new_count
    )

    return reminder.model_copy(update={
        'pills_remaining': new_count,
        'stock_status': new_status,
    })
