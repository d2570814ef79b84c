"""In-memory reminder board for the household dashboard."""

import logging
from typing import Dict, Iterable, List, Optional

from ..config import CabinetConfig, get_global_config
from ..models import MedicineReminder, StockStatus
from .schedule import group_by_time_of_day
from .stock import restock, take_dose

logger = logging.getLogger(__name__)


class ReminderBoard:
    """Holds the household's medicine reminders and applies stock updates."""

    def __init__(
        self,
        reminders: Optional[Iterable[MedicineReminder]] = None,
        config: Optional[CabinetConfig] = None,
    ):
        self.config = config or get_global_config()
        self._reminders: List[MedicineReminder] = list(reminders or [])

    def __len__(self) -> int:
        return len(self._reminders)

    @property
    def reminders(self) -> List[MedicineReminder]:
        return list(self._reminders)

    def get(self, reminder_id: str) -> MedicineReminder:
        """Look up a reminder by id.

        Raises:
            KeyError: If no reminder has this id
        """
        for reminder in self._reminders:
            if reminder.id == reminder_id:
                return reminder
        raise KeyError(f"Reminder not found: {reminder_id}")

    def add(self, reminder: MedicineReminder) -> MedicineReminder:
        """Add a reminder.

        Raises:
            ValueError: If a reminder with the same id already exists
        """
        if any(r.id == reminder.id for r in self._reminders):
            raise ValueError(f"Duplicate reminder id: {reminder.id}")
        self._reminders.append(reminder)
        logger.debug("Added reminder %s", reminder)

        if reminder.stock_status.needs_refill:
            status_text = "LOW STOCK" if reminder.stock_status == StockStatus.LOW else "EMPTY STOCK"
            logger.warning(
                "%s's %s was added with %s. Time to restock!",
                reminder.member, reminder.medicine_name, status_text
            )
        return reminder

    def _replace(self, updated: MedicineReminder) -> MedicineReminder:
        self._reminders = [updated if r.id == updated.id else r for r in self._reminders]
        return updated

    def take_dose(self, reminder_id: str) -> MedicineReminder:
        """Record a dose taken for the given reminder."""
        return self._replace(take_dose(self.get(reminder_id)))

    def restock(self, reminder_id: str, amount: Optional[int] = None) -> MedicineReminder:
        """Restock the given reminder (default amount from configuration)."""
        if amount is None:
            amount = self.config.default_restock_amount
        return self._replace(restock(self.get(reminder_id), amount))

    def refills_needed(self) -> int:
        """Number of reminders whose stock is low or empty."""
        return sum(1 for r in self._reminders if r.stock_status.needs_refill)

    def for_member(self, member: str) -> List[MedicineReminder]:
        return [r for r in self._reminders if r.member == member]

    def schedule_groups(self) -> Dict[str, List[MedicineReminder]]:
        """Reminders grouped into Morning, Afternoon and Evening."""
        return group_by_time_of_day(self._reminders)


def sample_reminders() -> ReminderBoard:
    """Reminder board pre-filled with the demo household schedule."""
    return ReminderBoard([
        MedicineReminder(
            id='r1', medicine_name='Blood Pressure Med', pills_remaining=15, dosage=1,
            low_stock_threshold=7, schedule='7:00 AM', member='Grandpa Ahmed',
        ),
        MedicineReminder(
            id='r2', medicine_name='Daily Vitamin', pills_remaining=90, dosage=1,
            low_stock_threshold=14, schedule='8:00 AM', member='Aisha',
        ),
        MedicineReminder(
            id='r3', medicine_name='Antibiotic X', pills_remaining=2, dosage=1,
            low_stock_threshold=5, schedule='12:00 PM', member='Omar (Son)',
        ),
    ])
