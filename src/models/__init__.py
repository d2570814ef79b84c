"""Data models for the medicine cabinet application."""

from .medicine import Medicine, new_id
from .reminder import MedicineReminder, StockStatus
from .family_member import FamilyMember, MemberMedication
from ..expiration.rules import ShelfLifeRule

__all__ = [
    # Cabinet
    "Medicine",
    "ShelfLifeRule",
    "new_id",
    # Reminders
    "MedicineReminder",
    "StockStatus",
    # Family
    "FamilyMember",
    "MemberMedication",
]
