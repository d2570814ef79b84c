"""
Post-opening shelf life rules.

A rule maps the date a container was first opened to the last day its
contents may be used. The printed box date always remains the upper bound.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from .dates import add_months


class ShelfLifeRule(str, Enum):
    """
    Post-opening shelf life policies.

    - BOX_DATE: Opening date is ignored, the box date applies
    - TWO_WEEKS: Usable for 14 days after opening (e.g., some eye drops)
    - THREE_MONTHS: Usable for 3 calendar months after opening (liquids, creams)
    - SIX_MONTHS: Usable for 6 calendar months after opening
    """
    BOX_DATE = "BOX_DATE"
    TWO_WEEKS = "TWO_WEEKS"
    THREE_MONTHS = "THREE_MONTHS"
    SIX_MONTHS = "SIX_MONTHS"

    @property
    def offset_days(self) -> int:
        """Fixed day offset after opening (0 for month-based rules)."""
        return {
            ShelfLifeRule.BOX_DATE: 0,
            ShelfLifeRule.TWO_WEEKS: 14,
            ShelfLifeRule.THREE_MONTHS: 0,
            ShelfLifeRule.SIX_MONTHS: 0,
        }[self]

    @property
    def offset_months(self) -> int:
        """Calendar month offset after opening (0 for day-based rules)."""
        return {
            ShelfLifeRule.BOX_DATE: 0,
            ShelfLifeRule.TWO_WEEKS: 0,
            ShelfLifeRule.THREE_MONTHS: 3,
            ShelfLifeRule.SIX_MONTHS: 6,
        }[self]

    @property
    def requires_opening_date(self) -> bool:
        """Whether the rule only takes effect once an opening date is known."""
        return self != ShelfLifeRule.BOX_DATE

    @property
    def label(self) -> str:
        """Short label shown on a medicine card."""
        return {
            ShelfLifeRule.BOX_DATE: "Box Date Only",
            ShelfLifeRule.TWO_WEEKS: "2 Weeks from Opening",
            ShelfLifeRule.THREE_MONTHS: "3 Months from Opening",
            ShelfLifeRule.SIX_MONTHS: "6 Months from Opening",
        }[self]

    @property
    def description(self) -> str:
        """Longer description used when choosing a rule."""
        return {
            ShelfLifeRule.BOX_DATE: "Use Box Expiry Date (e.g., unopened tablets)",
            ShelfLifeRule.TWO_WEEKS: "2 Weeks After Opening (e.g., some eye drops)",
            ShelfLifeRule.THREE_MONTHS: "3 Months After Opening (e.g., liquids, creams)",
            ShelfLifeRule.SIX_MONTHS: "6 Months After Opening",
        }[self]

    def expiry_after_opening(self, opening_date: date) -> Optional[date]:
        """
        Calculate the post-opening expiry date for this rule.

        Args:
            opening_date: Date the container was first opened

        Returns:
            Last usable date after opening, or None for BOX_DATE
        """
        if not self.requires_opening_date:
            return None
        if self.offset_months:
            return add_months(opening_date, self.offset_months)
        return opening_date + timedelta(days=self.offset_days)

    def __str__(self) -> str:
        return self.value
