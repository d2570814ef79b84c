"""
Effective expiration status for a single medicine.

The effective expiry is the earlier of the printed box date and the date
derived from the post-opening shelf life rule. Status is recomputed from the
inputs and the current date on every call and never cached.
"""

import logging
import warnings
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from ..config import get_global_config
from .dates import DateLike, InvalidDateFormat, parse_calendar_date, to_midnight
from .rules import ShelfLifeRule

logger = logging.getLogger(__name__)


class MissingOpeningDateForRule(UserWarning):
    """A post-opening rule was selected but no opening date is recorded."""


class Severity(str, Enum):
    """Display urgency for a medicine's expiration status."""
    OK = "ok"
    WARNING = "warning"
    EXPIRED = "expired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExpirationStatus:
    """
    Derived expiration state of a medicine on a given day.

    Attributes:
        effective_expiry_date: Date after which the medicine is expired
        days_left: Signed whole days from today to the effective date
        is_expired: True when days_left is negative
    """
    effective_expiry_date: date
    days_left: int
    is_expired: bool

    @property
    def effective_expiry_iso(self) -> str:
        """Effective expiry as a YYYY-MM-DD string."""
        return self.effective_expiry_date.isoformat()

    def __str__(self) -> str:
        if self.is_expired:
            return f"Expired on {self.effective_expiry_iso} ({-self.days_left}d ago)"
        return f"Expires {self.effective_expiry_iso} ({self.days_left}d remaining)"


def _parse_opening_date(opening_date: Optional[DateLike]) -> Optional[date]:
    """Parse an opening date, treating blank or unparseable values as absent."""
    if opening_date is None:
        return None
    if isinstance(opening_date, str) and not opening_date.strip():
        return None
    try:
        return parse_calendar_date(opening_date, field_name="opening_date")
    except InvalidDateFormat as e:
        logger.warning("Ignoring unparseable opening date: %s", e.message)
        return None


def compute_effective_expiration(
    box_date: DateLike,
    opening_date: Optional[DateLike],
    rule: Union[ShelfLifeRule, str],
    today: Optional[date] = None,
) -> ExpirationStatus:
    """
    Compute the effective expiration status of a medicine.

    The post-opening rule can only shorten the box date, never extend it.
    When the rule needs an opening date and none is given, the box date is
    used and a MissingOpeningDateForRule warning is issued.

    Args:
        box_date: Expiry date printed on the packaging (YYYY-MM-DD)
        opening_date: Date the container was first opened, or None
        rule: Post-opening shelf life rule
        today: Current date (defaults to the local clock)

    Returns:
        ExpirationStatus for the given day

    Raises:
        InvalidDateFormat: If box_date cannot be parsed
        ValueError: If rule is not a known shelf life rule
    """
    rule = ShelfLifeRule(rule)
    today = to_midnight(today)
    box_expiry = parse_calendar_date(box_date, field_name="box_date")
    opened = _parse_opening_date(opening_date)

    effective_expiry = box_expiry

    if rule.requires_opening_date:
        if opened is None:
            warnings.warn(
                f"Rule {rule.value} needs an opening date; using box date {box_expiry.isoformat()}",
                MissingOpeningDateForRule,
                stacklevel=2,
            )
        else:
            calculated_expiry = rule.expiry_after_opening(opened)
            effective_expiry = min(box_expiry, calculated_expiry)

    days_left = (effective_expiry - today).days

    return ExpirationStatus(
        effective_expiry_date=effective_expiry,
        days_left=days_left,
        is_expired=days_left < 0,
    )


def classify_severity(status: ExpirationStatus, warning_days: Optional[int] = None) -> Severity:
    """
    Classify an expiration status for display.

    Args:
        status: Computed expiration status
        warning_days: Expiring-soon horizon (defaults to the configured horizon)

    Returns:
        EXPIRED if expired, WARNING within the horizon, OK otherwise
    """
    if warning_days is None:
        warning_days = get_global_config().warning_horizon_days

    if status.is_expired:
        return Severity.EXPIRED
    if 0 <= status.days_left <= warning_days:
        return Severity.WARNING
    return Severity.OK


def describe_status(status: Optional[ExpirationStatus]) -> str:
    """Human-readable status text for a medicine card."""
    if status is None:
        return "No Effective Date Set"
    if status.is_expired:
        return "Expired!"
    if status.days_left == 0:
        return "Expires Today!"
    return f"Expires in {status.days_left} days"
