"""
Expiration engine for household medicines.

This module computes effective expiration dates from the printed box date
and post-opening shelf life rules, classifies urgency, and orders a cabinet
by effective expiry.
"""

from .dates import InvalidDateFormat, parse_calendar_date, add_months
from .rules import ShelfLifeRule
from .status import (
    ExpirationStatus,
    MissingOpeningDateForRule,
    Severity,
    compute_effective_expiration,
    classify_severity,
    describe_status,
)
from .sorter import (
    CabinetPartition,
    medicine_status,
    sort_by_effective_expiry,
    classify_and_sort,
)

__all__ = [
    'InvalidDateFormat',
    'parse_calendar_date',
    'add_months',
    'ShelfLifeRule',
    'ExpirationStatus',
    'MissingOpeningDateForRule',
    'Severity',
    'compute_effective_expiration',
    'classify_severity',
    'describe_status',
    'CabinetPartition',
    'medicine_status',
    'sort_by_effective_expiry',
    'classify_and_sort',
]
