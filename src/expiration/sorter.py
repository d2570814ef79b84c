"""
Ordering and partitioning of medicines by effective expiry.

Medicines are any objects exposing ``expiry_date``, ``opening_date`` and
``rule`` attributes (normally ``src.models.Medicine``).
"""

import logging
from datetime import date
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

from ..config import get_global_config
from .dates import InvalidDateFormat
from .status import ExpirationStatus, compute_effective_expiration

logger = logging.getLogger(__name__)


class CabinetPartition(NamedTuple):
    """Medicines split by expiry, each group ordered by effective expiry."""
    active: List[Any]
    expired: List[Any]


def medicine_status(medicine: Any, today: Optional[date] = None) -> ExpirationStatus:
    """Compute the expiration status of a medicine record."""
    return compute_effective_expiration(
        medicine.expiry_date,
        medicine.opening_date,
        medicine.rule,
        today=today,
    )


def _status_or_none(medicine: Any, today: date) -> Optional[ExpirationStatus]:
    try:
        return medicine_status(medicine, today)
    except InvalidDateFormat as e:
        logger.warning(
            "No effective expiry for %s: %s",
            getattr(medicine, "name", medicine), e.message
        )
        return None


def _with_statuses(
    medicines: Iterable[Any],
    today: Optional[date],
    far_future: date,
) -> List[Tuple[Any, Optional[ExpirationStatus]]]:
    if today is None:
        today = date.today()

    pairs = [(medicine, _status_or_none(medicine, today)) for medicine in medicines]

    # sorted() is stable, equal dates keep their original relative order
    return sorted(
        pairs,
        key=lambda pair: pair[1].effective_expiry_date if pair[1] else far_future
    )


def sort_by_effective_expiry(
    medicines: Iterable[Any],
    today: Optional[date] = None,
    far_future: Optional[date] = None,
) -> List[Any]:
    """
    Sort medicines ascending by effective expiry date.

    Medicines without an effective date (unparseable box date) sort as the
    far-future sentinel and therefore last.

    Args:
        medicines: Medicines to sort
        today: Current date (defaults to the local clock)
        far_future: Sort key for medicines without an effective date

    Returns:
        New list in effective expiry order
    """
    if far_future is None:
        far_future = get_global_config().far_future_date

    return [medicine for medicine, _ in _with_statuses(medicines, today, far_future)]


def classify_and_sort(
    medicines: Iterable[Any],
    today: Optional[date] = None,
    far_future: Optional[date] = None,
) -> CabinetPartition:
    """
    Sort medicines by effective expiry and split them into active and expired.

    A medicine whose box date cannot be parsed has no status and appears in
    neither group.

    Args:
        medicines: Medicines to classify
        today: Current date (defaults to the local clock)
        far_future: Sentinel sort key (defaults to the configured one)

    Returns:
        CabinetPartition of (active, expired), both in effective expiry order
    """
    if far_future is None:
        far_future = get_global_config().far_future_date

    active: List[Any] = []
    expired: List[Any] = []

    for medicine, status in _with_statuses(medicines, today, far_future):
        if status is None:
            logger.error(
                "Leaving %s out of the cabinet view: box date is not a valid date",
                getattr(medicine, "name", medicine)
            )
        elif status.is_expired:
            expired.append(medicine)
        else:
            active.append(medicine)

    return CabinetPartition(active=active, expired=expired)
