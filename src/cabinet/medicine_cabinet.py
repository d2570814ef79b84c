"""
In-memory medicine cabinet.

Keeps the household's medicines ordered by effective expiry (earliest first)
and exposes the active / expired views used by the dashboard.
"""

import logging
from datetime import date as Date
from typing import Dict, Iterable, Iterator, List, Optional

import pandas as pd

from ..config import CabinetConfig, get_global_config
from ..expiration import (
    CabinetPartition,
    ExpirationStatus,
    Severity,
    ShelfLifeRule,
    classify_and_sort,
    classify_severity,
    describe_status,
    sort_by_effective_expiry,
)
from ..models import Medicine

logger = logging.getLogger(__name__)


class MedicineCabinet:
    """Collection of medicines sorted by effective expiration date.

    Medicines are never edited in place: they are added or disposed of
    whole. Every addition re-sorts the full collection; equal effective
    dates keep their insertion order.
    """

    def __init__(
        self,
        medicines: Optional[Iterable[Medicine]] = None,
        today: Optional[Date] = None,
        config: Optional[CabinetConfig] = None,
    ):
        """Initialize the cabinet.

        Args:
            medicines: Initial medicines, kept in the given order
            today: Fixed current date (defaults to the local clock on every call)
            config: Policy configuration (defaults to the global config)
        """
        self._today = today
        self.config = config or get_global_config()
        self._medicines: List[Medicine] = []

        for medicine in medicines or []:
            if medicine.id in self:
                raise ValueError(f"Duplicate medicine id: {medicine.id}")
            self._medicines.append(medicine)

    @classmethod
    def from_medicines(
        cls,
        medicines: Iterable[Medicine],
        today: Optional[Date] = None,
        config: Optional[CabinetConfig] = None,
    ) -> "MedicineCabinet":
        """Build a cabinet by adding each medicine in turn (sorted result)."""
        cabinet = cls(today=today, config=config)
        for medicine in medicines:
            cabinet.add(medicine)
        return cabinet

    @property
    def today(self) -> Date:
        """Current date used for status calculations."""
        return self._today or Date.today()

    def __len__(self) -> int:
        return len(self._medicines)

    def __iter__(self) -> Iterator[Medicine]:
        return iter(list(self._medicines))

    def __contains__(self, medicine_id: object) -> bool:
        return any(m.id == medicine_id for m in self._medicines)

    @property
    def medicines(self) -> List[Medicine]:
        """All medicines in cabinet order."""
        return list(self._medicines)

    def get(self, medicine_id: str) -> Medicine:
        """Look up a medicine by id.

        Raises:
            KeyError: If no medicine has this id
        """
        for medicine in self._medicines:
            if medicine.id == medicine_id:
                return medicine
        raise KeyError(f"Medicine not found: {medicine_id}")

    def add(self, medicine: Medicine) -> Medicine:
        """Add a medicine and re-sort the cabinet by effective expiry.

        Raises:
            ValueError: If a medicine with the same id is already present
        """
        if medicine.id in self:
            raise ValueError(f"Duplicate medicine id: {medicine.id}")

        self._medicines = sort_by_effective_expiry(
            self._medicines + [medicine],
            today=self.today,
            far_future=self.config.far_future_date,
        )
        logger.debug("Added %s (%s), cabinet now holds %d", medicine.name, medicine.id, len(self))
        return medicine

    def dispose(self, medicine_id: str) -> Medicine:
        """Remove a medicine from the cabinet.

        Returns:
            The removed medicine

        Raises:
            KeyError: If no medicine has this id
        """
        medicine = self.get(medicine_id)
        self._medicines = [m for m in self._medicines if m.id != medicine_id]
        logger.debug("Disposed %s (%s)", medicine.name, medicine_id)
        return medicine

    def status_of(self, medicine: Medicine) -> ExpirationStatus:
        """Expiration status of a medicine on the cabinet's current date."""
        return medicine.expiration_status(self.today)

    def severity_of(self, medicine: Medicine) -> Severity:
        return classify_severity(self.status_of(medicine), self.config.warning_horizon_days)

    def partition(self) -> CabinetPartition:
        """Split into (active, expired), each ordered by effective expiry."""
        return classify_and_sort(
            self._medicines,
            today=self.today,
            far_future=self.config.far_future_date,
        )

    @property
    def active_medicines(self) -> List[Medicine]:
        return self.partition().active

    @property
    def expired_medicines(self) -> List[Medicine]:
        return self.partition().expired

    def expiring_soon(self) -> List[Medicine]:
        """Active medicines within the expiring-soon horizon."""
        return [
            medicine for medicine in self.active_medicines
            if self.severity_of(medicine) == Severity.WARNING
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view of the cabinet, one row per medicine in cabinet order."""
        data = []
        for medicine in self._medicines:
            status = self.status_of(medicine)
            data.append({
                'ID': medicine.id,
                'Name': medicine.name,
                'Dosage': medicine.dosage,
                'Rule': medicine.rule.label,
                'Opened': medicine.opening_date or '',
                'Box Date': medicine.expiry_date,
                'Effective Expiry': status.effective_expiry_iso,
                'Days Left': status.days_left,
                'Status': describe_status(status),
                'Severity': str(classify_severity(status, self.config.warning_horizon_days)),
            })

        return pd.DataFrame(data, columns=[
            'ID', 'Name', 'Dosage', 'Rule', 'Opened', 'Box Date',
            'Effective Expiry', 'Days Left', 'Status', 'Severity',
        ])

    def summary(self) -> Dict[str, int]:
        """Counts for the cabinet header."""
        partition = self.partition()
        return {
            'total': len(self),
            'active': len(partition.active),
            'expired': len(partition.expired),
            'expiring_soon': len(self.expiring_soon()),
        }


def sample_cabinet(today: Optional[Date] = None) -> MedicineCabinet:
    """Cabinet pre-filled with the demo medicines shown on first launch."""
    return MedicineCabinet(
        [
            Medicine(
                id='mock-1',
                name='Ibuprofen (Pills)',
                dosage='200mg (45 pills)',
                expiry_date='2026-10-25',
                opening_date=None,
                rule=ShelfLifeRule.BOX_DATE,
            ),
            Medicine(
                id='mock-2',
                name='Amoxicillin (Liquid)',
                dosage='500mg (5 tablets)',
                expiry_date='2025-06-01',
                opening_date='2025-01-15',
                rule=ShelfLifeRule.TWO_WEEKS,
            ),
            Medicine(
                id='mock-3',
                name='Eye Drops',
                dosage='10ml',
                expiry_date='2026-03-01',
                opening_date='2025-09-01',
                rule=ShelfLifeRule.THREE_MONTHS,
            ),
        ],
        today=today,
    )
