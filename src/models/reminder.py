"""Medicine reminder data model with stock tracking."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import get_global_config
from .medicine import new_id


class StockStatus(str, Enum):
    """Stock level of a reminder's medicine supply."""
    IN_STOCK = "In Stock"
    LOW = "Low"
    EMPTY = "Empty"

    @classmethod
    def from_count(cls, count: int, threshold: int) -> "StockStatus":
        """
        Derive stock status from pills remaining.

        Args:
            count: Pills remaining (may be negative after an oversized dose)
            threshold: Low stock threshold

        Returns:
            EMPTY at or below zero, LOW at or below threshold, else IN_STOCK
        """
        if count <= 0:
            return cls.EMPTY
        if count <= threshold:
            return cls.LOW
        return cls.IN_STOCK

    @property
    def needs_refill(self) -> bool:
        return self != StockStatus.IN_STOCK

    def __str__(self) -> str:
        return self.value


class MedicineReminder(BaseModel):
    """
    A scheduled dose for a family member with its remaining supply.

    Attributes:
        id: Unique reminder identifier
        medicine_name: Name of the medicine
        pills_remaining: Pills left in the current supply
        dosage: Pills taken per dose
        low_stock_threshold: Pills remaining at or below which stock is low
        schedule: Time of day, e.g. "8:00 AM"
        member: Family member taking the medicine
        stock_status: Stock level (derived from the count when omitted)
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, description="Unique reminder identifier")
    medicine_name: str = Field(..., description="Medicine name", min_length=1)
    pills_remaining: int = Field(..., description="Pills left", ge=0)
    dosage: int = Field(default=1, description="Pills per dose", gt=0)
    low_stock_threshold: int = Field(
        default_factory=lambda: get_global_config().default_low_stock_threshold,
        description="Low stock threshold",
        gt=0
    )
    schedule: str = Field(..., description="Dose time, e.g. '8:00 AM'")
    member: str = Field(..., description="Family member name")
    stock_status: Optional[StockStatus] = Field(
        default=None,
        description="Stock level"
    )

    @model_validator(mode='after')
    def derive_stock_status(self) -> 'MedicineReminder':
        """Fill in the stock status from the pill count when not given."""
        if self.stock_status is None:
            status = StockStatus.from_count(self.pills_remaining, self.low_stock_threshold)
            object.__setattr__(self, 'stock_status', status)
        return self

    def __str__(self) -> str:
        return f"{self.member}: {self.medicine_name} at {self.schedule} ({self.pills_remaining} left, {self.stock_status})"
