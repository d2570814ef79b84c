"""Medicine data model with post-opening shelf life rule."""

import uuid
from datetime import date as Date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..expiration.dates import parse_calendar_date
from ..expiration.rules import ShelfLifeRule
from ..expiration.status import (
    ExpirationStatus,
    Severity,
    classify_severity,
    compute_effective_expiration,
)


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return uuid.uuid4().hex


class Medicine(BaseModel):
    """
    One entry in the medicine cabinet.

    Dates are kept as YYYY-MM-DD strings. The box date is validated on
    construction; an unparseable opening date is ignored when the status
    is computed.

    Business Rules:
    - The box date is the absolute upper bound of the effective expiry
    - A post-opening rule only applies once an opening date is recorded

    Attributes:
        id: Unique identifier assigned at creation
        name: Medicine name
        dosage: Dosage / quantity description
        expiry_date: Expiry date printed on the box
        opening_date: Date the container was first opened (None if unopened)
        rule: Post-opening shelf life rule
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, description="Unique medicine identifier")
    name: str = Field(..., description="Medicine name")
    dosage: str = Field(default="", description="Dosage or quantity description")
    expiry_date: str = Field(..., description="Box expiry date (YYYY-MM-DD)")
    opening_date: Optional[str] = Field(
        default=None,
        description="Date first opened (YYYY-MM-DD)"
    )
    rule: ShelfLifeRule = Field(
        default=ShelfLifeRule.BOX_DATE,
        description="Post-opening shelf life rule"
    )

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Strip the name and reject blank values."""
        v = v.strip()
        if not v:
            raise ValueError("Medicine name cannot be blank")
        return v

    @field_validator('dosage')
    @classmethod
    def strip_dosage(cls, v: str) -> str:
        return v.strip()

    @field_validator('expiry_date', 'opening_date', mode='before')
    @classmethod
    def dates_as_iso_strings(cls, v):
        """Accept date values and store blank opening dates as None."""
        if isinstance(v, datetime):
            return v.date().isoformat()
        if isinstance(v, Date):
            return v.isoformat()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('expiry_date')
    @classmethod
    def expiry_date_valid(cls, v: str) -> str:
        """Reject box dates that are not YYYY-MM-DD calendar dates."""
        return parse_calendar_date(v, field_name="expiry_date").isoformat()

    @property
    def is_opened(self) -> bool:
        """Whether an opening date has been recorded."""
        return self.opening_date is not None

    def expiration_status(self, today: Optional[Date] = None) -> ExpirationStatus:
        """
        Compute the effective expiration status.

        Args:
            today: Current date (defaults to the local clock)
        """
        return compute_effective_expiration(
            self.expiry_date, self.opening_date, self.rule, today=today
        )

    def severity(self, today: Optional[Date] = None, warning_days: Optional[int] = None) -> Severity:
        """Display severity of this medicine on the given day."""
        return classify_severity(self.expiration_status(today), warning_days)

    def __str__(self) -> str:
        return f"{self.name} ({self.dosage})" if self.dosage else self.name
