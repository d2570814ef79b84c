"""Cabinet policy configuration - thresholds shared by the dashboard views."""

from datetime import date as Date
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

# Medicines expiring within this many days are flagged as expiring soon
WARNING_HORIZON_DAYS = 90

# Sort key for medicines that have no effective expiry date
FAR_FUTURE_DATE = Date(9999, 12, 31)


class CabinetConfig(BaseModel):
    """
    Adjustable policy constants for the medicine cabinet.

    Attributes:
        warning_horizon_days: Days before the effective expiry at which a
            medicine is flagged as expiring soon (default: 90)
        far_future_date: Sort key used for medicines without an effective
            expiry date, so they sort last
        default_low_stock_threshold: Pills remaining at or below which a
            reminder reports low stock (default: 7)
        default_restock_amount: Suggested number of pills per restock (default: 30)
    """
    model_config = ConfigDict(frozen=True)

    warning_horizon_days: int = Field(
        default=WARNING_HORIZON_DAYS,
        description="Expiring-soon horizon in days",
        ge=0
    )
    far_future_date: Date = Field(
        default=FAR_FUTURE_DATE,
        description="Sentinel sort date for medicines with no effective expiry"
    )
    default_low_stock_threshold: int = Field(
        default=7,
        description="Default low stock threshold for new reminders",
        gt=0
    )
    default_restock_amount: int = Field(
        default=30,
        description="Default number of pills added by a restock",
        gt=0
    )


@lru_cache()
def get_global_config() -> CabinetConfig:
    """Return the shared default configuration."""
    return CabinetConfig()
