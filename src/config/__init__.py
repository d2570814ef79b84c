"""Configuration for the medicine cabinet."""

from .cabinet_config import (
    CabinetConfig,
    FAR_FUTURE_DATE,
    WARNING_HORIZON_DAYS,
    get_global_config,
)

__all__ = [
    "CabinetConfig",
    "FAR_FUTURE_DATE",
    "WARNING_HORIZON_DAYS",
    "get_global_config",
]
