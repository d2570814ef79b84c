"""Family member profiles."""

from .registry import FamilyRegistry, sample_family

__all__ = [
    "FamilyRegistry",
    "sample_family",
]
