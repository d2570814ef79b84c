"""In-memory medicine cabinet inventory."""

from .medicine_cabinet import MedicineCabinet, sample_cabinet

__all__ = [
    "MedicineCabinet",
    "sample_cabinet",
]
