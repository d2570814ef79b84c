"""Parsers for input data files."""

from .cabinet_parser import CabinetParser

__all__ = [
    "CabinetParser",
]
