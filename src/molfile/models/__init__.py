"""Pydantic models for parsed records and splitter configuration."""

from molfile.models.config import SplitterConfig
from molfile.models.record import (
    AtomRecord,
    BondRecord,
    CountLine,
    DataItem,
    MolHeader,
    MolRecord,
    Prescan,
    PropertyLine,
)

__all__ = [
    "AtomRecord",
    "BondRecord",
    "CountLine",
    "DataItem",
    "MolHeader",
    "MolRecord",
    "Prescan",
    "PropertyLine",
    "SplitterConfig",
]
