"""Data models for column mapping."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

STANDARD_UNITS: list[str] = ["ft", "m", "API", "ohm.m", "fraction", "g/cm3", "datetime", "sec"]


class MappingField(str, Enum):
    """User-editable fields of a mapping entry."""

    MAPPED = "mapped"
    MAPPED_UNIT = "mappedUnit"


class ColumnMappingEntry(BaseModel):
    """Mapping of one file header to a standard channel."""

    original: str
    mapped: str = ""  # Empty means unmapped
    original_unit: str = ""
    mapped_unit: str = ""

    @property
    def is_mapped(self) -> bool:
        return bool(self.mapped)


class MappingSummary(BaseModel):
    """Counts shown alongside the mapping table."""

    total: int
    mapped: int
    unmapped: int
    warning: Optional[str] = None


class InvalidMappingError(Exception):
    """Exception raised when a mapping update is rejected."""

    pass
