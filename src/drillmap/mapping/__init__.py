"""Column mapping from file headers to standard channels."""

from .models import (
    STANDARD_UNITS,
    ColumnMappingEntry,
    InvalidMappingError,
    MappingField,
    MappingSummary,
)
from .session import MappingSession, propose_mapping, unmapped_warning

__all__ = [
    "STANDARD_UNITS",
    "ColumnMappingEntry",
    "InvalidMappingError",
    "MappingField",
    "MappingSummary",
    "MappingSession",
    "propose_mapping",
    "unmapped_warning",
]
