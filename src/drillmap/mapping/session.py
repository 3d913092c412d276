"""Column mapping session: proposed defaults plus user overrides."""

import logging
from typing import Sequence

from ..channels import ChannelBank, ChannelBankItem, match_header
from ..intake.models import DrillingData
from .models import (
    STANDARD_UNITS,
    ColumnMappingEntry,
    InvalidMappingError,
    MappingField,
    MappingSummary,
)

logger = logging.getLogger(__name__)


def propose_mapping(
    headers: Sequence[str],
    units: Sequence[str],
    bank: Sequence[ChannelBankItem],
) -> list[ColumnMappingEntry]:
    """Build the initial mapping list, one entry per header position."""
    entries = []
    for index, header in enumerate(headers):
        unit = units[index] if index < len(units) and units[index] else ""
        mapped = match_header(header, bank)
        entries.append(
            ColumnMappingEntry(
                original=header,
                mapped=mapped,
                original_unit=unit,
                mapped_unit=unit if mapped else "",
            )
        )
    return entries


def unmapped_warning(count: int) -> str:
    return (
        f"{count} columns are not mapped to standard channels. "
        "These will be excluded from the final export unless mapped."
    )


class MappingSession:
    """
    Mapping state for one processed dataset.

    Entries start from alias matching against the channel bank and can be
    overridden freely. Completion is never blocked by unmapped columns.
    """

    def __init__(self, data: DrillingData, bank: ChannelBank):
        self.data = data
        self.bank = bank
        self._entries = propose_mapping(data.headers, data.units, bank.items())
        summary = self.summary()
        logger.info(
            f"Mapping session for {data.filename}: {summary.mapped}/{summary.total} "
            f"columns matched by alias"
        )

    @property
    def entries(self) -> list[ColumnMappingEntry]:
        return list(self._entries)

    def channel_options(self, search: str = "") -> list[str]:
        """Standard channel names offered in the dropdown, optionally filtered."""
        names = self.bank.standard_names()
        if not search:
            return names
        needle = search.lower()
        return [name for name in names if needle in name.lower()]

    def update(self, index: int, field: str, value: str) -> ColumnMappingEntry:
        """
        Change the mapped channel or mapped unit of one column.

        Args:
            index: Header position
            field: "mapped" or "mappedUnit"
            value: New value, or "" to clear

        Raises:
            InvalidMappingError: If the index, field or value is not allowed
        """
        if index < 0 or index >= len(self._entries):
            raise InvalidMappingError(f"Column index {index} out of range")

        try:
            mapping_field = MappingField(field)
        except ValueError:
            raise InvalidMappingError(f"Unknown mapping field '{field}'")

        entry = self._entries[index]
        if mapping_field == MappingField.MAPPED:
            if value and value not in self.bank.standard_names():
                raise InvalidMappingError(f"'{value}' is not a standard channel")
            updated = entry.model_copy(update={"mapped": value})
        else:
            if value and value not in STANDARD_UNITS:
                raise InvalidMappingError(f"'{value}' is not a standard unit")
            updated = entry.model_copy(update={"mapped_unit": value})

        self._entries[index] = updated
        logger.debug(f"Column {entry.original}: {mapping_field.value} = {value!r}")
        return updated

    def summary(self) -> MappingSummary:
        mapped = sum(1 for entry in self._entries if entry.is_mapped)
        unmapped = len(self._entries) - mapped
        return MappingSummary(
            total=len(self._entries),
            mapped=mapped,
            unmapped=unmapped,
            warning=unmapped_warning(unmapped) if unmapped else None,
        )

    def complete(self) -> list[ColumnMappingEntry]:
        """Return the full ordered mapping list."""
        summary = self.summary()
        if summary.warning:
            logger.warning(f"Completing mapping for {self.data.filename}: {summary.warning}")
        else:
            logger.info(f"Completing mapping for {self.data.filename}: all columns mapped")
        return self.entries
