"""Tests for the column mapping session."""

import logging

import pytest

from drillmap.channels import ChannelBankItem
from drillmap.intake import DrillingData
from drillmap.mapping import (
    STANDARD_UNITS,
    ColumnMappingEntry,
    InvalidMappingError,
    MappingSession,
    propose_mapping,
)


class TestProposeMapping:
    """Test initial mapping proposals."""

    def test_matched_columns_carry_unit(self):
        bank = [ChannelBankItem(id="1", standard_name="DEPTH", aliases=["depth"])]
        entries = propose_mapping(["DEPTH", "GAMMA_RAY"], ["ft", "API"], bank)

        assert entries == [
            ColumnMappingEntry(original="DEPTH", mapped="DEPTH", original_unit="ft", mapped_unit="ft"),
            ColumnMappingEntry(original="GAMMA_RAY", mapped="", original_unit="API", mapped_unit=""),
        ]

    def test_missing_units_are_empty(self):
        bank = [ChannelBankItem(id="1", standard_name="WOB", aliases=["wob"])]
        entries = propose_mapping(["WOB", "RPM"], [""], bank)
        assert entries[0].original_unit == ""
        assert entries[0].mapped_unit == ""
        assert entries[1].original_unit == ""

    def test_one_entry_per_header_position(self):
        entries = propose_mapping(["a", "a", "b"], [], [])
        assert [e.original for e in entries] == ["a", "a", "b"]


class TestMappingSession:
    """Test mapping overrides, summary and completion."""

    def test_initial_mapping_from_default_bank(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        mapped = {e.original: e.mapped for e in session.entries}
        assert mapped == {
            "DEPTH": "DEPTH",
            "GAMMA_RAY": "",
            "RESISTIVITY": "",
            "POROSITY": "",
            "TIMESTAMP": "",
        }

    def test_summary_with_unmapped_columns(self, drilling_data, bank):
        summary = MappingSession(drilling_data, bank).summary()
        assert summary.total == 5
        assert summary.mapped == 1
        assert summary.unmapped == 4
        assert summary.warning.startswith("4 columns are not mapped to standard channels.")

    def test_summary_without_warning_when_all_mapped(self, bank):
        data = DrillingData(filename="a.csv", headers=["wob", "rpm"], units=["klbf", "rpm"])
        summary = MappingSession(data, bank).summary()
        assert summary.unmapped == 0
        assert summary.warning is None

    def test_update_mapped_channel(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        entry = session.update(1, "mapped", "WOB")
        assert entry.mapped == "WOB"
        assert session.entries[1].mapped == "WOB"
        assert session.summary().mapped == 2

    def test_clear_mapped_channel(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        session.update(0, "mapped", "")
        assert session.summary().mapped == 0

    def test_update_mapped_unit(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        entry = session.update(0, "mappedUnit", "m")
        assert entry.mapped_unit == "m"
        assert entry.original_unit == "ft"

    @pytest.mark.parametrize(
        "index, field, value",
        [
            (99, "mapped", "WOB"),
            (-1, "mapped", "WOB"),
            (0, "original", "X"),
            (0, "mapped", "NOT_A_CHANNEL"),
            (0, "mappedUnit", "furlongs"),
        ],
    )
    def test_invalid_updates(self, drilling_data, bank, index, field, value):
        session = MappingSession(drilling_data, bank)
        with pytest.raises(InvalidMappingError):
            session.update(index, field, value)

    def test_update_uses_current_bank(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        bank.add("GR", "gamma_ray")
        session.update(1, "mapped", "GR")
        assert session.entries[1].mapped == "GR"

    def test_channel_options(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        assert session.channel_options() == ["WOB", "RPM", "DEPTH", "HOOKLOAD", "TORQUE"]
        assert session.channel_options("o") == ["WOB", "HOOKLOAD", "TORQUE"]

    def test_complete_is_not_blocked_by_unmapped(self, drilling_data, bank, caplog):
        session = MappingSession(drilling_data, bank)
        with caplog.at_level(logging.WARNING):
            result = session.complete()
        assert len(result) == 5
        assert [e.original for e in result] == drilling_data.headers
        assert "not mapped" in caplog.text

    def test_complete_returns_copy(self, drilling_data, bank):
        session = MappingSession(drilling_data, bank)
        result = session.complete()
        result.clear()
        assert len(session.entries) == 5

    def test_standard_units(self):
        assert STANDARD_UNITS == ["ft", "m", "API", "ohm.m", "fraction", "g/cm3", "datetime", "sec"]
