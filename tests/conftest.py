"""Pytest configuration and shared fixtures."""

import pytest

from drillmap.channels import ChannelBank
from drillmap.config import Settings
from drillmap.intake import DrillingData, sample_dataset
from drillmap.wizard import WizardSession


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with test values."""
    return Settings(
        host="127.0.0.1",
        port=8000,
        debug=False,
        cors_allow_origins=["*"],
        processing_delay_seconds=0.0,
        allowed_extensions=[".las", ".xlsx", ".csv"],
    )


@pytest.fixture
def bank() -> ChannelBank:
    """A channel bank seeded with the default dictionary."""
    return ChannelBank()


@pytest.fixture
def drilling_data() -> DrillingData:
    """The sample dataset for an uploaded CSV."""
    return sample_dataset("well_42.csv")


@pytest.fixture
def wizard_session(bank) -> WizardSession:
    """A wizard session that processes files without delay."""
    session = WizardSession(bank=bank, processing_delay=0.0)
    yield session
    session.close()
