"""Wizard coordinator tying intake, channel bank and mapping together."""

import logging
from typing import Optional

from ..channels import ChannelBank, ChannelBankItem
from ..intake import DrillingData, FileIntake, UploadedFile
from ..mapping import ColumnMappingEntry, MappingSession
from .steps import DEFAULT_STEPS, Step, StepView, step_states

logger = logging.getLogger(__name__)

UPLOAD_STEP = 1
MAPPING_STEP = 2
REVIEW_STEP = 3


class WizardStateError(Exception):
    """Exception raised when an action is not valid for the current step."""

    pass


class WizardSession:
    """
    Holds the state shared between the wizard views.

    Data flows one way: intake -> dataset -> mapping (consulting the channel
    bank) -> confirmed mapping.
    """

    def __init__(
        self,
        bank: Optional[ChannelBank] = None,
        processing_delay: Optional[float] = None,
        steps: Optional[list[Step]] = None,
    ):
        self.bank = bank if bank is not None else ChannelBank()
        self.bank.subscribe(self._on_bank_update)
        self.intake = FileIntake(
            on_processed=self._on_file_processed,
            processing_delay=processing_delay,
        )
        self.steps = steps or list(DEFAULT_STEPS)
        self.current_step = UPLOAD_STEP
        self.dataset: Optional[DrillingData] = None
        self.mapping: Optional[MappingSession] = None
        self.confirmed_mapping: Optional[list[ColumnMappingEntry]] = None

    def _on_bank_update(self, channels: list[ChannelBankItem]):
        logger.info(f"Channel bank updated: {len(channels)} channels")

    def _on_file_processed(self, data: DrillingData):
        self.dataset = data
        self.mapping = MappingSession(data, self.bank)
        self.confirmed_mapping = None
        self.current_step = MAPPING_STEP
        logger.info(f"Dataset {data.filename} ready for mapping")

    def upload(self, filename: str, size_bytes: int = 0) -> UploadedFile:
        """Start intake of a new file; any previous dataset and mapping are dropped."""
        uploaded = self.intake.select(filename, size_bytes)
        self.dataset = None
        self.mapping = None
        self.confirmed_mapping = None
        self.current_step = UPLOAD_STEP
        return uploaded

    def require_mapping(self) -> MappingSession:
        if self.mapping is None:
            raise WizardStateError("No dataset has been processed yet")
        return self.mapping

    def complete_mapping(self) -> list[ColumnMappingEntry]:
        """Confirm the current mapping and advance to review."""
        mapping = self.require_mapping()
        self.confirmed_mapping = mapping.complete()
        self.current_step = REVIEW_STEP
        return self.confirmed_mapping

    def step_views(self) -> list[StepView]:
        return step_states(self.steps, self.current_step)

    def reset(self):
        """Discard the file, dataset and mapping and go back to the first step."""
        self.intake.remove()
        self.dataset = None
        self.mapping = None
        self.confirmed_mapping = None
        self.current_step = UPLOAD_STEP
        logger.info("Wizard reset")

    def close(self):
        self.intake.close()
