"""File intake state machine: validate, simulate processing, emit dataset."""

import asyncio
import logging
from typing import Callable, Iterable, Optional

from ..config import settings
from .models import (
    DrillingData,
    IntakeBusyError,
    IntakeState,
    IntakeStatus,
    UnsupportedFileTypeError,
    UploadedFile,
)
from .sample import sample_dataset

logger = logging.getLogger(__name__)

ProcessedCallback = Callable[[DrillingData], None]


def file_extension(filename: str) -> str:
    """Lower-cased extension including the dot, or "" when there is none."""
    dot = filename.rfind(".")
    if dot == -1:
        return ""
    return filename[dot:].lower()


def validate_extension(filename: str, allowed: Optional[Iterable[str]] = None) -> str:
    """
    Check a file name against the accepted extensions.

    Returns:
        The normalized extension

    Raises:
        UnsupportedFileTypeError: If the extension is not accepted
    """
    allowed = list(allowed) if allowed is not None else settings.allowed_extensions
    extension = file_extension(filename)
    if extension not in allowed:
        raise UnsupportedFileTypeError(filename)
    return extension


class FileIntake:
    """
    Accepts one drilling data file at a time.

    idle -> processing -> complete, and back to idle on removal. Processing
    is an asyncio task sleeping for the configured delay; removing the file
    or closing the intake cancels it so no completion fires afterwards.
    """

    def __init__(
        self,
        on_processed: Optional[ProcessedCallback] = None,
        processing_delay: Optional[float] = None,
        allowed_extensions: Optional[Iterable[str]] = None,
    ):
        self.on_processed = on_processed
        self.processing_delay = (
            processing_delay if processing_delay is not None else settings.processing_delay_seconds
        )
        self.allowed_extensions = (
            list(allowed_extensions)
            if allowed_extensions is not None
            else list(settings.allowed_extensions)
        )
        self.state = IntakeState.IDLE
        self.file: Optional[UploadedFile] = None
        self.dataset: Optional[DrillingData] = None
        self._task: Optional[asyncio.Task] = None

    def status(self) -> IntakeStatus:
        return IntakeStatus(
            state=self.state,
            file=self.file,
            has_dataset=self.dataset is not None,
        )

    def select(self, filename: str, size_bytes: int = 0) -> UploadedFile:
        """
        Accept a file and start processing it.

        Must be called from a running event loop.

        Raises:
            UnsupportedFileTypeError: If the extension is not accepted (state unchanged)
            IntakeBusyError: If a file is already being processed
        """
        try:
            validate_extension(filename, self.allowed_extensions)
        except UnsupportedFileTypeError:
            logger.warning(f"Rejected upload with unsupported extension: {filename}")
            raise

        if self.state == IntakeState.PROCESSING:
            raise IntakeBusyError(f"Still processing {self.file.name}")

        self.file = UploadedFile(name=filename, size_bytes=size_bytes)
        self.dataset = None
        self.state = IntakeState.PROCESSING
        self._task = asyncio.get_running_loop().create_task(self._process(self.file))
        logger.info(f"Processing {filename} ({self.file.size_mb} MB)")
        return self.file

    async def _process(self, file: UploadedFile):
        await asyncio.sleep(self.processing_delay)

        dataset = sample_dataset(file.name)
        self.dataset = dataset
        self.state = IntakeState.COMPLETE
        self._task = None
        logger.info(f"Finished processing {file.name}: {len(dataset.headers)} columns")

        if self.on_processed is not None:
            self.on_processed(dataset)

    def _cancel_pending(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.info("Cancelled pending file processing")
        self._task = None

    def remove(self):
        """Forget the current file and return to idle."""
        self._cancel_pending()
        if self.file is not None:
            logger.info(f"Removed {self.file.name}")
        self.file = None
        self.dataset = None
        self.state = IntakeState.IDLE

    async def wait(self):
        """Wait for pending processing to finish (or be cancelled)."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    def close(self):
        """Tear down the intake, cancelling any pending processing."""
        self._cancel_pending()
