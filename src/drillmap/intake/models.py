"""Data models for drilling data file intake."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

UNSUPPORTED_FILE_MESSAGE = "Please upload a valid LAS, XLSX, or CSV file"


class IntakeState(str, Enum):
    """Where the intake is in its lifecycle."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETE = "complete"


class DrillingData(BaseModel):
    """A processed drilling data file."""

    filename: str
    headers: list[str]
    data: list[dict[str, Any]] = Field(default_factory=list)
    units: list[str] = Field(default_factory=list)  # Aligned by position with headers

    def unit_for(self, index: int) -> str:
        if index < len(self.units):
            return self.units[index] or ""
        return ""


class UploadedFile(BaseModel):
    """The file currently held by the intake."""

    name: str
    size_bytes: int = 0

    @property
    def size_mb(self) -> str:
        return f"{self.size_bytes / 1024 / 1024:.2f}"


class IntakeStatus(BaseModel):
    """Snapshot of the intake for display."""

    state: IntakeState
    file: Optional[UploadedFile] = None
    has_dataset: bool = False


class UnsupportedFileTypeError(Exception):
    """Exception raised when a file's extension is not accepted."""

    def __init__(self, filename: str, message: str = UNSUPPORTED_FILE_MESSAGE):
        self.filename = filename
        super().__init__(message)


class IntakeBusyError(Exception):
    """Exception raised when a file is selected while another is processing."""

    pass
