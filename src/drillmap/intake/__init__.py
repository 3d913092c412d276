"""Drilling data file intake."""

from .models import (
    UNSUPPORTED_FILE_MESSAGE,
    DrillingData,
    IntakeBusyError,
    IntakeState,
    IntakeStatus,
    UnsupportedFileTypeError,
    UploadedFile,
)
from .sample import sample_dataset
from .intake import FileIntake, file_extension, validate_extension

__all__ = [
    "UNSUPPORTED_FILE_MESSAGE",
    "DrillingData",
    "IntakeBusyError",
    "IntakeState",
    "IntakeStatus",
    "UnsupportedFileTypeError",
    "UploadedFile",
    "sample_dataset",
    "FileIntake",
    "file_extension",
    "validate_extension",
]
