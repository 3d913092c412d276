"""API routes for DrillMap."""

from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel

from ..channels import ChannelBankItem, ChannelNotFoundError, InvalidChannelError
from ..intake import IntakeBusyError, UnsupportedFileTypeError
from ..mapping import STANDARD_UNITS, ColumnMappingEntry, InvalidMappingError
from ..wizard import WizardStateError

router = APIRouter()


def get_session():
    """Get the global wizard session."""
    from .app import get_session as _get_session

    return _get_session()


class ChannelRequest(BaseModel):
    """Request to create or replace a channel bank entry."""

    standardName: str
    aliases: str = ""  # Comma-separated


class MappingUpdateRequest(BaseModel):
    """Request to change one column of the mapping."""

    field: str  # "mapped" or "mappedUnit"
    value: str = ""


def _channel_dict(channel: ChannelBankItem) -> dict:
    return {
        "id": channel.id,
        "standardName": channel.standard_name,
        "aliases": channel.aliases,
    }


def _entry_dict(entry: ColumnMappingEntry) -> dict:
    return {
        "original": entry.original,
        "mapped": entry.mapped,
        "originalUnit": entry.original_unit,
        "mappedUnit": entry.mapped_unit,
    }


def _require_mapping():
    session = get_session()
    try:
        return session.require_mapping()
    except WizardStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


# Health check


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret configuration."""
    from ..config import settings

    return {
        "status": "ok",
        "service": "drillmap",
        "config": {
            "allowed_extensions": settings.allowed_extensions,
            "processing_delay_seconds": settings.processing_delay_seconds,
            "max_upload_mb": settings.max_upload_mb,
        },
    }


# Channel bank endpoints


@router.get("/channels")
async def list_channels(search: Optional[str] = None):
    """List channel bank entries, optionally filtered by name or alias."""
    session = get_session()
    channels = session.bank.search(search or "")
    return {
        "count": len(channels),
        "total": len(session.bank),
        "channels": [_channel_dict(c) for c in channels],
    }


@router.post("/channels")
async def create_channel(request: ChannelRequest):
    """Add a channel to the bank."""
    session = get_session()
    try:
        channel = session.bank.add(request.standardName, request.aliases)
    except InvalidChannelError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "channel": _channel_dict(channel),
        "channels": [_channel_dict(c) for c in session.bank.items()],
    }


@router.put("/channels/{channel_id}")
async def update_channel(channel_id: str, request: ChannelRequest):
    """Replace a channel's name and aliases."""
    session = get_session()
    try:
        channel = session.bank.edit(channel_id, request.standardName, request.aliases)
    except ChannelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidChannelError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "channel": _channel_dict(channel),
        "channels": [_channel_dict(c) for c in session.bank.items()],
    }


@router.delete("/channels/{channel_id}")
async def delete_channel(channel_id: str):
    """Delete a channel from the bank."""
    session = get_session()
    try:
        session.bank.delete(channel_id)
    except ChannelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {
        "status": "ok",
        "channels": [_channel_dict(c) for c in session.bank.items()],
    }


@router.post("/channels/reset")
async def reset_channels():
    """Restore the default channel bank."""
    session = get_session()
    session.bank.reset()
    return {
        "status": "ok",
        "channels": [_channel_dict(c) for c in session.bank.items()],
    }


# File intake endpoints


def _status_dict(session) -> dict:
    status = session.intake.status()
    return {
        "state": status.state.value,
        "file": (
            {
                "name": status.file.name,
                "size_bytes": status.file.size_bytes,
                "size_mb": status.file.size_mb,
            }
            if status.file
            else None
        ),
        "has_dataset": status.has_dataset,
        "current_step": session.current_step,
    }


@router.post("/upload")
async def upload_file(file: UploadFile = File(...)):
    """
    Accept a LAS, XLSX or CSV file.

    Only the name and size are used; the content is never read. Processing
    completes in the background after the configured delay.
    """
    session = get_session()
    try:
        session.upload(file.filename or "", file.size or 0)
    except UnsupportedFileTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except IntakeBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _status_dict(session)


@router.delete("/upload")
async def remove_file():
    """Remove the current file and return to the first step."""
    session = get_session()
    session.reset()
    return _status_dict(session)


@router.get("/upload/status")
async def upload_status():
    """Current intake state."""
    return _status_dict(get_session())


@router.get("/dataset")
async def get_dataset():
    """The processed dataset."""
    session = get_session()
    if session.dataset is None:
        raise HTTPException(status_code=404, detail="No dataset has been processed yet")
    return session.dataset.model_dump()


# Column mapping endpoints


def _mapping_dict(mapping, search: str = "") -> dict:
    summary = mapping.summary()
    return {
        "filename": mapping.data.filename,
        "mappings": [_entry_dict(e) for e in mapping.entries],
        "summary": summary.model_dump(),
        "channel_options": mapping.channel_options(search),
        "unit_options": STANDARD_UNITS,
        "channels": [_channel_dict(c) for c in mapping.bank.items()],
    }


@router.get("/mapping")
async def get_mapping(search: Optional[str] = None):
    """Current mapping with summary and dropdown options."""
    mapping = _require_mapping()
    return _mapping_dict(mapping, search or "")


@router.patch("/mapping/{index}")
async def update_mapping(index: int, request: MappingUpdateRequest):
    """Override the mapped channel or unit of one column."""
    mapping = _require_mapping()
    try:
        entry = mapping.update(index, request.field, request.value)
    except InvalidMappingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "mapping": _entry_dict(entry),
        "summary": mapping.summary().model_dump(),
    }


@router.post("/mapping/complete")
async def complete_mapping():
    """Confirm the mapping. Unmapped columns produce a warning, never an error."""
    session = get_session()
    _require_mapping()
    entries = session.complete_mapping()
    summary = session.mapping.summary()
    return {
        "mappings": [_entry_dict(e) for e in entries],
        "warning": summary.warning,
        "current_step": session.current_step,
    }


# Wizard endpoints


@router.get("/steps")
async def get_steps():
    """Step indicator for the current step."""
    session = get_session()
    return {
        "current_step": session.current_step,
        "steps": [view.model_dump(mode="json") for view in session.step_views()],
    }


@router.post("/wizard/reset")
async def reset_wizard():
    """Start the wizard over. The channel bank is kept."""
    session = get_session()
    session.reset()
    return {"status": "ok", "current_step": session.current_step}
