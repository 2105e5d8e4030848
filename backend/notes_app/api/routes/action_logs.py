"""Action Log Routes — read-only view of the in-memory audit trail.

Invariants:
    - Never mutates the log; entries returned in insertion order
    - Unknown ?action= values rejected by FastAPI enum validation (400)
"""

from fastapi import APIRouter, Depends, Query

from notes_app.api.dependencies import get_notes_service
from notes_app.core.domain_types import LogAction
from notes_app.schemas.note import LogEntryResponse
from notes_app.services.notes_service import NotesService

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", response_model=list[LogEntryResponse])
async def list_action_logs(
    action: LogAction | None = Query(None),
    service: NotesService = Depends(get_notes_service),
):
    """List audit entries, optionally filtered by action."""
    return [
        LogEntryResponse.from_record(e) for e in service.get_action_log(action)
    ]
