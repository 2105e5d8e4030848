"""Notes Routes — CRUD endpoints, thin pass-through to NotesService.

Invariants:
    - Status codes: list 200, create 201, read/update 200, delete 204 (empty body)
    - Service errors propagate to the global NotesError handler untouched
    - Reading a single note records NOTE_DETAILS_VIEWED; listing records NOTES_LIST_VIEWED
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from notes_app.api.dependencies import get_notes_service
from notes_app.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from notes_app.services.notes_service import NotesService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteResponse])
async def list_notes(service: NotesService = Depends(get_notes_service)):
    """List every note."""
    return [NoteResponse.from_record(n) for n in service.get_all_notes()]


@router.post(
    "", response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: NoteCreate, service: NotesService = Depends(get_notes_service),
):
    """Create a note from {title, content}."""
    note = service.create_note(body.model_dump())
    return NoteResponse.from_record(note)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str, service: NotesService = Depends(get_notes_service),
):
    note = service.get_note_by_id(note_id, record_view=True)
    return NoteResponse.from_record(note)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    body: NoteUpdate,
    service: NotesService = Depends(get_notes_service),
):
    """Partial update. Omitted fields keep their current value."""
    note = service.update_note(note_id, body.model_dump())
    return NoteResponse.from_record(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str, service: NotesService = Depends(get_notes_service),
):
    service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
