"""Notes Service — CRUD orchestration over the record store, validation and action log.

Invariants:
    - Every stored note has trimmed, non-empty title and content
    - last_modified never moves backwards across updates, even if the clock does
    - An action log entry is written iff the operation completed without error
    - ValidationError / NotFoundError propagate unchanged; anything else becomes InternalError
    - Each operation holds the instance lock from first read to last write

Design Decisions:
    - Store, log, clock and id generator injected: one isolated instance per test,
      no global singletons and no reset calls between tests
    - Action log result deliberately ignored: logging degrades observability, never CRUD
    - RLock over asyncio primitives: operations never await, and sync callers
      (worker threads, scripts) get the same serialized access
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Iterator, Mapping

from notes_app.core.domain_types import LogAction, LogEntry, Note, NoteId
from notes_app.core.errors import InternalError, NotesError, NotFoundError
from notes_app.core.repository_protocols import (
    ActionLogSink, Clock, IdGenerator, NoteRepository,
)
from notes_app.core.validation import (
    NOTE_FIELDS, validate_note_data, validate_note_id, validate_note_updates,
)
from notes_app.infrastructure.action_log import ActionLog
from notes_app.infrastructure.note_store import InMemoryNoteStore
from notes_app.infrastructure.system_clock import SystemClock, UUIDGenerator

logger = logging.getLogger(__name__)


class NotesService:
    """Owns one record store and one action log."""

    def __init__(
        self,
        store: NoteRepository,
        action_log: ActionLogSink,
        clock: Clock,
        id_generator: IdGenerator,
    ) -> None:
        self._store = store
        self._log = action_log
        self._clock = clock
        self._ids = id_generator
        self._lock = threading.RLock()

    # ─── Queries ─────────────────────────────────────────────────

    def get_all_notes(self) -> list[Note]:
        with self._operation("list notes"):
            notes = self._store.values()
            self._record(LogAction.NOTES_LIST_VIEWED)
            return notes

    def get_note_by_id(self, note_id: str, *, record_view: bool = False) -> Note:
        """Fetch one note. record_view logs NOTE_DETAILS_VIEWED (optional audit)."""
        with self._operation("get note"):
            validate_note_id(note_id)
            note = self._require(NoteId(note_id))
            if record_view:
                self._record(LogAction.NOTE_DETAILS_VIEWED, {"noteId": note.id})
            return note

    def get_action_log(self, action: LogAction | str | None = None) -> list[LogEntry]:
        with self._lock:
            if action is None:
                return self._log.get_all()
            return self._log.get_by_action(action)

    # ─── Mutations ───────────────────────────────────────────────

    def create_note(self, data: Mapping[str, Any] | None) -> Note:
        with self._operation("create note"):
            validate_note_data(data)
            note = Note(
                id=NoteId(self._ids.new_id()),
                title=data["title"].strip(),
                content=data["content"].strip(),
                last_modified=self._clock.now(),
            )
            self._store.set(note.id, note)
            self._record(
                LogAction.NOTE_CREATED, {"noteId": note.id, "title": note.title},
            )
            logger.info("Note created", extra={"note_id": note.id})
            return note

    def update_note(self, note_id: str, updates: Mapping[str, Any] | None) -> Note:
        """Partial update: only provided (non-None) fields change."""
        with self._operation("update note"):
            validate_note_id(note_id)
            existing = self._require(NoteId(note_id))
            validate_note_updates(updates)

            changes = {
                name: updates[name].strip()
                for name in NOTE_FIELDS
                if updates and updates.get(name) is not None
            }
            updated = replace(
                existing,
                **changes,
                last_modified=max(self._clock.now(), existing.last_modified),
            )
            self._store.set(updated.id, updated)
            self._record(
                LogAction.NOTE_UPDATED,
                {"noteId": updated.id, "updatedFields": list(changes)},
            )
            logger.info("Note updated", extra={"note_id": updated.id})
            return updated

    def delete_note(self, note_id: str) -> bool:
        with self._operation("delete note"):
            validate_note_id(note_id)
            key = NoteId(note_id)
            self._require(key)
            self._store.delete(key)
            self._record(LogAction.NOTE_DELETED, {"noteId": key})
            logger.info("Note deleted", extra={"note_id": key})
            return True

    def reset(self, *, record_action: bool = False) -> int:
        """Clear every note. Returns how many were removed."""
        with self._operation("reset notes"):
            cleared = self._store.count
            self._store.clear()
            if record_action:
                self._record(LogAction.DB_RESET, {"clearedNotes": cleared})
            return cleared

    def record_app_started(self, details: Mapping[str, Any] | None = None) -> None:
        with self._lock:
            self._record(LogAction.APP_STARTED, details)

    # ─── Helpers ─────────────────────────────────────────────────

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        """Serialize the operation and map unexpected failures to InternalError."""
        with self._lock:
            try:
                yield
            except NotesError:
                raise
            except Exception as e:
                logger.error(f"Failed to {name}: {e}", exc_info=True)
                raise InternalError(f"Failed to {name}", original=e) from e

    def _require(self, note_id: NoteId) -> Note:
        note = self._store.get(note_id)
        if note is None:
            raise NotFoundError(note_id)
        return note

    def _record(
        self, action: LogAction, details: Mapping[str, Any] | None = None,
    ) -> None:
        self._log.add(action, details)


def build_notes_service(
    clock: Clock | None = None, id_generator: IdGenerator | None = None,
) -> NotesService:
    """Wire a service with fresh in-memory store and log."""
    clock = clock or SystemClock()
    id_generator = id_generator or UUIDGenerator()
    return NotesService(
        store=InMemoryNoteStore(),
        action_log=ActionLog(clock=clock, id_generator=id_generator),
        clock=clock,
        id_generator=id_generator,
    )
