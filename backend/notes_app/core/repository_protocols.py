"""Boundary Protocols — contracts between the notes service and its collaborators.

Invariants:
    - The service depends only on these Protocols, never on concrete classes
    - Implementations provided by infrastructure/ via constructor injection
    - ActionLogSink.add never raises; its return value is advisory

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Clock and IdGenerator injected so timestamps and ids are deterministic in tests
"""

from datetime import datetime
from typing import Any, Mapping, Protocol

from notes_app.core.domain_types import LogAction, LogEntry, Note, NoteId


class NoteRepository(Protocol):
    """Contract for the record store, keyed by note id, no ordering guarantees."""
    def get(self, note_id: NoteId) -> Note | None: ...
    def has(self, note_id: NoteId) -> bool: ...
    def set(self, note_id: NoteId, note: Note) -> None: ...
    def delete(self, note_id: NoteId) -> bool: ...
    def values(self) -> list[Note]: ...
    def clear(self) -> None: ...

    @property
    def count(self) -> int: ...


class ActionLogSink(Protocol):
    """Best-effort audit sink. Returns the stored entry, or None when discarded."""
    def add(
        self, action: LogAction | str, details: Mapping[str, Any] | None = None,
    ) -> LogEntry | None: ...
    def get_all(self) -> list[LogEntry]: ...
    def get_by_action(self, action: LogAction | str) -> list[LogEntry]: ...
    def clear(self) -> None: ...


class Clock(Protocol):
    """Source of the current time as a timezone-aware UTC datetime."""
    def now(self) -> datetime: ...


class IdGenerator(Protocol):
    """Produces a fresh opaque id string on every call."""
    def new_id(self) -> str: ...
