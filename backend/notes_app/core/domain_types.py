"""Domain Types — note records, audit entries and the closed set of log actions.

Invariants:
    - Note and LogEntry are frozen; mutation happens by building a new record
    - LogEntry.details is a read-only mapping, never holding full note content
    - All valid log actions encoded as LogAction, no raw string matching
    - Timestamps are timezone-aware UTC, truncated to milliseconds

Design Decisions:
    - NoteId/LogEntryId as NewType over str: ids are opaque, zero runtime cost
    - str Enum for LogAction: serializes to JSON without custom encoders
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NewType


# ─── Identity Types ──────────────────────────────────────────────

NoteId = NewType("NoteId", str)
LogEntryId = NewType("LogEntryId", str)


# ─── Enums ───────────────────────────────────────────────────────

class LogAction(str, Enum):
    """Every action the audit trail accepts."""
    NOTE_CREATED = "NOTE_CREATED"
    NOTE_UPDATED = "NOTE_UPDATED"
    NOTE_DELETED = "NOTE_DELETED"
    NOTES_LIST_VIEWED = "NOTES_LIST_VIEWED"
    NOTE_DETAILS_VIEWED = "NOTE_DETAILS_VIEWED"
    APP_STARTED = "APP_STARTED"
    DB_RESET = "DB_RESET"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Note:
    """A stored note. Title and content are always trimmed and non-empty."""
    id: NoteId
    title: str
    content: str
    last_modified: datetime


@dataclass(frozen=True)
class LogEntry:
    """One audit trail entry, written only after a successful operation."""
    id: LogEntryId
    action: LogAction
    timestamp: datetime
    details: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


# ─── Timestamps ──────────────────────────────────────────────────

def truncate_to_millis(moment: datetime) -> datetime:
    """Normalize to UTC with millisecond precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(microsecond=(moment.microsecond // 1000) * 1000)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix, e.g. 2024-05-01T10:00:00.123Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
