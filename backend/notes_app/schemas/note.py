"""Note Schemas — request bodies and JSON responses for notes and audit entries.

Invariants:
    - NoteCreate/NoteUpdate accept only strings (or null) for title/content
    - lastModified / timestamp serialized as ISO-8601 UTC with milliseconds and Z

Design Decisions:
    - title/content optional at schema level: the service owns the "required" rule,
      so API and direct callers get the same ValidationError messages
    - from_record classmethods keep the route handlers one-liners
    - Audit details are stored frozen (tuples, read-only mappings) and thawed here
"""

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from notes_app.core.domain_types import LogEntry, Note, format_timestamp


class NoteCreate(BaseModel):
    """Note creation body: {title, content}."""
    title: str | None = None
    content: str | None = None


class NoteUpdate(BaseModel):
    """Partial update body. Omitted or null fields are left unchanged."""
    title: str | None = None
    content: str | None = None


class NoteResponse(BaseModel):
    """Public note shape."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    last_modified: datetime = Field(alias="lastModified")

    @field_serializer("last_modified")
    def serialize_last_modified(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_record(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id, title=note.title, content=note.content,
            last_modified=note.last_modified,
        )


class LogEntryResponse(BaseModel):
    """Public audit entry shape."""
    id: str
    action: str
    timestamp: datetime
    details: dict[str, Any] = Field(default_factory=dict)

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_record(cls, entry: LogEntry) -> "LogEntryResponse":
        return cls(
            id=entry.id, action=entry.action.value,
            timestamp=entry.timestamp, details=_thaw(entry.details),
        )


def _thaw(value: Any) -> Any:
    """Frozen audit details back to plain JSON types (dict / list)."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value
