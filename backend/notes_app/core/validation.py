"""Note Validation — pure checks for note input at the service boundary.

Invariants:
    - Blank (whitespace-only) title or content is always rejected
    - Non-string title/content is rejected, never coerced
    - A payload that is not a mapping is a ValidationError, never an AttributeError
    - Functions raise ValidationError with details["field"] set, never return False
"""

from typing import Any, Mapping

from notes_app.core.errors import ValidationError

NOTE_FIELDS = ("title", "content")


def validate_note_data(data: Mapping[str, Any] | None) -> None:
    """Check a full note payload (create). Both fields are required."""
    if not isinstance(data, Mapping):
        raise ValidationError("Note data is required")
    for name in NOTE_FIELDS:
        _check_text_field(name, data.get(name))


def validate_note_updates(updates: Mapping[str, Any] | None) -> None:
    """Check a partial payload (update). Absent or None fields are skipped."""
    if updates is None:
        return
    if not isinstance(updates, Mapping):
        raise ValidationError("Note updates must be an object")
    for name in NOTE_FIELDS:
        value = updates.get(name)
        if value is not None:
            _check_text_field(name, value)


def validate_note_id(note_id: Any) -> None:
    if not isinstance(note_id, str):
        raise ValidationError("Note ID is required and must be a string", field="id")
    if not note_id.strip():
        raise ValidationError("Note ID cannot be empty", field="id")


def _check_text_field(name: str, value: Any) -> None:
    label = name.capitalize()
    if not value or not isinstance(value, str):
        raise ValidationError(f"{label} is required and must be a string", field=name)
    if not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=name)
