"""In-Memory Note Store — dict-backed NoteRepository.

Invariants:
    - Key is the note id; value is the immutable Note record
    - values() follows insertion order of keys still present
    - No error conditions: absent ids yield None / False

Design Decisions:
    - Plain dict over OrderedDict: insertion order is guaranteed by the language
"""

from notes_app.core.domain_types import Note, NoteId


class InMemoryNoteStore:
    """Volatile record store. Exclusively owned by one NotesService."""

    def __init__(self) -> None:
        self._notes: dict[NoteId, Note] = {}

    def get(self, note_id: NoteId) -> Note | None:
        return self._notes.get(note_id)

    def has(self, note_id: NoteId) -> bool:
        return note_id in self._notes

    def set(self, note_id: NoteId, note: Note) -> None:
        self._notes[note_id] = note

    def delete(self, note_id: NoteId) -> bool:
        return self._notes.pop(note_id, None) is not None

    def values(self) -> list[Note]:
        return list(self._notes.values())

    def clear(self) -> None:
        self._notes.clear()

    @property
    def count(self) -> int:
        return len(self._notes)
