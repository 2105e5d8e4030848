"""FastAPI Dependencies — process-wide NotesService provider.

Invariants:
    - get_notes_service() is cached: one store and one log per process
    - Tests replace it through app.dependency_overrides, never by mutating the instance
"""

from functools import lru_cache

from notes_app.services.notes_service import NotesService, build_notes_service


@lru_cache
def get_notes_service() -> NotesService:
    return build_notes_service()
