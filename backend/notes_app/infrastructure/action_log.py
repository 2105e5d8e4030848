"""Action Log — append-only, best-effort audit trail of successful operations.

Invariants:
    - add() NEVER raises: unknown actions and internal failures are discarded
    - Entries are immutable once written and kept in insertion order
    - get_all() / get_by_action() return new lists (caller mutation never leaks in)
    - Note content is never stored: a "content" key in details is dropped
    - Nested details are frozen too: lists become tuples, dicts read-only views

Design Decisions:
    - add() returns LogEntry | None: the discard is visible in the type, and the
      service deliberately ignores the result
    - Discards reported on the operator logger at WARNING, not raised
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from notes_app.core.domain_types import LogAction, LogEntry, LogEntryId
from notes_app.core.repository_protocols import Clock, IdGenerator
from notes_app.infrastructure.system_clock import SystemClock, UUIDGenerator

logger = logging.getLogger(__name__)

_REDACTED_DETAIL_KEYS = frozenset({"content"})


class ActionLog:
    """In-memory ActionLogSink. Exclusively owned by one NotesService."""

    def __init__(
        self,
        clock: Clock | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._ids = id_generator or UUIDGenerator()
        self._entries: list[LogEntry] = []

    def add(
        self, action: LogAction | str, details: Mapping[str, Any] | None = None,
    ) -> LogEntry | None:
        """Append an entry. Returns None when the entry was discarded."""
        try:
            resolved = _resolve_action(action)
            if resolved is None:
                logger.warning(
                    f"Discarding log entry with invalid action: {action!r}",
                )
                return None
            entry = LogEntry(
                id=LogEntryId(self._ids.new_id()),
                action=resolved,
                timestamp=self._clock.now(),
                details=_freeze_details(details),
            )
            self._entries.append(entry)
            return entry
        except Exception as e:
            logger.warning(f"Failed to add log entry: {e}", exc_info=True)
            return None

    def get_all(self) -> list[LogEntry]:
        return list(self._entries)

    def get_by_action(self, action: LogAction | str) -> list[LogEntry]:
        resolved = _resolve_action(action)
        if resolved is None:
            return []
        return [e for e in self._entries if e.action is resolved]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _resolve_action(action: LogAction | str | None) -> LogAction | None:
    if isinstance(action, LogAction):
        return action
    try:
        return LogAction(action)
    except ValueError:
        return None


def _freeze_details(details: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not details:
        return MappingProxyType({})
    return MappingProxyType({
        key: _freeze_value(value) for key, value in details.items()
        if key not in _REDACTED_DETAIL_KEYS
    })


def _freeze_value(value: Any) -> Any:
    """Nested mappings become read-only views, sequences and sets become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze_value(v) for k, v in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze_value(v) for v in value)
    return value
