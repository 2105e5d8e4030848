"""System Clock & Id Generator — production implementations of Clock and IdGenerator."""

from datetime import datetime, timezone
from uuid import uuid4

from notes_app.core.domain_types import truncate_to_millis


class SystemClock:
    """Wall clock in UTC, millisecond precision."""

    def now(self) -> datetime:
        return truncate_to_millis(datetime.now(timezone.utc))


class UUIDGenerator:
    """Random uuid4 hex ids, unique without coordination."""

    def new_id(self) -> str:
        return uuid4().hex
