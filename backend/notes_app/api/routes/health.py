"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - No store access: health never writes to the action log
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from notes_app.core.domain_types import format_timestamp

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "ok",
        "timestamp": format_timestamp(datetime.now(timezone.utc)),
    }
