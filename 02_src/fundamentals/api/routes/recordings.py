"""Read-only recording listing routes."""

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import Application


class RecordingSummary(BaseModel):
    """Response model for one loaded recording."""

    index: int
    name: str
    session_id: str
    viz_count: int


class HealthResponse(BaseModel):
    """Response model for health."""

    status: str
    recordings: int
    active_connections: int


def create_recordings_router(app: Application) -> APIRouter:
    """Create recordings router."""
    router = APIRouter(prefix="/api", tags=["recordings"])

    @router.get("/health", response_model=HealthResponse)
    async def health() -> dict:
        """Liveness plus corpus size."""
        return {
            "status": "ok",
            "recordings": app.state.count,
            "active_connections": app.engine.active_connections,
        }

    @router.get("/recordings", response_model=list[RecordingSummary])
    async def list_recordings() -> list[dict]:
        """List loaded recordings in store order."""
        recordings = await app.state.snapshot()
        return [
            {
                "index": i,
                "name": r.name,
                "session_id": r.session_id,
                "viz_count": len(r.vizs),
            }
            for i, r in enumerate(recordings)
        ]

    return router
