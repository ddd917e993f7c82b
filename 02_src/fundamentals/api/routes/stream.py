"""Replay stream route."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ...app import Application
from ...logging_config import get_logger

logger = get_logger(__name__)


async def close_viewer(websocket: WebSocket) -> None:
    """Close normally; a viewer that already hung up is not an error."""
    try:
        await websocket.close()
    except (RuntimeError, WebSocketDisconnect) as e:
        logger.debug("Viewer gone before close: %s", e)


def create_stream_router(app: Application) -> APIRouter:
    """Create the /ws replay router."""
    router = APIRouter(tags=["stream"])

    @router.websocket("/ws")
    async def stream(websocket: WebSocket) -> None:
        """Accept any viewer and replay the full corpus to it.

        Inbound frames are never read. After a complete replay the socket is
        closed normally; there is no end-of-stream message.
        """
        await websocket.accept()
        result = await app.engine.handle_connection(websocket, app.state)
        if result.completed:
            await close_viewer(websocket)

    return router
