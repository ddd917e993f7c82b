"""Bridge server runner."""

import asyncio

import uvicorn

from .api import create_fastapi_app
from .app import Application
from .config import BridgeConfig
from .logging_config import get_logger

logger = get_logger(__name__)


async def serve(config: BridgeConfig) -> int:
    """Serve until shutdown. Returns a process exit status."""
    application = Application(config)
    fastapi_app = create_fastapi_app(application)

    server = uvicorn.Server(
        uvicorn.Config(
            fastapi_app,
            host=config.host,
            port=config.port,
            log_level="info",
            log_config=None,  # keep our dictConfig
        )
    )

    def force_exit() -> None:
        # Do not wait for open viewer connections to drain
        server.should_exit = True
        server.force_exit = True

    application.set_exit_handler(force_exit)

    logger.info("Server starting at http://%s:%d", config.host, config.port)
    await server.serve()

    if not application.started:
        logger.error("Bridge failed to start; see errors above")
        return 1
    return 0


def run(config: BridgeConfig) -> int:
    """Blocking wrapper around serve()."""
    return asyncio.run(serve(config))
