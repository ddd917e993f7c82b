"""FastAPI application setup."""

import webbrowser
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..logging_config import get_logger
from .routes import create_recordings_router, create_stream_router
from .static import SPAStaticFiles

logger = get_logger(__name__)


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure the bridge FastAPI application."""
    application = application or get_app()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        await application.start()
        # Only once the recording has loaded
        if application.config.open_browser:
            webbrowser.open(f"http://localhost:{application.config.port}")
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Fundamentals Bridge",
        description="Replays recorded visualizations to web viewers",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Vite dev server for the viewer
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:5174"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes first; the static mount at "/" catches everything else
    fastapi_app.include_router(create_stream_router(application))
    fastapi_app.include_router(create_recordings_router(application))

    static_dir = application.config.static_dir
    if static_dir.is_dir():
        fastapi_app.mount("/", SPAStaticFiles(directory=str(static_dir)), name="viewer")
    else:
        logger.warning("Viewer assets not found at %s; static serving disabled", static_dir)

    return fastapi_app
