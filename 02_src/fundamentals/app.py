"""Application bootstrap and lifecycle management."""

import asyncio
from typing import Callable, Protocol

from .config import BridgeConfig
from .logging_config import get_logger
from .replay import ReplayEngine
from .state import BridgeState
from .storage import IRecordingStore, RecordingStore

logger = get_logger(__name__)

ExitHandler = Callable[[], None]


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Load the configured recording and create the replay engine."""
        ...

    async def stop(self) -> None:
        """Cancel background tasks."""
        ...


class Application:
    """Bridge bootstrap.

    Startup loads the configured recording into the shared state; any
    OSError or DecodeError there propagates and the server must not serve.
    With `exit_after_serve`, the first completed replay triggers the exit
    handler after `exit_grace` seconds.
    """

    def __init__(
        self,
        config: BridgeConfig | None = None,
        store: IRecordingStore | None = None,
        exit_handler: ExitHandler | None = None,
    ):
        self._config = config or BridgeConfig.from_env()
        self._store = store or RecordingStore()
        self._exit_handler = exit_handler

        # Components (will be initialized in start())
        self._state: BridgeState | None = None
        self._engine: ReplayEngine | None = None
        self._exit_task: asyncio.Task | None = None
        self._exit_requested = False

    def set_exit_handler(self, handler: ExitHandler) -> None:
        """Set what serve-once mode calls to shut the server down."""
        self._exit_handler = handler

    async def start(self) -> None:
        """Load the configured recording and create the replay engine."""
        logger.info("Starting bridge")

        # 1. State (no dependencies)
        self._state = BridgeState()

        # 2. Initial corpus (fatal on failure)
        path = self._config.input_path
        try:
            recording = self._store.load(path)
        except (OSError, ValueError) as e:
            logger.error("Failed to load recording from %s: %s", path, e)
            raise
        await self._state.add(recording)
        logger.info("Loaded recording from %s", path)

        # 3. Replay engine
        self._engine = ReplayEngine(
            send_delay=self._config.send_delay,
            send_timeout=self._config.send_timeout,
        )

        # 4. Serve-once watcher
        if self._config.exit_after_serve:
            logger.info(
                "Exit after serve flag is set - application will exit after "
                "serving the first request"
            )
            self._exit_task = asyncio.create_task(self._exit_after_serve())

    async def stop(self) -> None:
        """Cancel background tasks."""
        if self._exit_task and not self._exit_task.done():
            self._exit_task.cancel()
            try:
                await self._exit_task
            except asyncio.CancelledError:
                pass
        logger.info("Bridge stopped")

    async def _exit_after_serve(self) -> None:
        await self.engine.wait_first_completion()
        logger.info("Exit after serve flag is set, shutting down...")
        # Let buffered frames flush before the transport goes away
        await asyncio.sleep(self._config.exit_grace)
        self._exit_requested = True
        if self._exit_handler is None:
            logger.warning("No exit handler configured; server keeps running")
            return
        self._exit_handler()

    @property
    def config(self) -> BridgeConfig:
        """Get bridge configuration."""
        return self._config

    @property
    def exit_requested(self) -> bool:
        """True once serve-once mode has asked the server to exit."""
        return self._exit_requested

    @property
    def started(self) -> bool:
        return self._engine is not None

    @property
    def state(self) -> BridgeState:
        """Get shared state instance."""
        if not self._state:
            raise RuntimeError("Application not started")
        return self._state

    @property
    def engine(self) -> ReplayEngine:
        """Get replay engine instance."""
        if not self._engine:
            raise RuntimeError("Application not started")
        return self._engine
