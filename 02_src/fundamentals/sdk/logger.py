"""Producer-side recording logger."""

from pathlib import Path

from ..config import DEFAULT_PORT, DEFAULT_RECORDING_PATH, BridgeConfig, PathLike
from ..logging_config import get_logger
from ..models import Recording, Viz
from ..storage import IRecordingStore, RecordingStore

logger = get_logger(__name__)


class Logger:
    """Collects Vizs into a Recording and persists it.

    Use as a context manager to save on every exit path:

        with Logger("experiment") as rec:
            Plotter("loss").log(rec.recording)

    A failing save on scope exit is logged and not re-raised, so it never
    replaces the exception that ended the scope. Call save() directly to get
    errors raised.
    """

    def __init__(
        self,
        name: str,
        path: PathLike = DEFAULT_RECORDING_PATH,
        store: IRecordingStore | None = None,
    ):
        self.name = name
        self.path = Path(path)
        self.recording = Recording.new(name)
        self._store = store or RecordingStore()
        logger.info("Creating logger for %s", name)

    @property
    def session_id(self) -> str:
        return self.recording.session_id

    def add_viz(self, viz: Viz) -> None:
        """Append a Viz to the recording."""
        self.recording.add_viz(viz)

    def save(self, path: PathLike | None = None) -> Path:
        """Write the recording; raises on failure."""
        target = Path(path) if path is not None else self.path
        logger.info("Saving recording to %s", target)
        self._store.save(self.recording, target)
        return target

    def launch_bridge(
        self,
        port: int = DEFAULT_PORT,
        exit_after_serve: bool = False,
        open_browser: bool = False,
    ) -> int:
        """Save the recording and serve it until the bridge exits."""
        from ..server import run

        path = self.save()
        config = BridgeConfig.from_env()
        config.input_path = path
        config.port = port
        config.exit_after_serve = exit_after_serve
        config.open_browser = open_browser
        return run(config)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.save()
        except (OSError, ValueError):
            logger.exception("Auto-save of recording %r failed", self.name)
