"""File-backed recording storage."""

from pathlib import Path
from typing import Protocol

from ..config import PathLike
from ..logging_config import get_logger
from ..models import Recording, recording_from_json, recording_to_json

logger = get_logger(__name__)


class IRecordingStore(Protocol):
    """Load and save whole recordings."""

    def load(self, path: PathLike) -> Recording:
        """Read and decode a recording. Raises OSError or DecodeError."""
        ...

    def save(self, recording: Recording, path: PathLike) -> None:
        """Encode and fully overwrite `path`. Raises OSError or EncodeError."""
        ...


class RecordingStore:
    """JSON file storage for recordings.

    Reads are whole-file; writes truncate and rewrite in place, so a
    concurrent reader of the same path may see a partial file.
    """

    def load(self, path: PathLike) -> Recording:
        """Read and decode a recording."""
        path = Path(path)
        # Bytes, so invalid UTF-8 surfaces as a DecodeError
        recording = recording_from_json(path.read_bytes())
        logger.info(
            "Loaded recording %r (%d vizs) from %s",
            recording.name,
            len(recording.vizs),
            path,
        )
        return recording

    def save(self, recording: Recording, path: PathLike) -> None:
        """Encode and write a recording, replacing any existing file."""
        path = Path(path)
        # Encode first so a bad value never truncates the target
        text = recording_to_json(recording)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Saved recording %r to %s", recording.name, path)
