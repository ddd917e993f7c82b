"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_RECORDING_PATH = DATA_DIR / "recording.json"
DEFAULT_LOG_PATH = LOGS_DIR / "bridge.log"
DEFAULT_STATIC_DIR = PROJECT_ROOT / "fundamentals-web" / "dist"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3031
DEFAULT_SEND_DELAY = 0.05  # seconds between VizUpdate messages
DEFAULT_SEND_TIMEOUT = 10.0  # seconds per send
DEFAULT_EXIT_GRACE = 0.2  # seconds before serve-once shutdown

DATA_DIR.mkdir(parents=True, exist_ok=True)
LOGS_DIR.mkdir(parents=True, exist_ok=True)


PathLike = Union[str, Path]


def resolve_path(value: PathLike | None, default: Path) -> Path:
    """Resolve a configured path; relative paths are taken from PROJECT_ROOT."""
    if not value:
        return default

    candidate = Path(value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float, scale: float = 1.0) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value) * scale
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class BridgeConfig:
    """Runtime settings for the bridge server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    input_path: Path = DEFAULT_RECORDING_PATH
    exit_after_serve: bool = False
    open_browser: bool = False
    static_dir: Path = DEFAULT_STATIC_DIR
    send_delay: float = DEFAULT_SEND_DELAY
    send_timeout: float | None = DEFAULT_SEND_TIMEOUT
    exit_grace: float = DEFAULT_EXIT_GRACE

    @classmethod
    def from_env(cls) -> "BridgeConfig":
        """Build config from FUNDAMENTALS_* environment variables."""
        port = os.getenv("FUNDAMENTALS_PORT")
        send_timeout = _env_float("FUNDAMENTALS_SEND_TIMEOUT_S", DEFAULT_SEND_TIMEOUT)
        return cls(
            host=os.getenv("FUNDAMENTALS_HOST", DEFAULT_HOST),
            port=int(port) if port else DEFAULT_PORT,
            input_path=resolve_path(
                os.getenv("FUNDAMENTALS_INPUT"), DEFAULT_RECORDING_PATH
            ),
            exit_after_serve=_env_bool("FUNDAMENTALS_EXIT_AFTER_SERVE"),
            open_browser=_env_bool("FUNDAMENTALS_OPEN_BROWSER"),
            static_dir=resolve_path(
                os.getenv("FUNDAMENTALS_STATIC_DIR"), DEFAULT_STATIC_DIR
            ),
            send_delay=_env_float(
                "FUNDAMENTALS_SEND_DELAY_MS", DEFAULT_SEND_DELAY, scale=0.001
            ),
            # 0 disables the per-send timeout
            send_timeout=send_timeout if send_timeout > 0 else None,
            exit_grace=_env_float(
                "FUNDAMENTALS_EXIT_GRACE_MS", DEFAULT_EXIT_GRACE, scale=0.001
            ),
        )
