"""Pytest configuration and fixtures."""

import asyncio
import sys
import time
from pathlib import Path
from unittest.mock import Mock

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fundamentals.config import BridgeConfig  # noqa: E402
from fundamentals.models import PlotScalar, PointCloud, Recording, ThreeDView, Viz  # noqa: E402


class FakeTransport:
    """In-memory transport that records what was sent and when."""

    def __init__(self, fail_on: int | None = None, stall_on: int | None = None):
        self.sent: list[str] = []
        self.times: list[float] = []
        self._fail_on = fail_on
        self._stall_on = stall_on

    async def send_text(self, data: str) -> None:
        index = len(self.sent)
        if self._fail_on is not None and index == self._fail_on:
            raise ConnectionResetError("simulated transport failure")
        if self._stall_on is not None and index == self._stall_on:
            await asyncio.sleep(3600)
        self.times.append(time.monotonic())
        self.sent.append(data)


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport


@pytest.fixture
def two_viz_recording():
    """Recording with Viz A (one scalar series) followed by empty Viz B."""
    return Recording(
        name="scenario",
        session_id="session-1",
        vizs=[
            Viz(name="A", widgets=[PlotScalar(data_x=[(0.0, 0.0), (1.0, 1.0)])]),
            Viz(name="B", widgets=[]),
        ],
    )


@pytest.fixture
def full_recording():
    """Recording exercising every widget kind and optional field."""
    return Recording(
        name="full",
        session_id="5f0c6a4e-1d2b-4c3a-9e8f-7a6b5c4d3e2f",
        vizs=[
            Viz(
                name="loss",
                source="train.py:42",
                widgets=[PlotScalar(data_x=[(2.0, 0.5), (0.0, -1.25), (1.0, 3.0)])],
                range=(-1.0, 1.0),
            ),
            Viz(
                name="cloud",
                widgets=[
                    ThreeDView(
                        primitives=[
                            (0.0, PointCloud(points=[(0.0, 0.0, 0.0), (1.0, 2.0, 3.0)])),
                            (0.0, PointCloud(points=[])),
                            (0.1, PointCloud(points=[(-1.5, 0.25, 9.0)])),
                        ]
                    ),
                    PlotScalar(data_x=[]),
                ],
            ),
            Viz(name="empty"),
        ],
    )


@pytest.fixture
def recording_file(tmp_path, two_viz_recording):
    """Two-viz recording saved to a temporary file."""
    from fundamentals.storage import RecordingStore

    path = tmp_path / "recording.json"
    RecordingStore().save(two_viz_recording, path)
    return path


@pytest.fixture
def bridge_config(tmp_path, recording_file):
    """Fast-paced config pointing at the temporary recording."""
    return BridgeConfig(
        input_path=recording_file,
        static_dir=tmp_path / "no-viewer-build",
        send_delay=0.01,
        send_timeout=1.0,
        exit_grace=0.01,
    )


@pytest_asyncio.fixture
async def state(two_viz_recording):
    """BridgeState holding the two-viz recording."""
    from fundamentals.state import BridgeState

    st = BridgeState()
    await st.add(two_viz_recording)
    return st


@pytest.fixture
def exit_handler():
    """Mock serve-once exit handler."""
    return Mock()
