"""Fundamentals: record visualizations and replay them to web viewers."""

from .app import Application, IApplication
from .config import BridgeConfig
from .errors import DecodeError, EncodeError, TransportError
from .models import (
    PlotScalar,
    PointCloud,
    Recording,
    ThreeDPrimitive,
    ThreeDView,
    Viz,
    Widget,
)
from .replay import ITransport, ReplayEngine, ReplayResult
from .sdk import Logger, Plotter, ThreeDPlotter
from .state import BridgeState, IBridgeState
from .storage import IRecordingStore, RecordingStore

__all__ = [
    # Application
    "Application",
    "IApplication",
    "BridgeConfig",
    # Errors
    "DecodeError",
    "EncodeError",
    "TransportError",
    # Models
    "Recording",
    "Viz",
    "Widget",
    "PlotScalar",
    "ThreeDView",
    "ThreeDPrimitive",
    "PointCloud",
    # Components
    "IRecordingStore",
    "RecordingStore",
    "IBridgeState",
    "BridgeState",
    "ITransport",
    "ReplayEngine",
    "ReplayResult",
    # Producer SDK
    "Logger",
    "Plotter",
    "ThreeDPlotter",
]
