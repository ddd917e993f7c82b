"""Producer-side helpers."""

from .logger import Logger
from .plotter import Plotter
from .threed import ThreeDPlotter

__all__ = ["Logger", "Plotter", "ThreeDPlotter"]
