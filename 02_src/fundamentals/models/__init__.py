"""Recording data models and codec."""

from .codec import (
    decode_recording,
    decode_viz,
    decode_widget,
    encode_recording,
    encode_viz,
    encode_widget,
    recording_from_json,
    recording_to_json,
)
from .recording import Recording
from .viz import Viz
from .widgets import PlotScalar, PointCloud, ThreeDPrimitive, ThreeDView, Widget

__all__ = [
    # Models
    "Recording",
    "Viz",
    "Widget",
    "PlotScalar",
    "ThreeDView",
    "ThreeDPrimitive",
    "PointCloud",
    # Codec
    "encode_recording",
    "decode_recording",
    "encode_viz",
    "decode_viz",
    "encode_widget",
    "decode_widget",
    "recording_to_json",
    "recording_from_json",
]
