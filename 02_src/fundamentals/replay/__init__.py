"""Replay module."""

from .engine import ITransport, ReplayEngine, ReplayResult
from .messages import VIZ_UPDATE, decode_viz_update, encode_viz_update

__all__ = [
    "ITransport",
    "ReplayEngine",
    "ReplayResult",
    "VIZ_UPDATE",
    "encode_viz_update",
    "decode_viz_update",
]
