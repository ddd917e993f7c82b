"""Shared state module."""

from .state import BridgeState, IBridgeState

__all__ = ["BridgeState", "IBridgeState"]
