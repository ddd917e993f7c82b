"""Demo producer."""

from .sim import Sim

__all__ = ["Sim"]
