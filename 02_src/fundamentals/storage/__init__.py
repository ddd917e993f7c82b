"""Storage module."""

from .storage import IRecordingStore, RecordingStore

__all__ = ["IRecordingStore", "RecordingStore"]
