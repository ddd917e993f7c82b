"""Shared server-side state holding loaded recordings."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Protocol, TypeVar

from ..logging_config import get_logger
from ..models import Recording

logger = get_logger(__name__)

T = TypeVar("T")


class IBridgeState(Protocol):
    """Lock-guarded, ordered collection of recordings."""

    async def add(self, recording: Recording) -> None:
        """Append a recording."""
        ...

    async def snapshot(self) -> tuple[Recording, ...]:
        """Point-in-time view of the held recordings."""
        ...

    async def with_read_access(self, fn: Callable[[tuple[Recording, ...]], T]) -> T:
        """Run fn over the recordings while holding the guard."""
        ...


class BridgeState:
    """Owns every recording the bridge serves.

    A single asyncio.Lock guards the whole collection; there is no
    per-recording locking. Readers only ever see a tuple, never the list.
    """

    def __init__(self):
        self._recordings: list[Recording] = []
        self._lock = asyncio.Lock()

    async def add(self, recording: Recording) -> None:
        """Append a recording to the end of the collection."""
        async with self._lock:
            self._recordings.append(recording)
            index = len(self._recordings) - 1
        logger.info(
            "Added recording %r (session %s) at index %d",
            recording.name,
            recording.session_id,
            index,
        )

    @asynccontextmanager
    async def read_access(self) -> AsyncIterator[tuple[Recording, ...]]:
        """Hold the guard for the duration of the block."""
        async with self._lock:
            yield tuple(self._recordings)

    async def with_read_access(self, fn: Callable[[tuple[Recording, ...]], T]) -> T:
        """Run fn over the recordings while holding the guard."""
        async with self.read_access() as recordings:
            return fn(recordings)

    async def snapshot(self) -> tuple[Recording, ...]:
        """Point-in-time view of the held recordings."""
        async with self.read_access() as recordings:
            return recordings

    @property
    def count(self) -> int:
        """Number of held recordings."""
        return len(self._recordings)
