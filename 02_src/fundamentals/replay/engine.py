"""Replay engine: streams stored Vizs to one viewer connection."""

import asyncio
import uuid
from dataclasses import dataclass
from typing import Protocol

from fastapi import WebSocketDisconnect

from ..config import DEFAULT_SEND_DELAY, DEFAULT_SEND_TIMEOUT
from ..errors import EncodeError, TransportError
from ..logging_config import get_logger
from ..models import Recording
from ..state import IBridgeState
from .messages import encode_viz_update

logger = get_logger(__name__)


class ITransport(Protocol):
    """Outbound half of an accepted viewer connection."""

    async def send_text(self, data: str) -> None:
        """Send one whole text frame."""
        ...


@dataclass
class ReplayResult:
    """Outcome of one connection's replay."""

    connection_id: str
    total: int
    sent: int = 0
    completed: bool = False
    error: str | None = None


def _encode_all(recordings: tuple[Recording, ...]) -> list[str]:
    # Store order, then append order within each recording; no filtering.
    return [
        encode_viz_update(viz) for recording in recordings for viz in recording.vizs
    ]


class ReplayEngine:
    """Replays the full corpus to each viewer, paced by a fixed delay.

    Every connection gets an independent replay from the beginning. The
    state guard is held only while the messages are encoded; the send loop
    runs on that copy, so connections stream concurrently.

    The engine records when the first replay completes in full. It never
    exits the process itself; whoever owns the server lifecycle awaits
    `wait_first_completion()` and decides.
    """

    def __init__(
        self,
        send_delay: float = DEFAULT_SEND_DELAY,
        send_timeout: float | None = DEFAULT_SEND_TIMEOUT,
    ):
        self._send_delay = send_delay
        self._send_timeout = send_timeout
        self._first_completion = asyncio.Event()
        self._active = 0

    @property
    def send_delay(self) -> float:
        return self._send_delay

    @property
    def active_connections(self) -> int:
        """Number of replays currently streaming."""
        return self._active

    @property
    def has_completed(self) -> bool:
        """True once any replay has delivered every message."""
        return self._first_completion.is_set()

    async def wait_first_completion(self) -> None:
        """Wait until the first replay completes."""
        await self._first_completion.wait()

    async def handle_connection(
        self, transport: ITransport, state: IBridgeState
    ) -> ReplayResult:
        """Replay every stored Viz to an accepted connection.

        Transport failures abort this replay only; they are logged and
        reported in the result, never raised or retried. A stored Viz that
        cannot be encoded aborts the replay before anything is sent.
        """
        connection_id = uuid.uuid4().hex[:8]
        context = {"connection_id": connection_id}
        logger.info("New viewer connection", extra={"context": context})

        try:
            messages = await state.with_read_access(_encode_all)
        except EncodeError as e:
            logger.error("Cannot encode stored vizs: %s", e, extra={"context": context})
            return ReplayResult(connection_id=connection_id, total=0, error=str(e))
        result = ReplayResult(connection_id=connection_id, total=len(messages))

        self._active += 1
        try:
            await self._stream(transport, messages, result)
        except TransportError as e:
            result.error = str(e)
            logger.warning(
                "Replay aborted after %d/%d messages: %s",
                result.sent,
                result.total,
                e,
                extra={"context": context},
            )
            return result
        finally:
            self._active -= 1

        result.completed = True
        logger.info(
            "Replay complete: sent %d messages",
            result.sent,
            extra={"context": context},
        )
        if not self._first_completion.is_set():
            self._first_completion.set()
        return result

    async def _stream(
        self, transport: ITransport, messages: list[str], result: ReplayResult
    ) -> None:
        for i, message in enumerate(messages):
            if i:
                await asyncio.sleep(self._send_delay)
            await self._send(transport, message)
            result.sent += 1
            logger.debug(
                "Sent VizUpdate message %d/%d",
                result.sent,
                result.total,
                extra={"context": {"connection_id": result.connection_id}},
            )

    async def _send(self, transport: ITransport, message: str) -> None:
        try:
            if self._send_timeout is None:
                await transport.send_text(message)
            else:
                await asyncio.wait_for(
                    transport.send_text(message), timeout=self._send_timeout
                )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"send timed out after {self._send_timeout}s"
            ) from e
        except WebSocketDisconnect as e:
            raise TransportError(f"viewer disconnected (code {e.code})") from e
        except (OSError, RuntimeError) as e:
            # Starlette raises RuntimeError when sending on a closed socket
            raise TransportError(f"send failed: {e}") from e
