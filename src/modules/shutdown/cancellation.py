"""Cancellation token shared between the coordinator and the application."""

import asyncio
import threading
from typing import Callable, List, Optional


class CancellationToken:
    """Read-only view of a cancellation.

    The application observes the token; only the owning
    :class:`CancellationSource` can cancel it.
    """

    def __init__(self, event: threading.Event, callbacks: List[Callable[[], None]], lock: threading.Lock):
        self._event = event
        self._callbacks = callbacks
        self._lock = lock

    @property
    def is_cancelled(self) -> bool:
        """Check if shutdown has begun."""
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the token is cancelled.

        Args:
            timeout: Maximum number of seconds to wait, None waits forever

        Returns:
            True if the token was cancelled, False on timeout
        """
        return self._event.wait(timeout)

    async def wait_async(self) -> None:
        """Wait for cancellation without blocking the running event loop."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[None] = loop.create_future()

        def resolve() -> None:
            if not future.done():
                future.set_result(None)

        def notify() -> None:
            try:
                loop.call_soon_threadsafe(resolve)
            except RuntimeError:
                # Loop already closed, nobody is waiting anymore
                pass

        with self._lock:
            if self._event.is_set():
                return
            self._callbacks.append(notify)

        try:
            await future
        finally:
            with self._lock:
                if notify in self._callbacks:
                    self._callbacks.remove(notify)

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"


class CancellationSource:
    """Owner of a cancellation token and its cancel function."""

    def __init__(self):
        self._event = threading.Event()
        self._callbacks: List[Callable[[], None]] = []
        self._lock = threading.Lock()
        self._token = CancellationToken(self._event, self._callbacks, self._lock)

    @property
    def token(self) -> CancellationToken:
        return self._token

    def cancel(self) -> None:
        """Cancel the token. Later calls are no-ops; cancellation is permanent."""
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks = list(self._callbacks)
            self._callbacks.clear()

        for callback in callbacks:
            callback()
