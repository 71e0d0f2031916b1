"""Shutdown coordinator turning termination signals into a cancellation token."""

import os
import queue
import signal
import threading
import types
from datetime import timedelta
from enum import Enum
from typing import Callable, List, Optional

from ..logging import BaseLogger, create_logger
from .cancellation import CancellationSource, CancellationToken
from .config import ShutdownConfig, format_duration
from .errors import AlreadyInitializedError, NotMainThreadError
from .guard import ActivationGuard

SHUTDOWN_SIGNALS: List[signal.Signals] = [signal.SIGINT, signal.SIGTERM]

# Room for the first signal plus one escalation signal in a tight burst
SIGNAL_BUFFER_SIZE = 2

EXIT_STATUS = 1

LoggerFactory = Callable[[str, str], BaseLogger]
ExitFunc = Callable[[int], None]


class WatcherState(str, Enum):
    IDLE = "idle"
    ARMED = "armed"
    CANCELLING = "cancelling"
    GRACE_PERIOD = "grace_period"
    TERMINATING = "terminating"


class ShutdownCoordinator:
    """Coordinates graceful shutdown of the process.

    On the first SIGINT or SIGTERM the token returned by :meth:`setup` is
    cancelled. The process is then terminated with exit status 1 once the
    grace period elapses, or as soon as a second signal arrives. With a zero
    grace period only a second signal terminates the process.

    Termination goes through ``os._exit`` by default. It does not unwind the
    stack: ``finally`` blocks, context managers and ``atexit`` hooks that have
    not run yet elsewhere in the application are skipped. If the application
    finishes its own shutdown and returns from the main thread first, the
    daemon watcher dies with the interpreter and no forced exit happens.
    """

    def __init__(
        self,
        guard: Optional[ActivationGuard] = None,
        logger_factory: LoggerFactory = create_logger,
        exit_func: ExitFunc = os._exit,
    ):
        """
        Initialize the shutdown coordinator.

        Args:
            guard: Activation guard; the coordinator can be set up once per guard
            logger_factory: Builds the logger from (log_format, log_level)
            exit_func: Called with the exit status when shutdown escalates
        """
        self._guard = guard if guard is not None else ActivationGuard()
        self._logger_factory = logger_factory
        self._exit = exit_func
        self._signals: "queue.SimpleQueue[int]" = queue.SimpleQueue()
        self._state = WatcherState.IDLE
        self._thread: Optional[threading.Thread] = None
        self.logger: Optional[BaseLogger] = None

    @property
    def state(self) -> WatcherState:
        return self._state

    @property
    def thread(self) -> Optional[threading.Thread]:
        """The watcher thread, alive until process exit once armed."""
        return self._thread

    def setup(self, config: ShutdownConfig) -> CancellationToken:
        """
        Register for SIGINT and SIGTERM and start the watcher thread.

        Must be called from the main thread, Python only delivers signals there.

        Args:
            config: Log settings and grace period

        Returns:
            A token that is cancelled on the first termination signal

        Raises:
            NotMainThreadError: If called outside the main thread; the guard is left unclaimed
            AlreadyInitializedError: If the guard was already claimed
            ValueError: If the logger cannot be built from the log settings
        """
        current = threading.current_thread()
        if current is not threading.main_thread():
            raise NotMainThreadError(current.name)

        if not self._guard.try_claim():
            raise AlreadyInitializedError()

        self.logger = self._logger_factory(config.log_format, config.log_level)

        source = CancellationSource()

        for sig in SHUTDOWN_SIGNALS:
            signal.signal(sig, self._handle_signal)

        self._state = WatcherState.ARMED
        self._thread = threading.Thread(
            target=self._watch,
            args=(source, config.grace_period),
            name="shutdown-watcher",
            daemon=True,
        )
        self._start_watcher()

        return source.token

    def _start_watcher(self) -> None:
        """Start the watcher with shutdown signals blocked so they reach the main thread."""
        if not hasattr(signal, "pthread_sigmask"):
            self._thread.start()
            return

        previous = signal.pthread_sigmask(signal.SIG_BLOCK, SHUTDOWN_SIGNALS)
        try:
            self._thread.start()
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    def _handle_signal(self, sig_num: int, frame: Optional[types.FrameType]) -> None:
        """
        Push the signal to the watcher. Runs in the main thread.

        Signals arriving while the buffer is full are dropped.
        """
        if self._signals.qsize() < SIGNAL_BUFFER_SIZE:
            self._signals.put(sig_num)

    def _watch(self, source: CancellationSource, grace_period: timedelta) -> None:
        sig = self._signals.get()

        self._state = WatcherState.CANCELLING
        self.logger.log_info(
            "Signal received, shutting down",
            grace_period=format_duration(grace_period),
            signal=signal_name(sig),
        )
        source.cancel()

        self._state = WatcherState.GRACE_PERIOD
        if grace_period:
            try:
                sig = self._signals.get(timeout=grace_period.total_seconds())
            except queue.Empty:
                self.logger.log_info(
                    "Grace period elapsed, exiting immediately",
                    grace_period=format_duration(grace_period),
                )
            else:
                self._log_second_signal(sig)
        else:
            sig = self._signals.get()
            self._log_second_signal(sig)

        self._state = WatcherState.TERMINATING
        self._exit(EXIT_STATUS)

    def _log_second_signal(self, sig: int) -> None:
        self.logger.log_info(
            "Second signal received during shutdown, exiting immediately",
            signal=signal_name(sig),
        )


def signal_name(sig_num: int) -> str:
    try:
        return signal.Signals(sig_num).name
    except ValueError:
        return str(sig_num)
