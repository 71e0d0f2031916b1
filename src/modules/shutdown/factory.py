"""Factory owning the process-wide ShutdownCoordinator."""

import threading
from typing import Optional

from .cancellation import CancellationToken
from .config import ShutdownConfig
from .coordinator import ShutdownCoordinator
from .guard import ActivationGuard


class ShutdownCoordinatorFactory:
    """Composition root for the single shutdown coordinator of the process."""

    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.guard = ActivationGuard()
        self._coordinator: Optional[ShutdownCoordinator] = None
        self._coordinator_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> 'ShutdownCoordinatorFactory':
        """Get or create the singleton factory instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get_coordinator(self) -> ShutdownCoordinator:
        """
        Get the process-wide coordinator, creating it on first use.

        All coordinators handed out share the factory's activation guard, so
        only one of them can ever be set up.
        """
        with self._coordinator_lock:
            if self._coordinator is None:
                self._coordinator = ShutdownCoordinator(guard=self.guard)

        return self._coordinator


def setup_signal_handler(config: ShutdownConfig) -> CancellationToken:
    """
    Set up the process-wide coordinator.

    Returns a token cancelled on the first SIGINT or SIGTERM. A second signal,
    or the end of the grace period, terminates the process with exit status 1.

    Raises:
        NotMainThreadError: If called outside the main thread
        AlreadyInitializedError: If called more than once per process
        ValueError: If the logger cannot be built from the log settings
    """
    return ShutdownCoordinatorFactory.get_instance().get_coordinator().setup(config)
