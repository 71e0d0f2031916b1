"""Shutdown coordination module turning termination signals into cooperative cancellation."""

from .cancellation import CancellationSource, CancellationToken
from .config import ShutdownConfig
from .coordinator import ShutdownCoordinator, WatcherState
from .errors import AlreadyInitializedError, NotMainThreadError, ShutdownError
from .factory import ShutdownCoordinatorFactory, setup_signal_handler
from .guard import ActivationGuard

__all__ = [
    'ActivationGuard',
    'AlreadyInitializedError',
    'CancellationSource',
    'CancellationToken',
    'NotMainThreadError',
    'ShutdownConfig',
    'ShutdownCoordinator',
    'ShutdownCoordinatorFactory',
    'ShutdownError',
    'WatcherState',
    'setup_signal_handler',
]
