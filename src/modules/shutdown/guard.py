"""One-time activation guard for the shutdown coordinator."""

import threading


class ActivationGuard:
    """Process-wide flag that can be claimed exactly once.

    The underlying lock is acquired without blocking and never released, so
    concurrent callers race safely and only the first one wins.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def try_claim(self) -> bool:
        """Claim the guard. Returns False if it was already claimed."""
        return self._lock.acquire(blocking=False)

    @property
    def claimed(self) -> bool:
        return self._lock.locked()
