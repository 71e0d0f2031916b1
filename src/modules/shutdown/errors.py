class ShutdownError(Exception):
    """Base class for shutdown coordination errors."""
    pass


class AlreadyInitializedError(ShutdownError):
    """Raised when the signal handler is set up a second time in the process."""

    def __init__(self):
        super().__init__("signal handler can only be setup once")


class NotMainThreadError(ShutdownError):
    """Raised when setup is attempted outside the main thread."""

    def __init__(self, thread_name: str):
        self.thread_name = thread_name
        super().__init__(f"signal handler must be setup from the main thread, not {thread_name}")
