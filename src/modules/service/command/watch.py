import asyncio
from datetime import timedelta

import click

from ...logging import BaseLogger
from ...shutdown import (
    ShutdownError,
    CancellationToken,
    ShutdownConfig,
    ShutdownCoordinatorFactory,
)
from ...shutdown.config import format_duration


class WatchCommand:
    """Command class running a service loop until shutdown is requested."""

    def __init__(self, config: ShutdownConfig):
        self.config = config

    def run(self, heartbeat: float, drain_time: float) -> None:
        """
        Arm the shutdown coordinator and serve until cancelled.

        Args:
            heartbeat: Seconds between heartbeat log lines
            drain_time: Seconds spent draining once the token is cancelled
        """
        coordinator = ShutdownCoordinatorFactory.get_instance().get_coordinator()
        try:
            token = coordinator.setup(self.config)
        except (ShutdownError, ValueError) as e:
            raise click.ClickException(str(e))

        asyncio.run(self._serve(token, coordinator.logger, heartbeat, drain_time))

    async def _serve(self, token: CancellationToken, logger: BaseLogger, heartbeat: float, drain_time: float) -> None:
        logger.log_info("Service started", grace_period=format_duration(self.config.grace_period))

        waiter = asyncio.ensure_future(token.wait_async())
        beats = 0
        while True:
            done, _ = await asyncio.wait({waiter}, timeout=heartbeat)
            if done:
                break
            beats += 1
            logger.log_debug("Heartbeat", beat=beats)

        logger.log_info("Draining", drain_time=format_duration(timedelta(seconds=drain_time)))
        await asyncio.sleep(drain_time)
        logger.log_info("Shutdown complete")
