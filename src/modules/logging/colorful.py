import click
from .base import BaseLogger
import sys
from typing import Any


class ColorfulLogger(BaseLogger):
    """Logger that outputs colorful text for CLI usage."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for colored output
        self.logger.configure(
            handlers=[{
                "sink": sys.stdout,
                "colorize": True,
                "format": "<cyan>{time:YYYY-MM-DD HH:mm:ss.SSS}</cyan> | "
                         "<level>{level: <8}</level> | "
                         "<white>{message}</white>",
                "level": self.log_level
            }]
        )

    def _render(self, message: str, fields: dict, fg: str, bold: bool = False) -> str:
        text = click.style(message, fg=fg, bold=bold)
        if fields:
            text += " " + click.style(self.format_fields(fields), fg="cyan")
        return text

    def log_error(self, message: str, **fields: Any):
        self.logger.error(self._render(message, fields, "red", bold=True))

    def log_warning(self, message: str, **fields: Any):
        self.logger.warning(self._render(message, fields, "yellow", bold=True))

    def log_info(self, message: str, **fields: Any):
        self.logger.info(self._render(message, fields, "white"))

    def log_debug(self, message: str, **fields: Any):
        self.logger.debug(self._render(message, fields, "blue"))
