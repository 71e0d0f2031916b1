import sys
from typing import Any

from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for JSON output
        self.logger.configure(
            handlers=[{
                "sink": sys.stdout,
                "serialize": True,  # JSON output
                "format": "{time} | {level} | {message}",
                "level": self.log_level
            }]
        )

    def log_error(self, message: str, **fields: Any):
        self.logger.bind(**fields).error(message)

    def log_warning(self, message: str, **fields: Any):
        self.logger.bind(**fields).warning(message)

    def log_info(self, message: str, **fields: Any):
        self.logger.bind(**fields).info(message)

    def log_debug(self, message: str, **fields: Any):
        self.logger.bind(**fields).debug(message)
