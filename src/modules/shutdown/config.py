from datetime import timedelta

from pydantic import BaseModel, field_validator


def format_duration(duration: timedelta) -> str:
    """Render a duration for log fields, e.g. ``2s`` or ``0.3s``."""
    return f"{duration.total_seconds():g}s"


class ShutdownConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "colorful"
    grace_period: timedelta = timedelta(0)  # 0 waits for a second signal with no timer

    @field_validator('grace_period')
    @classmethod
    def validate_grace_period(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("grace_period must not be negative")
        return value
