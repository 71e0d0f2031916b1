"""Tests for the shutdown configuration."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.modules.shutdown.config import ShutdownConfig, format_duration


def test_defaults():
    config = ShutdownConfig()
    assert config.log_level == "INFO"
    assert config.log_format == "colorful"
    assert config.grace_period == timedelta(0)

def test_grace_period_from_seconds():
    config = ShutdownConfig(grace_period=2)
    assert config.grace_period == timedelta(seconds=2)

    config = ShutdownConfig(grace_period=0.3)
    assert config.grace_period == timedelta(milliseconds=300)

def test_negative_grace_period_rejected():
    with pytest.raises(ValidationError):
        ShutdownConfig(grace_period=timedelta(seconds=-1))

def test_format_duration():
    assert format_duration(timedelta(0)) == "0s"
    assert format_duration(timedelta(seconds=2)) == "2s"
    assert format_duration(timedelta(milliseconds=300)) == "0.3s"
    assert format_duration(timedelta(minutes=1, seconds=30)) == "90s"
