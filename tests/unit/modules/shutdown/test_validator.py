"""Tests for loading the shutdown configuration from YAML."""

from datetime import timedelta

import pytest

from src.modules.shutdown.validator import ShutdownConfigValidator


def test_load_full_config():
    config = ShutdownConfigValidator.validate_and_load("""
log_level: DEBUG
log_format: json
grace_period: 2.5
""")
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"
    assert config.grace_period == timedelta(seconds=2.5)

def test_empty_document_yields_defaults():
    config = ShutdownConfigValidator.validate_and_load("")
    assert config.log_format == "colorful"
    assert config.grace_period == timedelta(0)

def test_invalid_yaml():
    with pytest.raises(ValueError, match="Invalid YAML format"):
        ShutdownConfigValidator.validate_and_load("log_level: [DEBUG")

def test_not_a_mapping():
    with pytest.raises(ValueError, match="expected a mapping"):
        ShutdownConfigValidator.validate_and_load("- DEBUG\n- json\n")

def test_negative_grace_period():
    with pytest.raises(ValueError, match="Error in field 'grace_period'"):
        ShutdownConfigValidator.validate_and_load("grace_period: -1\n")
