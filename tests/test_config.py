"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from ninepatch.config import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.default_density == 160
    assert config.target_density is None
    assert config.byte_order == "little"
    assert config.interpolation == "auto"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NINEPATCH_TARGET_DENSITY", "320")
    monkeypatch.setenv("NINEPATCH_BYTE_ORDER", "big")
    config = Settings(_env_file=None)
    assert config.target_density == 320
    assert config.byte_order == "big"


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("NINEPATCH_BYTE_ORDER", "middle")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, byte_order="little", default_density=0)
