"""Pytest configuration."""

import random

import pytest

from password_ruler import _conf


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source, so failures are reproducible."""
    return random.Random(20150101)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> _conf.Settings:
    """Replace the lazily loaded settings with defaults, ignoring the environment."""
    for name in ("PASSWORD_RULER_DEFAULT_LENGTH", "PASSWORD_RULER_SECURE_RANDOM"):
        monkeypatch.delenv(name, raising=False)
    value = _conf.load_settings()
    monkeypatch.setattr(_conf, "settings", value)
    return value
