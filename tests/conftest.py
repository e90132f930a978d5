"""Shared fixtures: a frozen clock and a clean configuration environment."""

from datetime import datetime

import pytest

from core.clock import ManualClock


T0 = datetime(2024, 3, 1, 8, 0, 0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make Config defaults deterministic regardless of the caller's shell or .env."""
    for key in ("PET_NAME", "PET_STATE_DIR", "PET_LOG_DIR", "HUNGER_DECAY_RATE",
                "ENERGY_DECAY_RATE", "FUN_DECAY_RATE", "HYGIENE_DECAY_RATE",
                "NEED_UPDATE_INTERVAL", "AUTOSAVE_INTERVAL", "STATE_BACKUPS_TO_KEEP"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def clock():
    return ManualClock(T0)
