# config.py

"""
Configuration settings for the pet needs system.

Values are class-level defaults; every get_* accessor can be overridden with an
environment variable (a .env file is loaded by LogManager.setup_logging and main).
"""

import os
from pathlib import Path


class Config:
    """
    Centralized configuration management.
    """

    @classmethod
    def _get_float(cls, env_var: str, default: float) -> float:
        raw = os.getenv(env_var)
        if raw is None or raw.strip() == "":
            return default
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"{env_var} must be a number, got {raw!r}")

    @classmethod
    def get_pet_name(cls) -> str:
        return os.getenv("PET_NAME", cls.PET_NAME)

    @classmethod
    def get_state_dir(cls) -> Path:
        """Directory holding core_state.json and its backups."""
        return Path(os.getenv("PET_STATE_DIR", cls.STATE_DIR))

    @classmethod
    def get_log_dir(cls) -> Path:
        return Path(os.getenv("PET_LOG_DIR", cls.LOG_DIR))

    @classmethod
    def get_decay_rate(cls, need_name: str) -> float:
        """
        Decay rate (units per hour) for a need, e.g. HUNGER_DECAY_RATE.
        """
        key = f"{need_name.upper()}_DECAY_RATE"
        return cls._get_float(key, getattr(cls, key, cls.DEFAULT_DECAY_RATE))

    @classmethod
    def get_need_update_interval(cls) -> float:
        return cls._get_float("NEED_UPDATE_INTERVAL", cls.NEED_UPDATE_INTERVAL)

    @classmethod
    def get_autosave_interval(cls) -> float:
        return cls._get_float("AUTOSAVE_INTERVAL", cls.AUTOSAVE_INTERVAL)

    @classmethod
    def get_backups_to_keep(cls) -> int:
        return int(os.getenv("STATE_BACKUPS_TO_KEEP", str(cls.STATE_BACKUPS_TO_KEEP)))

    PET_NAME = "Ikimono"

    STATE_DIR = "data/pet_state"
    LOG_DIR = "data/logs"
    STATE_BACKUPS_TO_KEEP = 5

    # timers (in seconds)
    NEED_UPDATE_INTERVAL = 5.0
    AUTOSAVE_INTERVAL = 30.0

    # need bounds
    NEED_MIN_VALUE = 0.0
    NEED_MAX_VALUE = 100.0

    # decay rates (units per hour); max/rate = hours from full to empty
    DEFAULT_DECAY_RATE = 5.0
    HUNGER_DECAY_RATE = 5.0    # 20 hours
    ENERGY_DECAY_RATE = 4.0    # 25 hours
    FUN_DECAY_RATE = 6.25      # 16 hours
    HYGIENE_DECAY_RATE = 3.125 # 32 hours

    # usage conditions
    FUN_MIN_ENERGY = 20.0

    VERSION = "1.0.0"
