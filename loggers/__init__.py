"""
Pet logging system.
Provides structured logging for the needs, system and event subsystems.
"""

from .manager import LogManager
from .loggers import NeedsLogger, SystemLogger, EventLogger

__all__ = ['LogManager', 'NeedsLogger', 'SystemLogger', 'EventLogger']
