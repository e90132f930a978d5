"""
Specialized loggers for the pet subsystems.
Provides clean interfaces for specific logging needs.
"""

import logging
import json
from typing import Any, Dict, Optional

class SystemLogger:
    """Logger for system operations (persistence, timers, startup)."""

    @staticmethod
    def error(message: str):
        """Log error-level system events."""
        logger = logging.getLogger('pet.system')
        logger.error(f"System Error: {message}")

    @staticmethod
    def warning(message: str):
        """Log warning-level system events."""
        logger = logging.getLogger('pet.system')
        logger.warning(f"System Warning: {message}")

    @staticmethod
    def debug(message: str):
        """Log debug-level system events."""
        logger = logging.getLogger('pet.system')
        logger.debug(f"System Debug: {message}")

    @staticmethod
    def info(message: str):
        """Log info-level system events."""
        logger = logging.getLogger('pet.system')
        logger.info(f"System Info: {message}")

    @staticmethod
    def log_state_io(action: str, path: Any, error: Optional[str] = None):
        """Log a state file read or write."""
        logger = logging.getLogger('pet.system')
        if error:
            logger.error(
                f"State {action} failed:\n"
                f"  Path: {path}\n"
                f"  Error: {error}"
            )
        else:
            logger.debug(f"State {action}: {path}")

class NeedsLogger:
    """Logger for need decay and mutations."""

    @staticmethod
    def warning(message: str):
        logger = logging.getLogger('pet.needs')
        logger.warning(f"Needs Warning: {message}")

    @staticmethod
    def debug(message: str):
        logger = logging.getLogger('pet.needs')
        logger.debug(f"Needs Debug: {message}")

    @staticmethod
    def log_decay(need_name: str, elapsed_hours: float, old_value: float, new_value: float):
        logger = logging.getLogger('pet.needs')
        logger.debug(
            f"Decay: {need_name}\n"
            f"  Elapsed: {elapsed_hours * 60:.2f} minutes\n"
            f"  From: {old_value}\n"
            f"  To:   {new_value}"
        )

    @staticmethod
    def log_change(need_name: str, action: str, old_value: float, new_value: float):
        logger = logging.getLogger('pet.needs')
        logger.debug(
            f"Change: {need_name} ({action})\n"
            f"  From: {old_value}\n"
            f"  To:   {new_value}"
        )
        logger.info(f"Needs: {need_name} {action} to {new_value}")

class EventLogger:
    """Logger for event system operations."""
    @staticmethod
    def error(message: str):
        logger = logging.getLogger('pet.events')
        logger.error(f"Event Error: {message}")

    @staticmethod
    def debug(message: str):
        logger = logging.getLogger('pet.events')
        logger.debug(f"Event Debug: {message}")

    @staticmethod
    def log_event_dispatch(event_type: str, data: Any = None, metadata: Optional[Dict] = None):
        logger = logging.getLogger('pet.events')
        components = [f"Event Dispatched: {event_type}"]
        if data is not None:
            if isinstance(data, dict):
                data_str = json.dumps({k: str(v) for k, v in data.items()}, indent=2)
                components.append(f"Data:\n{data_str}")
            else:
                components.append(f"Data: {data}")
        if metadata:
            meta_str = json.dumps({k: str(v) for k, v in metadata.items()}, indent=2)
            components.append(f"Metadata:\n{meta_str}")
        logger.debug('\n'.join(components))
