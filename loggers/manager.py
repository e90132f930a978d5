"""
Central logging management.
Handles logger setup and configuration.
"""

import logging
import os
from pathlib import Path
from datetime import datetime
from dotenv import load_dotenv
from .formatters import SystemFormatter, NeedsFormatter, EventFormatter, ConsoleFormatter

class LogManager:
    """Log management with one file stream per subsystem."""
    
    @staticmethod
    def setup_logging(log_base: str = 'data/logs', console: bool = False):
        """Initialize all loggers with appropriate handlers and configurable levels."""
        # Load environment variables from .env file
        load_dotenv()
        
        LEVELS = {
            'CRITICAL': logging.CRITICAL,
            'ERROR': logging.ERROR,
            'WARNING': logging.WARNING,
            'INFO': logging.INFO,
            'DEBUG': logging.DEBUG,
        }

        log_base = Path(log_base)
        needs_dir = log_base / 'needs'
        system_dir = log_base / 'system'
        event_dir = log_base / 'events'
        for directory in [needs_dir, system_dir, event_dir]:
            directory.mkdir(parents=True, exist_ok=True)
            
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        
        config = {
            'pet.needs': (needs_dir / f"needs_{timestamp}.log", NeedsFormatter()),
            'pet.system': (system_dir / f"system_{timestamp}.log", SystemFormatter()),
            'pet.events': (event_dir / f"events_{timestamp}.log", EventFormatter())
        }
        
        for logger_name, (log_file, formatter) in config.items():
            logger = logging.getLogger(logger_name)
            
            # e.g., 'pet.needs' -> 'LOG_LEVEL_PET_NEEDS'
            env_var_key = f"LOG_LEVEL_{logger_name.upper().replace('.', '_')}"
            log_level_name = os.getenv(env_var_key, 'INFO')
            log_level = LEVELS.get(log_level_name.upper(), logging.INFO)
            logger.setLevel(log_level)
            
            # Avoid adding duplicate handlers if this function is called more than once
            if not logger.handlers:
                file_handler = logging.FileHandler(log_file, encoding='utf-8')
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

            # FileHandler subclasses StreamHandler, so match the exact type
            if console and not any(type(h) is logging.StreamHandler for h in logger.handlers):
                console_handler = logging.StreamHandler()
                console_handler.setFormatter(ConsoleFormatter())
                console_handler.setLevel(logging.WARNING)
                logger.addHandler(console_handler)

            logger.propagate = False
