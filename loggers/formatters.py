"""
Formatters for different log types.
Handles consistent formatting across the logging streams.
"""

import logging

class SystemFormatter(logging.Formatter):
    """Formatter for system and persistence events."""
    
    def format(self, record):
        timestamp = self.formatTime(record)
        return (
            f"[{timestamp}] {record.levelname:8} "
            f"{record.name.split('.')[-1]:10} | {record.getMessage()}"
        )

class NeedsFormatter(logging.Formatter):
    """Formatter for need decay and mutation events."""
    
    def format(self, record):
        timestamp = self.formatTime(record)
        return f"[{timestamp}] {record.levelname:8} NEEDS | {record.getMessage()}"
    
class EventFormatter(logging.Formatter):
    """Formatter for event dispatcher"""
    
    def format(self, record):
        timestamp = self.formatTime(record)
        return f"[{timestamp}] {record.levelname:8} EVENT | {record.getMessage()}"

class ConsoleFormatter(logging.Formatter):
    """Minimal formatter for console output."""
    
    def format(self, record):
        if record.levelno >= logging.WARNING:
            return f"! {record.getMessage()}"
        return record.getMessage()
