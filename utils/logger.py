"""
Village Economy - Event Logger
Structured logging for debugging and observability.
"""

import logging
import os
from datetime import datetime
from typing import Optional


class EventLogger:
    """Logger for simulation events."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True

        self.logger = logging.getLogger("village")
        self.logger.setLevel(logging.DEBUG)

        self.formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        self._file_handler: Optional[logging.FileHandler] = None
        self._console_handler: Optional[logging.Handler] = None

    def attach_file(self, log_dir: str) -> str:
        """
        Write log records to a timestamped file in `log_dir`.
        A handler already writing to another directory is replaced.
        Returns the file path.
        """
        if self._file_handler is not None:
            current_dir = os.path.dirname(self._file_handler.baseFilename)
            if current_dir == os.path.abspath(log_dir):
                return self._file_handler.baseFilename
            self.detach_file()

        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"village_{timestamp}.log")

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(self.formatter)
        self.logger.addHandler(file_handler)
        self._file_handler = file_handler
        return file_handler.baseFilename

    def detach_file(self):
        """Stop writing to the log file, if any."""
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    def attach_console(self, level: int = logging.INFO):
        """Echo log records to stderr."""
        if self._console_handler is not None:
            self._console_handler.setLevel(level)
            return

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(self.formatter)
        self.logger.addHandler(console_handler)
        self._console_handler = console_handler

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def log_day(self, day: int, workers: int, food: int, wood: int, metal: int):
        """Log end-of-day summary."""
        self.debug(
            f"Day {day}: workers={workers}, food={food}, wood={wood}, metal={metal}"
        )

    def log_event(self, day: int, event_type: str, details: str):
        """Log a simulation event."""
        self.info(f"[Day {day}] {event_type}: {details}")

    def log_rejection(self, day: int, operation: str, reason: str):
        """Log a request the village declined."""
        self.debug(f"[Day {day}] {operation} rejected: {reason}")


# Global logger instance
def get_logger() -> EventLogger:
    """Get the global event logger."""
    return EventLogger()
