"""
Structured logging for store, fixture and snapshot operations.
"""

import logging
from typing import Any, Dict

from ..core.config import debug_enabled


class StructuredLogger:
    """Structured logger for store writes, fixture seeding and output snapshots."""

    def __init__(self, name: str = "observer"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status in ("failed", "error"):
            self.logger.error(message)
        else:
            self.logger.info(message)

    def log_store_operation(self, operation: str, path: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log an item store operation."""
        log_details = {"path": path}
        if details:
            log_details.update(details)

        self.log_operation(f"store.{operation}", status, log_details)

    def log_fixture_event(self, action: str, home_dir: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log a fixture seeding step."""
        log_details = {"home_dir": home_dir}
        if details:
            log_details.update(details)

        self.log_operation(f"fixture.{action}", status, log_details)

    def log_snapshot(self, byte_count: int, stop_reason: str):
        """Log a snapshot read. Debug level only since snapshots are sampled often."""
        self.logger.debug(f"Operation: snapshot.read, Status: {stop_reason}, Details: {{'bytes': {byte_count}}}")

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
