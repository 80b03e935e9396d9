# framespector/format_handlers/base.py
# !/usr/bin/env python3

import logging
from abc import ABC, abstractmethod
from typing import List, Optional


class LogSink(ABC):
    """
    Receiver for the diagnostic lines a scanner emits while it walks a
    buffer. Purely observational: nothing a sink does can change a scan.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        pass


class NullLogSink(LogSink):
    """Discards every line."""

    def info(self, message: str) -> None:
        pass


class LoggingLogSink(LogSink):
    """Forwards lines to a stdlib logger at INFO level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("framespector")

    def info(self, message: str) -> None:
        self.logger.info(message)


class BaseFrameScanner(ABC):
    """
    Abstract base class for frame scanners.
    Defines the interface that all concrete scanners must implement.
    """

    @abstractmethod
    def scan(self, data: bytes) -> List:
        """
        Walks the given buffer and returns the detected frames in buffer order.

        Args:
            data: The complete file contents.

        Returns:
            A list of frame records, ordered by offset.
        """
        pass

    def count(self, data: bytes) -> int:
        return len(self.scan(data))

    def list(self, data: bytes) -> List:
        return self.scan(data)
