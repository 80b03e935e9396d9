"""Shared fixtures for the framespector test suite."""

from __future__ import annotations

from typing import List

import pytest

from framespector.format_handlers.base import LogSink


class RecordingLogSink(LogSink):
    """Log sink that keeps every line for later assertions."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def info(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()
