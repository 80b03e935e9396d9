# framespector/inspector.py
# !/usr/bin/env python3

import os
import logging
from typing import Any, Dict, List, Optional

from .format_handlers.base import LogSink
from .format_handlers.mp3.mp3 import FrameRecord, Mp3FrameScanner
from .format_handlers.mp3.mp3_utils import MIN_FRAMES_AFTER_RESYNC

logger = logging.getLogger(__name__)


class FrameInspector:
    def __init__(
        self,
        filepath: str,
        log_sink: Optional[LogSink] = None,
        min_frames_after_resync: int = MIN_FRAMES_AFTER_RESYNC,
    ):
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found at '{filepath}'")
        self.filepath = filepath
        self.scanner = Mp3FrameScanner(
            log_sink=log_sink, min_frames_after_resync=min_frames_after_resync
        )

    def _read(self) -> bytes:
        with open(self.filepath, "rb") as f:
            data = f.read()
        logger.info(f"Read {len(data)} bytes from '{self.filepath}'")
        return data

    def count_frames(self) -> int:
        """Counts the MPEG audio frames in the file."""
        return self.scanner.count(self._read())

    def list_frames(self) -> List[FrameRecord]:
        """Lists the MPEG audio frames in the file, in file order."""
        return self.scanner.list(self._read())

    def inspect(self) -> Dict[str, Any]:
        """
        Scans the file once and returns both the frame count and the
        per-frame records, ready for JSON serialisation.
        """
        frames = self.scanner.scan(self._read())
        return {
            "frameCount": len(frames),
            "frames": [frame.to_dict() for frame in frames],
        }
