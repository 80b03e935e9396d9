# framespector/format_handlers/mp3/mp3.py
# !/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .mp3_boxes import (
    parse_id3v2_tag_size,
    parse_frame_header,
    frame_size_for,
    metadata_marker,
)
from .mp3_utils import FRAME_HEADER_SIZE, MIN_FRAMES_AFTER_RESYNC
from ..base import BaseFrameScanner, LogSink, LoggingLogSink
from ..._exceptions import (
    FrameDecodeError,
    FrameSizeOutOfBoundsError,
    NoFramesDetectedError,
    NotABufferError,
)

logger = logging.getLogger(__name__)

BUFFER_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class FrameRecord:
    """Position and size of one audio frame inside the scanned buffer."""

    offset: int
    frame_size: int
    header_size: int = FRAME_HEADER_SIZE

    @property
    def data_size(self) -> int:
        return self.frame_size - self.header_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "offset": self.offset,
            "frameSize": self.frame_size,
            "headerSize": self.header_size,
            "dataSize": self.data_size,
        }


class Mp3FrameScanner(BaseFrameScanner):
    """
    Walks an MP3 buffer frame by frame.

    The scan starts right after a leading ID3v2 tag. Whenever no valid Layer
    III frame fits at the current offset the scanner moves one byte forward
    and tries again. Xing/Info frames are skipped whole and never reported.

    If the scan had to resync before the first audio frame was found, at
    least ``min_frames_after_resync`` frames are required; a lone sync match
    inside arbitrary data is too weak to call the buffer an MP3.
    """

    def __init__(
        self,
        log_sink: Optional[LogSink] = None,
        min_frames_after_resync: int = MIN_FRAMES_AFTER_RESYNC,
    ):
        if min_frames_after_resync < 1:
            raise ValueError(
                f"min_frames_after_resync must be at least 1, got {min_frames_after_resync}"
            )
        self.log_sink = log_sink if log_sink is not None else LoggingLogSink(logger)
        self.min_frames_after_resync = min_frames_after_resync

    def scan(self, data: bytes) -> List[FrameRecord]:
        if not isinstance(data, BUFFER_TYPES):
            raise NotABufferError(data)
        if isinstance(data, memoryview):
            data = data.tobytes()

        tag_size = parse_id3v2_tag_size(data)
        self.log_sink.info(f"ID3 tag size: {tag_size} bytes")

        frames: List[FrameRecord] = []
        total_size = len(data)
        offset = tag_size
        resynced = False

        while offset + FRAME_HEADER_SIZE <= total_size:
            try:
                header = parse_frame_header(data, offset)
                frame_size = frame_size_for(header)
                if frame_size <= 0 or offset + frame_size > total_size:
                    raise FrameSizeOutOfBoundsError(
                        f"Frame size {frame_size} does not fit in the buffer.", offset
                    )
            except FrameDecodeError:
                if not frames:
                    resynced = True
                offset += 1
                continue

            marker = metadata_marker(data, offset, header)
            if marker is not None:
                self.log_sink.info(
                    f"Skipping {marker.decode('ascii')} metadata frame @ offset {offset} size {frame_size}"
                )
                offset += frame_size
                continue

            frames.append(FrameRecord(offset=offset, frame_size=frame_size))
            self.log_sink.info(
                f"Frame {len(frames) - 1} @ offset {offset} size {frame_size}"
            )
            offset += frame_size

        min_frames = self.min_frames_after_resync if resynced else 1
        if len(frames) < min_frames:
            logger.debug(
                f"Found {len(frames)} frame(s), {min_frames} required (resynced={resynced})."
            )
            raise NoFramesDetectedError()

        return frames


_default_scanner = Mp3FrameScanner()


def count_frames(data: bytes, log_sink: Optional[LogSink] = None) -> int:
    """Counts the audio frames in an MP3 buffer."""
    scanner = _default_scanner if log_sink is None else Mp3FrameScanner(log_sink)
    return scanner.count(data)


def list_frames(data: bytes, log_sink: Optional[LogSink] = None) -> List[FrameRecord]:
    """Lists the audio frames in an MP3 buffer, in buffer order."""
    scanner = _default_scanner if log_sink is None else Mp3FrameScanner(log_sink)
    return scanner.list(data)
