# framespector/__init__.py
# !/usr/bin/env python3

__version__ = "0.1.0"
__author__ = "RSMVDL"

from .cli import count, list_
from .inspector import FrameInspector
from .format_handlers.base import LogSink, NullLogSink, LoggingLogSink
from .format_handlers.mp3.mp3 import (
    FrameRecord,
    Mp3FrameScanner,
    count_frames,
    list_frames,
)
from .format_handlers.mp3.mp3_boxes import (
    FrameHeader,
    parse_id3v2_tag_size,
    parse_frame_header,
    compute_frame_size,
    is_metadata_frame,
)
from ._exceptions import (
    FramespectorError,
    NotABufferError,
    FrameDecodeError,
    TruncatedHeaderError,
    InvalidSyncError,
    UnsupportedVersionOrLayerError,
    InvalidRateFieldsError,
    FrameSizeOutOfBoundsError,
    NoFramesDetectedError,
)
