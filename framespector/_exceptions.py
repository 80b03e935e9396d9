# framespector/_exceptions.py
# !/usr/bin/env python3

"""
_exceptions.py
~~~~~~~~~~~~~~~

Exception hierarchy for the framespector library.

Only ``NotABufferError`` and ``NoFramesDetectedError`` ever reach callers of
the public scan operations. The ``FrameDecodeError`` family is raised by the
low-level decoders and recovered inside the scan loop.
"""


class FramespectorError(Exception):
    """Base class for every error raised by framespector."""


class NotABufferError(FramespectorError, TypeError):
    """The input is not a bytes-like object."""

    def __init__(self, value: object = None):
        super().__init__("Input must be a bytes-like object.")
        self.value_type = type(value).__name__


class FrameDecodeError(FramespectorError):
    """A frame could not be decoded at a given offset."""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class TruncatedHeaderError(FrameDecodeError):
    pass


class InvalidSyncError(FrameDecodeError):
    pass


class UnsupportedVersionOrLayerError(FrameDecodeError):
    pass


class InvalidRateFieldsError(FrameDecodeError):
    pass


class FrameSizeOutOfBoundsError(FrameDecodeError):
    pass


class NoFramesDetectedError(FramespectorError, ValueError):
    """The scan finished without a usable run of audio frames."""

    def __init__(self, message: str = "No valid MPEG frames detected in MP3 file."):
        super().__init__(message)
