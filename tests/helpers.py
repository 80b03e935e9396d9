"""Byte builders for MP3 test buffers.

Usage:
    from tests.helpers import build_frame, build_id3_header

    data = build_id3_header(0) + build_frame() * 3
"""

from __future__ import annotations

import struct

from framespector.format_handlers.mp3.mp3_boxes import (
    frame_size_for,
    parse_frame_header,
    side_info_size,
)

MPEG1_BITS = 0b11
MPEG2_BITS = 0b10
MPEG25_BITS = 0b00
LAYER3_BITS = 0b01


def build_header(
    bitrate_index: int = 0b1001,  # 128 kbps on MPEG-1
    sample_rate_index: int = 0b00,  # 44100 Hz on MPEG-1
    padding: int = 0,
    version_bits: int = MPEG1_BITS,
    layer_bits: int = LAYER3_BITS,
    channel_mode: int = 0b00,
    sync: bool = True,
) -> bytes:
    """Pack a 4-byte frame header with the given fields."""
    header = 0xFFE00000 if sync else 0
    header |= version_bits << 19
    header |= layer_bits << 17
    header |= 0b1 << 16  # no CRC
    header |= bitrate_index << 12
    header |= sample_rate_index << 10
    header |= padding << 9
    header |= channel_mode << 6
    return struct.pack(">I", header)


def build_frame(**header_fields) -> bytes:
    """Build a complete frame: header followed by a zero-filled body."""
    header = build_header(**header_fields)
    frame_size = frame_size_for(parse_frame_header(header, 0))
    return header + bytes(frame_size - len(header))


def build_vbr_frame(marker: bytes = b"Xing", **header_fields) -> bytes:
    """Build a frame carrying a Xing/Info marker after its side information."""
    frame = bytearray(build_frame(**header_fields))
    header = parse_frame_header(frame, 0)
    start = 4 + side_info_size(header.mpeg_version, header.channel_mode)
    frame[start : start + 4] = marker
    return bytes(frame)


def build_id3_header(payload_size: int, version_major: int = 4) -> bytes:
    """Build a 10-byte ID3v2 header announcing ``payload_size`` body bytes."""
    return (
        b"ID3"
        + bytes([version_major, 0, 0])
        + bytes(
            [
                (payload_size >> 21) & 0x7F,
                (payload_size >> 14) & 0x7F,
                (payload_size >> 7) & 0x7F,
                payload_size & 0x7F,
            ]
        )
    )
