# framespector/format_handlers/mp3/mp3_utils.py
# !/usr/bin/env python3

import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

FRAME_HEADER_SIZE = 4

ID3V2_MARKER = b"ID3"
ID3V2_HEADER_SIZE = 10
ID3V2_SIZE_FIELD = slice(6, 10)

# Bits 31-21 of the header word.
FRAME_SYNC_MASK = 0xFFE00000

MPEG_VERSION_SHIFT = 19
LAYER_SHIFT = 17
PROTECTION_BIT_SHIFT = 16
BITRATE_INDEX_SHIFT = 12
SAMPLE_RATE_INDEX_SHIFT = 10
PADDING_BIT_SHIFT = 9
CHANNEL_MODE_SHIFT = 6
MODE_EXTENSION_SHIFT = 4
EMPHASIS_SHIFT = 0

# 0b01 is reserved.
MPEG_VERSIONS = {0b11: 1, 0b10: 2, 0b00: 2.5}

LAYER_III = 0b01

BITRATES_MPEG1_LAYER3: Sequence[Optional[int]] = (
    None,  # free
    32,
    40,
    48,
    56,
    64,
    80,
    96,
    112,
    128,
    160,
    192,
    224,
    256,
    320,
    None,  # bad
)

BITRATES_MPEG2_LAYER3: Sequence[Optional[int]] = (
    None,  # free
    8,
    16,
    24,
    32,
    40,
    48,
    56,
    64,
    80,
    96,
    112,
    128,
    144,
    160,
    None,  # bad
)

SAMPLE_RATES: Sequence[Optional[int]] = (44100, 48000, 32000, None)

SAMPLE_RATE_DIVISORS = {1: 1, 2: 2, 2.5: 4}

CHANNEL_MODES = {
    0b00: "stereo",
    0b01: "joint_stereo",
    0b10: "dual_channel",
    0b11: "single_channel",
}
SINGLE_CHANNEL = 0b11

FRAME_SIZE_COEFFICIENT_MPEG1 = 144000
FRAME_SIZE_COEFFICIENT_MPEG2 = 72000

SIDE_INFO_SIZES = {
    # (mpeg-1?, single channel?) -> bytes
    (True, False): 32,
    (True, True): 17,
    (False, False): 17,
    (False, True): 9,
}

VBR_METADATA_MARKERS = (b"Xing", b"Info")

MIN_FRAMES_AFTER_RESYNC = 2


def get_channel_mode(channel_mode: int) -> str:
    """
    Maps the 2-bit channel mode field to its name.
    Values outside 0-3 cannot come out of a header but fall back to "stereo".
    """
    name = CHANNEL_MODES.get(channel_mode)
    if name is None:
        logger.debug(f"Unknown channel mode {channel_mode}. Defaulting to stereo.")
        return CHANNEL_MODES[0b00]
    return name


def decode_syncsafe_int(data: bytes) -> int:
    """
    Decodes a big-endian sync-safe integer (7 significant bits per byte),
    as used by the ID3v2 tag size field.
    """
    value = 0
    for byte in data:
        value = (value << 7) | (byte & 0x7F)
    return value


def lookup(table: Sequence[Optional[int]], index: int) -> Optional[int]:
    """Returns the table entry at ``index`` or None when it is out of range."""
    if 0 <= index < len(table):
        return table[index]
    return None
