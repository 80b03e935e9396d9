# framespector/format_handlers/mp3/mp3_boxes.py
# !/usr/bin/env python3

import struct
from dataclasses import dataclass
from typing import Optional, Union

from ..._exceptions import (
    TruncatedHeaderError,
    InvalidSyncError,
    UnsupportedVersionOrLayerError,
    InvalidRateFieldsError,
)
from .mp3_utils import (
    FRAME_HEADER_SIZE,
    ID3V2_MARKER,
    ID3V2_HEADER_SIZE,
    ID3V2_SIZE_FIELD,
    FRAME_SYNC_MASK,
    MPEG_VERSION_SHIFT,
    LAYER_SHIFT,
    PROTECTION_BIT_SHIFT,
    BITRATE_INDEX_SHIFT,
    SAMPLE_RATE_INDEX_SHIFT,
    PADDING_BIT_SHIFT,
    CHANNEL_MODE_SHIFT,
    MODE_EXTENSION_SHIFT,
    EMPHASIS_SHIFT,
    MPEG_VERSIONS,
    LAYER_III,
    BITRATES_MPEG1_LAYER3,
    BITRATES_MPEG2_LAYER3,
    SAMPLE_RATES,
    SAMPLE_RATE_DIVISORS,
    SINGLE_CHANNEL,
    FRAME_SIZE_COEFFICIENT_MPEG1,
    FRAME_SIZE_COEFFICIENT_MPEG2,
    SIDE_INFO_SIZES,
    VBR_METADATA_MARKERS,
    decode_syncsafe_int,
    get_channel_mode,
    lookup,
)


MpegVersion = Union[int, float]


@dataclass(frozen=True)
class FrameHeader:
    """Decoded fields of a 4-byte MPEG audio frame header."""

    bitrate_kbps: int
    sample_rate: int
    padding: int
    bitrate_index: int
    sample_rate_index: int
    mpeg_version: MpegVersion
    version_bits: int
    layer_bits: int
    protection_bit: int
    channel_mode: int
    mode_extension: int
    emphasis: int
    channel_mode_name: str


def parse_id3v2_tag_size(data: bytes) -> int:
    """
    Returns the total size (header + body) of an ID3v2 tag at the start of
    the buffer, or 0 when there is none.
    """
    if len(data) < ID3V2_HEADER_SIZE or bytes(data[0:3]) != ID3V2_MARKER:
        return 0
    size = decode_syncsafe_int(data[ID3V2_SIZE_FIELD])
    return size + ID3V2_HEADER_SIZE


def parse_frame_header(data: bytes, offset: int) -> FrameHeader:
    """
    Parses the 4-byte MPEG audio frame header at ``offset``.

    Only Layer III of MPEG-1, MPEG-2 and MPEG-2.5 is accepted. The sample
    rate of the returned header is already scaled for MPEG-2/2.5.

    Raises:
        TruncatedHeaderError: fewer than 4 bytes remain.
        InvalidSyncError: the 11 sync bits are not all set.
        UnsupportedVersionOrLayerError: reserved version or a layer other than III.
        InvalidRateFieldsError: free/bad bitrate index or reserved sample rate index.
    """
    if offset < 0 or offset + FRAME_HEADER_SIZE > len(data):
        raise TruncatedHeaderError(
            "Unexpected end of file while reading frame header.", offset
        )

    header = struct.unpack_from(">I", data, offset)[0]

    if header & FRAME_SYNC_MASK != FRAME_SYNC_MASK:
        raise InvalidSyncError("Invalid frame sync.", offset)

    version_bits = (header >> MPEG_VERSION_SHIFT) & 0b11
    layer_bits = (header >> LAYER_SHIFT) & 0b11
    mpeg_version = MPEG_VERSIONS.get(version_bits)
    if mpeg_version is None or layer_bits != LAYER_III:
        raise UnsupportedVersionOrLayerError(
            "Unsupported MPEG version or layer.", offset
        )

    bitrate_index = (header >> BITRATE_INDEX_SHIFT) & 0b1111
    sample_rate_index = (header >> SAMPLE_RATE_INDEX_SHIFT) & 0b11
    padding_bit = (header >> PADDING_BIT_SHIFT) & 0b1
    protection_bit = (header >> PROTECTION_BIT_SHIFT) & 0b1
    channel_mode = (header >> CHANNEL_MODE_SHIFT) & 0b11
    mode_extension = (header >> MODE_EXTENSION_SHIFT) & 0b11
    emphasis = (header >> EMPHASIS_SHIFT) & 0b11

    bitrate_table = BITRATES_MPEG1_LAYER3 if mpeg_version == 1 else BITRATES_MPEG2_LAYER3
    bitrate_kbps = lookup(bitrate_table, bitrate_index)
    sample_rate = lookup(SAMPLE_RATES, sample_rate_index)
    if bitrate_kbps is None or sample_rate is None:
        raise InvalidRateFieldsError(
            "Invalid bitrate or sample rate in frame header.", offset
        )
    sample_rate //= SAMPLE_RATE_DIVISORS[mpeg_version]

    return FrameHeader(
        bitrate_kbps=bitrate_kbps,
        sample_rate=sample_rate,
        padding=padding_bit,
        bitrate_index=bitrate_index,
        sample_rate_index=sample_rate_index,
        mpeg_version=mpeg_version,
        version_bits=version_bits,
        layer_bits=layer_bits,
        protection_bit=protection_bit,
        channel_mode=channel_mode,
        mode_extension=mode_extension,
        emphasis=emphasis,
        channel_mode_name=get_channel_mode(channel_mode),
    )


def compute_frame_size(
    bitrate_kbps: int, sample_rate: int, padding: int, mpeg_version: MpegVersion
) -> int:
    """
    Layer III frame length in bytes:

        floor(coefficient * bitrate_kbps / sample_rate) + padding

    with a coefficient of 144000 (144 * 1000) for MPEG-1 and 72000 for
    MPEG-2/2.5 (ISO/IEC 11172-3, ISO/IEC 13818-3).
    """
    if mpeg_version == 1:
        coefficient = FRAME_SIZE_COEFFICIENT_MPEG1
    else:
        coefficient = FRAME_SIZE_COEFFICIENT_MPEG2
    return (coefficient * bitrate_kbps) // sample_rate + padding


def frame_size_for(header: FrameHeader) -> int:
    return compute_frame_size(
        header.bitrate_kbps, header.sample_rate, header.padding, header.mpeg_version
    )


def side_info_size(mpeg_version: MpegVersion, channel_mode: int) -> int:
    """Length of the Layer III side information that follows the header."""
    return SIDE_INFO_SIZES[(mpeg_version == 1, channel_mode == SINGLE_CHANNEL)]


def metadata_marker(
    data: bytes, frame_offset: int, header: FrameHeader
) -> Optional[bytes]:
    """
    Returns the Xing/Info marker found after the header and side information
    of the frame at ``frame_offset``, or None for an ordinary audio frame.
    """
    start = (
        frame_offset
        + FRAME_HEADER_SIZE
        + side_info_size(header.mpeg_version, header.channel_mode)
    )
    candidate = bytes(data[start : start + 4])
    if candidate in VBR_METADATA_MARKERS:
        return candidate
    return None


def is_metadata_frame(data: bytes, frame_offset: int, header: FrameHeader) -> bool:
    return metadata_marker(data, frame_offset, header) is not None
