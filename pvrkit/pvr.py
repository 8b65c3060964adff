"""Reader for PVR texture files.

A PVR file begins with a 32-byte header. Its last eight bytes hold the
colour format (byte 24), the data layout (byte 25), and the width and
height as little-endian 16-bit values (bytes 28 to 31). The texture data
follows the header.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import KosEnum

HEADER_SIZE = 0x20

GL_UNSIGNED_SHORT_5_6_5 = 0x8363

_TWIDDLED_LAYOUT = 0x01
_COMPRESSED_LAYOUTS = (0x10, 0x03)

# twiddled -> colour code -> internal format
_VQ_FORMATS: dict[bool, dict[int, KosEnum]] = {
    True: {
        0: KosEnum.COMPRESSED_ARGB_1555_VQ_TWID,
        1: KosEnum.COMPRESSED_RGB_565_VQ_TWID,
        2: KosEnum.COMPRESSED_ARGB_4444_VQ_TWID,
    },
    False: {
        0: KosEnum.COMPRESSED_ARGB_1555_VQ,
        1: KosEnum.COMPRESSED_RGB_565_VQ,
        2: KosEnum.COMPRESSED_ARGB_4444_VQ,
    },
}


class PvrError(ValueError):
    """Raised when PVR data cannot be read or names an unsupported format."""


@dataclass(frozen=True)
class PvrTexture:
    """A PVR texture: its size, format enumerant and raw data."""

    width: int
    height: int
    format: int
    data: bytes

    @property
    def compressed(self) -> bool:
        """Whether the data is VQ-compressed rather than plain RGB565."""
        return self.format != GL_UNSIGNED_SHORT_5_6_5


def _check_header(header: bytes) -> None:
    if len(header) < HEADER_SIZE:
        raise PvrError(f"PVR header needs {HEADER_SIZE} bytes, got {len(header)}")


def texture_width(header: bytes) -> int:
    """Return the width stored in a PVR header."""
    _check_header(header)
    return header[HEADER_SIZE - 4] | header[HEADER_SIZE - 3] << 8


def texture_height(header: bytes) -> int:
    """Return the height stored in a PVR header."""
    _check_header(header)
    return header[HEADER_SIZE - 2] | header[HEADER_SIZE - 1] << 8


def texture_format(header: bytes) -> int:
    """Return the format enumerant for the texture a PVR header describes."""
    _check_header(header)
    color = header[HEADER_SIZE - 8]
    layout = header[HEADER_SIZE - 7]

    twiddled = layout == _TWIDDLED_LAYOUT
    compressed = layout in _COMPRESSED_LAYOUTS

    if compressed:
        internal = _VQ_FORMATS[twiddled].get(color)
        if internal is None:
            raise PvrError(f"invalid texture format: colour {color}")
        return internal
    if color == 1:
        return GL_UNSIGNED_SHORT_5_6_5
    raise PvrError(f"unsupported uncompressed colour format {color}")


def mipmap_level_count(width: int, height: int) -> int:
    """Return the number of mipmap levels down to 1x1 for a texture."""
    largest = max(width, height)
    if largest <= 0:
        raise ValueError("texture dimensions must be positive")
    return largest.bit_length()


def mipmap_data_size(width: int, height: int) -> int:
    """Return the bytes needed for every 16-bit mipmap level of a texture."""
    size = 0
    for _ in range(mipmap_level_count(width, height)):
        size += width * height * 2
        if width > 1:
            width //= 2
        if height > 1:
            height //= 2
    return size


def parse_pvr(data: bytes) -> PvrTexture:
    """Decode a whole PVR file held in *data*."""
    data = bytes(data)
    _check_header(data)
    header = data[:HEADER_SIZE]
    return PvrTexture(
        texture_width(header),
        texture_height(header),
        texture_format(header),
        data[HEADER_SIZE:],
    )


def load_pvr(path: str | os.PathLike[str]) -> PvrTexture:
    """Read and decode the PVR file at *path*."""
    with open(path, "rb") as handle:
        return parse_pvr(handle.read())