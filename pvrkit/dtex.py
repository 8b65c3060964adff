"""Reader for DTEX texture files, the format written by the texconv tool.

A DTEX file is a 16-byte little-endian header followed by the texture
data exactly as the PowerVR expects it:

    4 bytes   identifier, ``b"DTEX"``
    uint16    width
    uint16    height
    uint32    type flags
    uint32    size of the data in bytes

The type flags say whether the data is twiddled (bit 26 clear),
VQ-compressed (bit 30), mipmapped (bit 31), and which pixel format it
holds (bits 27 to 29).
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

from .constants import KosEnum

GL_RGB = 0x1907
GL_BGRA = 0x80E1

HEADER_SIZE = 16
_HEADER = struct.Struct("<4sHHII")

_STRIDED_CLEAR_TWIDDLED_BIT = 1 << 26
_COMPRESSED_BIT = 1 << 30
_MIPMAPPED_BIT = 1 << 31
_FORMAT_SHIFT = 27
_FORMAT_MASK = 0b111

ARGB1555 = 0
RGB565 = 1
ARGB4444 = 2

# (twiddled, mipmapped) -> internal format, for each pixel format
_VQ_FORMATS: dict[int, dict[tuple[bool, bool], KosEnum]] = {
    ARGB1555: {
        (True, True): KosEnum.COMPRESSED_ARGB_1555_VQ_MIPMAP_TWID,
        (True, False): KosEnum.COMPRESSED_ARGB_1555_VQ_TWID,
        (False, True): KosEnum.COMPRESSED_ARGB_1555_VQ_MIPMAP,
        (False, False): KosEnum.COMPRESSED_ARGB_1555_VQ,
    },
    RGB565: {
        (True, True): KosEnum.COMPRESSED_RGB_565_VQ_MIPMAP_TWID,
        (True, False): KosEnum.COMPRESSED_RGB_565_VQ_TWID,
        (False, True): KosEnum.COMPRESSED_RGB_565_VQ_MIPMAP,
        (False, False): KosEnum.COMPRESSED_RGB_565_VQ,
    },
    ARGB4444: {
        (True, True): KosEnum.COMPRESSED_ARGB_4444_VQ_MIPMAP_TWID,
        (True, False): KosEnum.COMPRESSED_ARGB_4444_VQ_TWID,
        (False, True): KosEnum.COMPRESSED_ARGB_4444_VQ_MIPMAP,
        (False, False): KosEnum.COMPRESSED_ARGB_4444_VQ,
    },
}


class DtexError(ValueError):
    """Raised when DTEX data cannot be read or names an unknown format."""


@dataclass(frozen=True)
class DtexHeader:
    """The fixed header at the start of a DTEX file."""

    id: bytes
    width: int
    height: int
    type: int
    size: int

    @property
    def twiddled(self) -> bool:
        return not self.type & _STRIDED_CLEAR_TWIDDLED_BIT

    @property
    def compressed(self) -> bool:
        return bool(self.type & _COMPRESSED_BIT)

    @property
    def mipmapped(self) -> bool:
        return bool(self.type & _MIPMAPPED_BIT)

    @property
    def pixel_format(self) -> int:
        """The pixel format code: 0 ARGB1555, 1 RGB565, 2 ARGB4444."""
        return (self.type >> _FORMAT_SHIFT) & _FORMAT_MASK


@dataclass(frozen=True)
class DtexFormats:
    """How to upload a DTEX texture.

    For compressed textures only ``internal_format`` is set; uncompressed
    ones also carry the transfer format and type for a plain upload.
    """

    internal_format: int
    transfer_format: int | None = None
    transfer_type: int | None = None


@dataclass(frozen=True)
class DtexImage:
    """A DTEX texture: its header, upload formats and raw data."""

    header: DtexHeader
    formats: DtexFormats
    data: bytes

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def compressed(self) -> bool:
        return self.header.compressed

    @property
    def twiddled(self) -> bool:
        return self.header.twiddled

    @property
    def mipmapped(self) -> bool:
        return self.header.mipmapped


def parse_header(data: bytes) -> DtexHeader:
    """Read the DTEX header from the start of *data*."""
    if len(data) < HEADER_SIZE:
        raise DtexError(f"DTEX header needs {HEADER_SIZE} bytes, got {len(data)}")
    ident, width, height, type_flags, size = _HEADER.unpack_from(data, 0)
    return DtexHeader(ident, width, height, type_flags, size)


def _invalid(header: DtexHeader) -> DtexError:
    return DtexError(f"invalid texture format {header.type}")


def vq_internal_format(header: DtexHeader) -> KosEnum:
    """Return the VQ internal format of a compressed texture."""
    if not header.compressed:
        raise DtexError("not a compressed texture")
    table = _VQ_FORMATS.get(header.pixel_format)
    if table is None:
        raise _invalid(header)
    return table[(header.twiddled, header.mipmapped)]


def decode_formats(header: DtexHeader) -> DtexFormats:
    """Work out the internal and transfer formats for a texture."""
    if header.compressed:
        return DtexFormats(vq_internal_format(header))

    fmt = header.pixel_format
    if fmt == ARGB1555:
        return DtexFormats(
            KosEnum.ARGB1555_TWID, GL_BGRA, KosEnum.UNSIGNED_SHORT_1_5_5_5_REV_TWID
        )
    if fmt == RGB565:
        return DtexFormats(
            KosEnum.RGB565_TWID, GL_RGB, KosEnum.UNSIGNED_SHORT_5_6_5_TWID
        )
    if fmt == ARGB4444:
        return DtexFormats(
            KosEnum.ARGB4444_TWID, GL_BGRA, KosEnum.UNSIGNED_SHORT_4_4_4_4_REV_TWID
        )
    raise _invalid(header)


def parse_dtex(data: bytes) -> DtexImage:
    """Decode a whole DTEX file held in *data*."""
    data = bytes(data)
    header = parse_header(data)
    payload = data[HEADER_SIZE:HEADER_SIZE + header.size]
    if len(payload) != header.size:
        raise DtexError(
            f"texture data is {len(payload)} bytes, header says {header.size}"
        )
    return DtexImage(header, decode_formats(header), payload)


def load_dtex(path: str | os.PathLike[str]) -> DtexImage:
    """Read and decode the DTEX file at *path*."""
    with open(path, "rb") as handle:
        return parse_dtex(handle.read())