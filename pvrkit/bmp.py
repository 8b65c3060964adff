"""Loader for uncompressed 24-bit, single-plane bitmap files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

_OFFSET_AT = 10
_WIDTH_AT = 18
_HEIGHT_AT = 22
_PLANES_AT = 26
_BPP_AT = 28


class BmpError(ValueError):
    """Raised when bitmap data cannot be read."""


@dataclass(frozen=True)
class BmpImage:
    """A decoded bitmap: width, height and tightly packed RGB bytes."""

    width: int
    height: int
    data: bytes


def _read(data: bytes, fmt: str, at: int, what: str) -> int:
    size = struct.calcsize(fmt)
    if len(data) < at + size:
        raise BmpError(f"error reading {what}")
    return struct.unpack_from(fmt, data, at)[0]


def parse_bmp(data: bytes) -> BmpImage:
    """Decode a 24-bit bitmap, converting its BGR pixels to RGB.

    Rows are taken as tightly packed, three bytes per pixel, starting at
    the pixel-data offset the file header gives.
    """
    data = bytes(data)
    width = _read(data, "<i", _WIDTH_AT, "width")
    height = _read(data, "<i", _HEIGHT_AT, "height")
    if width < 0 or height < 0:
        raise BmpError(f"unsupported image dimensions {width} x {height}")

    planes = _read(data, "<h", _PLANES_AT, "planes")
    if planes != 1:
        raise BmpError(f"planes is not 1: {planes}")
    bpp = _read(data, "<h", _BPP_AT, "bpp")
    if bpp != 24:
        raise BmpError(f"bpp is not 24: {bpp}")

    offset = _read(data, "<I", _OFFSET_AT, "pixel data offset")
    size = width * height * 3
    raw = data[offset:offset + size]
    if size == 0 or len(raw) != size:
        raise BmpError("error reading image data")

    pixels = bytearray(raw)
    pixels[0::3] = raw[2::3]
    pixels[2::3] = raw[0::3]
    return BmpImage(width, height, bytes(pixels))


def load_bmp(path: str | os.PathLike[str]) -> BmpImage:
    """Read and decode the bitmap file at *path*."""
    with open(path, "rb") as handle:
        return parse_bmp(handle.read())