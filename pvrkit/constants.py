"""Enumerants for the Dreamcast-specific texture formats and GL extensions.

All values sit in the 0xEEE0 onwards range, which the GL enum registry
leaves free for vendor use, so they never clash with standard GL constants.
"""

from __future__ import annotations

from enum import IntEnum

SHARED_TEXTURE_PALETTE_BASE = 0xEEFC
SHARED_TEXTURE_PALETTE_COUNT = 64


class KosEnum(IntEnum):
    """Vendor enumerants for twiddled, VQ-compressed and paletted textures."""

    # Twiddled uncompressed transfer types
    UNSIGNED_SHORT_5_6_5_TWID = 0xEEE0
    UNSIGNED_SHORT_1_5_5_5_REV_TWID = 0xEEE2
    UNSIGNED_SHORT_4_4_4_4_REV_TWID = 0xEEE3

    # VQ-compressed internal formats
    COMPRESSED_RGB_565_VQ = 0xEEE4
    COMPRESSED_ARGB_1555_VQ = 0xEEE6
    COMPRESSED_ARGB_4444_VQ = 0xEEE7

    COMPRESSED_RGB_565_VQ_TWID = 0xEEE8
    COMPRESSED_ARGB_1555_VQ_TWID = 0xEEEA
    COMPRESSED_ARGB_4444_VQ_TWID = 0xEEEB

    COMPRESSED_RGB_565_VQ_MIPMAP = 0xEEEC
    COMPRESSED_ARGB_1555_VQ_MIPMAP = 0xEEED
    COMPRESSED_ARGB_4444_VQ_MIPMAP = 0xEEEE

    COMPRESSED_RGB_565_VQ_MIPMAP_TWID = 0xEEEF
    COMPRESSED_ARGB_1555_VQ_MIPMAP_TWID = 0xEEF0
    COMPRESSED_ARGB_4444_VQ_MIPMAP_TWID = 0xEEF1

    NEARZ_CLIPPING = 0xEEFA

    # Texture parameter selecting which shared palette a texture uses
    SHARED_TEXTURE_BANK = 0xEF3C

    # Queries about texture memory
    FREE_TEXTURE_MEMORY = 0xEF3D
    USED_TEXTURE_MEMORY = 0xEF3E
    FREE_CONTIGUOUS_TEXTURE_MEMORY = 0xEF3F

    # Internal formats, also used for paletted textures
    RGB565 = 0xEF40
    ARGB4444 = 0xEF41
    ARGB1555 = 0xEF42
    RGB565_TWID = 0xEF43
    ARGB4444_TWID = 0xEF44
    ARGB1555_TWID = 0xEF45
    COLOR_INDEX8_TWID = 0xEF46
    COLOR_INDEX4_TWID = 0xEF47
    RGB_TWID = 0xEF48
    RGBA_TWID = 0xEF49

    TEXTURE_INTERNAL_FORMAT = 0xEF50

    # Capability: twiddle texture uploads where possible
    TEXTURE_TWIDDLE = 0xEF51


def shared_texture_palette(index: int) -> int:
    """Return the target enumerant for shared palette number *index* (0 to 63)."""
    if not 0 <= index < SHARED_TEXTURE_PALETTE_COUNT:
        raise ValueError(
            f"shared palette index {index} out of range 0..{SHARED_TEXTURE_PALETTE_COUNT - 1}"
        )
    return SHARED_TEXTURE_PALETTE_BASE + index