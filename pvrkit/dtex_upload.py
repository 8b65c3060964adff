"""Choose the upload formats for a DTEX texture in a single table lookup.

Each pixel format has a table indexed by the compressed, twiddled and
mipmapped flags of the header. Compressed textures map to the VQ internal
formats. Uncompressed ones map to a transfer type. A combination that has
no entry cannot be uploaded.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import KosEnum
from .dtex import ARGB1555, ARGB4444, GL_BGRA, GL_RGB, RGB565, DtexError, DtexHeader

GL_RGBA = 0x1908
GL_UNSIGNED_SHORT_5_6_5 = 0x8363
GL_UNSIGNED_SHORT_4_4_4_4_REV = 0x8365
GL_UNSIGNED_SHORT_1_5_5_5_REV = 0x8366

_COMPRESSED = 4
_TWIDDLED = 2
_MIPMAPPED = 1


def _table(
    vq: KosEnum,
    vq_twid: KosEnum,
    vq_mipmap: KosEnum,
    vq_mipmap_twid: KosEnum,
    twid: int,
    plain: int,
) -> dict[int, int]:
    return {
        _COMPRESSED: vq,
        _COMPRESSED | _TWIDDLED: vq_twid,
        _COMPRESSED | _MIPMAPPED: vq_mipmap,
        _COMPRESSED | _TWIDDLED | _MIPMAPPED: vq_mipmap_twid,
        _TWIDDLED: twid,
        _TWIDDLED | _MIPMAPPED: twid,
        0: plain,
    }


_LOOKUP: dict[int, dict[int, int]] = {
    ARGB1555: _table(
        KosEnum.COMPRESSED_ARGB_1555_VQ,
        KosEnum.COMPRESSED_ARGB_1555_VQ_TWID,
        KosEnum.COMPRESSED_ARGB_1555_VQ_MIPMAP,
        KosEnum.COMPRESSED_ARGB_1555_VQ_MIPMAP_TWID,
        KosEnum.UNSIGNED_SHORT_1_5_5_5_REV_TWID,
        GL_UNSIGNED_SHORT_1_5_5_5_REV,
    ),
    RGB565: _table(
        KosEnum.COMPRESSED_RGB_565_VQ,
        KosEnum.COMPRESSED_RGB_565_VQ_TWID,
        KosEnum.COMPRESSED_RGB_565_VQ_MIPMAP,
        KosEnum.COMPRESSED_RGB_565_VQ_MIPMAP_TWID,
        KosEnum.UNSIGNED_SHORT_5_6_5_TWID,
        GL_UNSIGNED_SHORT_5_6_5,
    ),
    ARGB4444: _table(
        KosEnum.COMPRESSED_ARGB_4444_VQ,
        KosEnum.COMPRESSED_ARGB_4444_VQ_TWID,
        KosEnum.COMPRESSED_ARGB_4444_VQ_MIPMAP,
        KosEnum.COMPRESSED_ARGB_4444_VQ_MIPMAP_TWID,
        KosEnum.UNSIGNED_SHORT_4_4_4_4_REV_TWID,
        GL_UNSIGNED_SHORT_4_4_4_4_REV,
    ),
}


@dataclass(frozen=True)
class UploadFormat:
    """The format, internal format and type to hand to a texture upload."""

    format: int
    internal_format: int
    type: int


def upload_format(header: DtexHeader) -> UploadFormat:
    """Look up how to upload the texture that *header* describes."""
    fmt = header.pixel_format
    table = _LOOKUP.get(fmt)
    if table is None:
        raise DtexError(f"unknown texture format {fmt}")

    key = (
        (_COMPRESSED if header.compressed else 0)
        | (_TWIDDLED if header.twiddled else 0)
        | (_MIPMAPPED if header.mipmapped else 0)
    )
    texture_type = table.get(key)
    if texture_type is None:
        raise DtexError(
            f"no upload type for format {fmt} with flags "
            f"compressed={header.compressed} twiddled={header.twiddled} "
            f"mipmapped={header.mipmapped}"
        )

    if fmt == RGB565:
        return UploadFormat(GL_RGB, GL_RGB, texture_type)
    return UploadFormat(GL_BGRA, GL_RGBA, texture_type)