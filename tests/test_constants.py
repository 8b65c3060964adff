import pytest

from pvrkit.constants import (
    SHARED_TEXTURE_PALETTE_COUNT,
    KosEnum,
    shared_texture_palette,
)


@pytest.mark.parametrize(
    "value, member",
    [
        (0xEEE0, KosEnum.UNSIGNED_SHORT_5_6_5_TWID),
        (0xEEF1, KosEnum.COMPRESSED_ARGB_4444_VQ_MIPMAP_TWID),
        (0xEF3C, KosEnum.SHARED_TEXTURE_BANK),
        (0xEF51, KosEnum.TEXTURE_TWIDDLE),
    ],
)
def test_pinned_header_values(value, member):
    assert KosEnum(value) is member


def test_values_are_unique():
    assert all(KosEnum(member.value) is member for member in KosEnum)


def test_lookup_by_value():
    assert KosEnum(0xEF45) is KosEnum.ARGB1555_TWID


def test_first_palette():
    assert shared_texture_palette(0) == 0xEEFC


def test_last_palette():
    assert shared_texture_palette(63) == 0xEF3B


def test_palettes_are_consecutive_and_below_bank():
    targets = [shared_texture_palette(i) for i in range(SHARED_TEXTURE_PALETTE_COUNT)]
    assert all(b - a == 1 for a, b in zip(targets, targets[1:]))
    assert targets[-1] < KosEnum.SHARED_TEXTURE_BANK
    assert not set(targets) & {m.value for m in KosEnum}


@pytest.mark.parametrize("index", [-1, 64, 100])
def test_palette_out_of_range(index):
    with pytest.raises(ValueError):
        shared_texture_palette(index)