import struct

import pytest

from pvrkit.bmp import BmpError, BmpImage, load_bmp, parse_bmp


def make_bmp(width, height, pixels, planes=1, bpp=24, offset=54):
    header = b"BM" + struct.pack("<I", 54 + len(pixels)) + b"\0" * 4
    header += struct.pack("<I", offset)
    header += struct.pack("<Iiihh", 40, width, height, planes, bpp)
    header += b"\0" * 24
    return header + b"\0" * (offset - len(header)) + pixels


def test_pixels_directly_after_54_byte_header():
    data = make_bmp(1, 1, bytes([1, 2, 3]))
    assert len(data) == 57
    assert parse_bmp(data).data == bytes([3, 2, 1])


def test_bgr_is_swapped_to_rgb():
    image = parse_bmp(make_bmp(2, 1, bytes([1, 2, 3, 4, 5, 6])))
    assert image == BmpImage(2, 1, bytes([3, 2, 1, 6, 5, 4]))


def test_pixel_offset_is_honoured():
    pixels = bytes([10, 20, 30])
    image = parse_bmp(make_bmp(1, 1, pixels, offset=64))
    assert image.data == bytes([30, 20, 10])


def test_data_length_matches_dimensions():
    width, height = 3, 2
    pixels = bytes(range(width * height * 3))
    image = parse_bmp(make_bmp(width, height, pixels))
    assert len(image.data) == width * height * 3
    assert (image.width, image.height) == (width, height)
    assert image.data[1::3] == pixels[1::3]


def test_wrong_planes():
    with pytest.raises(BmpError, match="planes"):
        parse_bmp(make_bmp(1, 1, b"\0\0\0", planes=2))


def test_wrong_bpp():
    with pytest.raises(BmpError, match="bpp"):
        parse_bmp(make_bmp(1, 1, b"\0\0\0\0", bpp=32))


def test_truncated_pixels():
    with pytest.raises(BmpError, match="image data"):
        parse_bmp(make_bmp(2, 2, b"\0" * 5))


def test_truncated_header():
    with pytest.raises(BmpError, match="width"):
        parse_bmp(b"BM" + b"\0" * 10)


def test_negative_dimensions():
    with pytest.raises(BmpError):
        parse_bmp(make_bmp(-1, 1, b"\0\0\0"))


def test_empty_image_is_an_error():
    with pytest.raises(BmpError):
        parse_bmp(make_bmp(0, 0, b""))


def test_load_from_file(tmp_path):
    path = tmp_path / "image.bmp"
    path.write_bytes(make_bmp(1, 1, bytes([7, 8, 9])))
    assert load_bmp(path).data == bytes([9, 8, 7])


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bmp(tmp_path / "missing.bmp")