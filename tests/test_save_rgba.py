import struct

import pytest

from msdfkit.bitmap import Bitmap, PixelType
from msdfkit.pixel_conversion import pixel_float_to_byte
from msdfkit.save_rgba import encode_rgba, save_rgba


def test_header():
    data = encode_rgba(Bitmap(7, 3, 1, PixelType.BYTE))
    assert data[:4] == b"RGBA"
    assert struct.unpack_from(">II", data, 4) == (7, 3)
    assert len(data) == 12 + 4 * 7 * 3


def test_four_channel_bytes_round_trip_with_rows_reversed():
    pixels = list(range(16))
    bitmap = Bitmap(2, 2, 4, PixelType.BYTE, pixels)
    data = encode_rgba(bitmap)
    body = data[12:]
    assert body == bytes(pixels[8:16] + pixels[0:8])


def test_grey_is_expanded_and_opaque():
    bitmap = Bitmap(2, 1, 1, PixelType.BYTE, [9, 120])
    data = encode_rgba(bitmap)
    assert data[12:] == bytes([9, 9, 9, 255, 120, 120, 120, 255])


def test_rgb_gets_opaque_alpha():
    bitmap = Bitmap(1, 2, 3, PixelType.BYTE, [1, 2, 3, 4, 5, 6])
    data = encode_rgba(bitmap)
    assert data[12:] == bytes([4, 5, 6, 255, 1, 2, 3, 255])


def test_float_alpha_is_converted():
    values = [0.0, 0.5, 1.0, 0.25]
    bitmap = Bitmap(1, 1, 4, PixelType.FLOAT, values)
    data = encode_rgba(bitmap)
    assert data[12:] == bytes(pixel_float_to_byte(v) for v in values)


@pytest.mark.parametrize("channels", [1, 3, 4])
def test_float_matches_converted_bytes(channels):
    values = [(i % 5) / 4 for i in range(2 * 3 * channels)]
    floats = Bitmap(2, 3, channels, PixelType.FLOAT, values)
    converted = Bitmap(
        2, 3, channels, PixelType.BYTE, [pixel_float_to_byte(v) for v in values]
    )
    assert encode_rgba(floats) == encode_rgba(converted)


def test_rejects_two_channels():
    with pytest.raises(ValueError):
        encode_rgba(Bitmap(1, 1, 2, PixelType.BYTE))


def test_save_writes_encoded_contents(tmp_path):
    bitmap = Bitmap(3, 1, 3, PixelType.FLOAT, [0.5] * 9)
    path = tmp_path / "out.rgba"
    save_rgba(bitmap, path)
    assert path.read_bytes() == encode_rgba(bitmap)


def test_save_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_rgba(Bitmap(1, 1, 1), tmp_path / "missing" / "out.rgba")