import struct

import pytest

from msdfkit.bitmap import Bitmap, PixelType
from msdfkit.save_tiff import encode_tiff, save_tiff


def _entries(data):
    (count,) = struct.unpack_from("<H", data, 8)
    result = {}
    for index in range(count):
        tag, field_type, n = struct.unpack_from("<HHI", data, 10 + 12 * index)
        value = data[10 + 12 * index + 8 : 10 + 12 * index + 12]
        result[tag] = (field_type, n, value)
    return count, result


def _long(value):
    return struct.unpack("<I", value)[0]


def _short(value):
    return struct.unpack("<H", value[:2])[0]


def test_file_header():
    data = encode_tiff(Bitmap(2, 3, 1))
    assert data[:2] == b"II"
    byte_order, magic, ifd_offset = struct.unpack_from("<HHI", data, 0)
    assert byte_order == 0x4949
    assert magic == 42
    assert ifd_offset == 8
    count, _ = _entries(data)
    assert count == 15


@pytest.mark.parametrize("channels", [1, 3, 4])
def test_dimensions_and_strip(channels):
    bitmap = Bitmap(5, 2, channels)
    data = encode_tiff(bitmap)
    _, entries = _entries(data)
    assert struct.unpack("<i", entries[0x0100][2])[0] == 5
    assert struct.unpack("<i", entries[0x0101][2])[0] == 2
    assert _short(entries[0x0115][2]) == channels
    strip_offset = _long(entries[0x0111][2])
    strip_size = struct.unpack("<i", entries[0x0117][2])[0]
    assert strip_size == 4 * channels * 5 * 2
    assert len(data) == strip_offset + strip_size


@pytest.mark.parametrize("channels, photometric", [(1, 1), (3, 2), (4, 2)])
def test_photometric_interpretation(channels, photometric):
    _, entries = _entries(encode_tiff(Bitmap(1, 1, channels)))
    assert _short(entries[0x0106][2]) == photometric


def test_single_channel_values_are_inline():
    _, entries = _entries(encode_tiff(Bitmap(1, 1, 1)))
    assert _short(entries[0x0102][2]) == 32
    assert _short(entries[0x0153][2]) == 3
    assert struct.unpack("<f", entries[0x0154][2])[0] == 0.0
    assert struct.unpack("<f", entries[0x0155][2])[0] == 1.0


@pytest.mark.parametrize("channels", [3, 4])
def test_multi_channel_values_follow_offsets(channels):
    data = encode_tiff(Bitmap(1, 1, channels))
    _, entries = _entries(data)
    bits = struct.unpack_from(f"<{channels}H", data, _long(entries[0x0102][2]))
    formats = struct.unpack_from(f"<{channels}H", data, _long(entries[0x0153][2]))
    minima = struct.unpack_from(f"<{channels}f", data, _long(entries[0x0154][2]))
    maxima = struct.unpack_from(f"<{channels}f", data, _long(entries[0x0155][2]))
    assert bits == (32,) * channels
    assert formats == (3,) * channels
    assert minima == (0.0,) * channels
    assert maxima == (1.0,) * channels


@pytest.mark.parametrize("channels", [1, 3, 4])
def test_resolution_is_300_per_inch(channels):
    data = encode_tiff(Bitmap(1, 1, channels))
    _, entries = _entries(data)
    assert struct.unpack_from("<II", data, _long(entries[0x011A][2])) == (300, 1)
    assert struct.unpack_from("<II", data, _long(entries[0x011B][2])) == (300, 1)
    assert _short(entries[0x0128][2]) == 2


def test_pixel_rows_are_written_last_row_first():
    values = [0.0, 0.25, 0.5, 0.75, 1.0, 0.125]
    bitmap = Bitmap(2, 3, 1, PixelType.FLOAT, values)
    data = encode_tiff(bitmap)
    _, entries = _entries(data)
    offset = _long(entries[0x0111][2])
    stored = struct.unpack_from("<6f", data, offset)
    rows = [values[0:2], values[2:4], values[4:6]]
    assert list(stored) == rows[2] + rows[1] + rows[0]


def test_rejects_byte_bitmap():
    with pytest.raises(ValueError):
        encode_tiff(Bitmap(1, 1, 3, PixelType.BYTE))


def test_rejects_two_channels():
    with pytest.raises(ValueError):
        encode_tiff(Bitmap(1, 1, 2))


def test_save_writes_encoded_contents(tmp_path):
    bitmap = Bitmap(2, 2, 4, PixelType.FLOAT, [0.5] * 16)
    path = tmp_path / "out.tiff"
    save_tiff(bitmap, path)
    assert path.read_bytes() == encode_tiff(bitmap)