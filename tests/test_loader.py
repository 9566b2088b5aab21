import struct

import pytest

from hsicompress.header import HsiError, HsiHeader
from hsicompress.loader import load_hsi_data


def _header(**overrides):
    fields = dict(samples=2, lines=2, bands=2, data_type=2, byte_order=0, header_offset=0)
    fields.update(overrides)
    return HsiHeader(**fields)


def _pack(pixels, fmt):
    return b"".join(struct.pack(fmt, *pixel) for pixel in pixels)


def test_little_endian_round_trip(tmp_path):
    pixels = [(1, 2), (3, -4), (32767, -32768), (0, 100)]
    path = tmp_path / "data.gsd"
    path.write_bytes(_pack(pixels, "<2h"))
    assert load_hsi_data(path, _header()) == pixels


def test_big_endian_round_trip(tmp_path):
    pixels = [(258, 4660), (16, 32512), (1, 2), (0, 5)]
    path = tmp_path / "data.gsd"
    path.write_bytes(_pack(pixels, ">2h"))
    assert load_hsi_data(path, _header(byte_order=1)) == pixels


def test_header_offset_is_skipped(tmp_path):
    pixels = [(7, 8), (9, 10), (11, 12), (13, 14)]
    path = tmp_path / "data.gsd"
    path.write_bytes(b"\xff" * 6 + _pack(pixels, "<2h"))
    assert load_hsi_data(path, _header(header_offset=6)) == pixels


def test_extra_data_is_ignored(tmp_path):
    pixels = [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)]
    path = tmp_path / "data.gsd"
    path.write_bytes(_pack(pixels, "<2h"))
    assert load_hsi_data(path, _header()) == pixels[:4]


def test_wrong_data_type_raises(tmp_path):
    path = tmp_path / "data.gsd"
    path.write_bytes(b"\x00" * 16)
    with pytest.raises(HsiError):
        load_hsi_data(path, _header(data_type=4))


def test_missing_file_raises(tmp_path):
    with pytest.raises(HsiError):
        load_hsi_data(tmp_path / "absent.gsd", _header())


def test_short_file_raises(tmp_path):
    path = tmp_path / "data.gsd"
    path.write_bytes(b"\x00" * 10)
    with pytest.raises(HsiError):
        load_hsi_data(path, _header())