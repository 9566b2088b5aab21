"""Loading of band-interleaved-by-pixel int16 image data."""

from __future__ import annotations

import struct
from os import PathLike

from .header import HsiError, HsiHeader

INT16_DATA_TYPE = 2


def _swap_bytes(value: int) -> int:
    # The shift is done on the signed value, so a negative input keeps
    # its sign bits in the high byte; the result is truncated to int16.
    swapped = (value >> 8 | value << 8) & 0xFFFF
    return swapped - 0x10000 if swapped & 0x8000 else swapped


def load_hsi_data(
    dat_path: str | PathLike[str], header: HsiHeader
) -> list[tuple[int, ...]]:
    """Read all pixels of a BIP int16 data file described by ``header``."""
    try:
        with open(dat_path, "rb") as dat_file:
            dat_file.seek(header.header_offset)
            data = dat_file.read()
    except OSError as exc:
        raise HsiError(f"cannot open data file {dat_path}: {exc}") from exc

    if header.data_type != INT16_DATA_TYPE:
        raise HsiError(f"unsupported data type {header.data_type}, expected int16")
    if header.bands < 1:
        raise HsiError(f"invalid number of bands: {header.bands}")

    pixel_struct = struct.Struct(f"<{header.bands}h")
    needed = header.total_pixels * pixel_struct.size
    if len(data) < needed:
        raise HsiError(
            f"data file {dat_path} holds {len(data)} bytes, {needed} expected"
        )

    pixels = pixel_struct.iter_unpack(data[:needed])
    if header.byte_order == 1:
        return [tuple(_swap_bytes(value) for value in pixel) for pixel in pixels]
    return list(pixels)