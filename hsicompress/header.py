"""Reading of hyperspectral image header (.hdr) files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

_INT_PREFIX = re.compile(r"[+-]?\d+")

# Keys are matched exactly as they appear before the '=' sign, trailing space included.
_INT_KEYS = {
    "samples ": "samples",
    "lines ": "lines",
    "bands ": "bands",
    "data type ": "data_type",
    "byte order ": "byte_order",
    "header offset ": "header_offset",
}
_INTERLEAVE_KEY = "interleave "


class HsiError(Exception):
    """Raised when hyperspectral image files cannot be read or are unsupported."""


@dataclass
class HsiHeader:
    """Parameters of a hyperspectral image as described by its header file."""

    samples: int = 0
    lines: int = 0
    bands: int = 0
    data_type: int = 0
    interleave: str = ""
    byte_order: int = 0
    header_offset: int = 0

    @property
    def total_pixels(self) -> int:
        return self.samples * self.lines


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text.lstrip())
    return int(match.group()) if match else 0


def read_hdr_file(hdr_path: str | PathLike[str]) -> HsiHeader:
    """Parse a ``key = value`` header file into an :class:`HsiHeader`."""
    try:
        with open(hdr_path, encoding="latin-1") as hdr_file:
            lines = hdr_file.readlines()
    except OSError as exc:
        raise HsiError(f"cannot open header file {hdr_path}: {exc}") from exc

    fields: dict[str, int | str] = {}
    for line in lines:
        tokens = [token for token in line.split("=") if token]
        if len(tokens) < 2:
            continue
        key, raw_value = tokens[0], tokens[1]
        value_tokens = raw_value.split()
        if not value_tokens:
            continue
        value = value_tokens[0]

        if key in _INT_KEYS:
            fields[_INT_KEYS[key]] = _atoi(value)
        elif key == _INTERLEAVE_KEY:
            fields["interleave"] = value[:3]

    return HsiHeader(**fields)