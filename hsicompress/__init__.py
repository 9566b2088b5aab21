"""Reference-based lossy compression of hyperspectral images: header parsing, int16 data loading and pixel matching."""

__version__ = "0.1.0"