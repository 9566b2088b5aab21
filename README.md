# hsicompress

Lossy compression of hyperspectral images (HSI) by matching pixels against a
growing set of reference spectra.

The input is an ENVI-style pair of files: a text `.hdr` header and a raw data
file holding signed 16-bit samples in band-interleaved-by-pixel order, little-
or big-endian as the header's `byte order` says.

## Modules

* `hsicompress.header` — `read_hdr_file(path)` parses the `key = value` lines
  of a header file into an `HsiHeader` dataclass (`samples`, `lines`, `bands`,
  `data_type`, `interleave`, `byte_order`, `header_offset`, and the derived
  `total_pixels`). Keys not present keep the value `0` (or `""` for
  `interleave`).
* `hsicompress.loader` — `load_hsi_data(path, header)` skips
  `header.header_offset` bytes and returns a list of pixels, each a tuple of
  `header.bands` int16 values. When `byte_order` is `1`, each value is
  byte-swapped.
* `hsicompress.compressor` — `calculate_mse`, `CompressionSettings`,
  `MatchResult`, `CompressedImage` and `compress`.

## How compression works

Every pixel is compared with the references found so far, using
`calculate_mse`: the square root of the mean squared difference over all
bands.

* If no main reference is within `settings.main_error`, the pixel becomes a new
  main reference. Its `MatchResult` has `main` equal to the new number of main
  references, `additional` equal to `0` and `mse` equal to `-1.0`.
* Otherwise the closest main reference is chosen, and the pixel is compared
  with every spectrum held under it (the main reference included). If one is
  within `settings.additional_error`, the result points at it and carries the
  error. If none is, the pixel is appended to that reference as a new
  additional spectrum, with `mse` equal to `-1.0`.

`compress` skips pixels whose first band value is `0` or `-1`, treating them as
fill values. The returned `CompressedImage` holds the references in
`standards` (one list of spectra per main reference) and one `MatchResult` per
compressed pixel in `results`; `num_ref`, `ref_counts` and `size` summarise
them.

The default `CompressionSettings()` uses a main error limit of 26000 and an
additional error limit of 21000.

## Example

```python
from hsicompress.header import read_hdr_file
from hsicompress.loader import load_hsi_data
from hsicompress.compressor import CompressionSettings, compress

header = read_hdr_file("scene.hdr")
pixels = load_hsi_data("scene.gsd", header)

settings = CompressionSettings(main_error=26000, additional_error=21000)
image = compress(pixels, settings)

print(image.num_ref, image.ref_counts, image.size)
for result in image.results[:5]:
    print(result.main, result.additional, result.mse)
```

## Errors

`hsicompress.header.HsiError` is raised when a header or data file cannot be
opened, when the data type is not `2` (16-bit signed integers), when the
number of bands is less than one, or when the data file is shorter than the
header describes. `calculate_mse` raises `ValueError` for pixels of different
lengths or with no bands.

## What the package does not do

The package has no command-line program, and it does not write the compressed
result to disk: the references and per-pixel results are available only as
the in-memory `CompressedImage`, and storing them is left to the caller.

## Installation and tests

```
pip install .[test]
pytest
```