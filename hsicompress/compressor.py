"""Reference-based compression of hyperspectral pixels."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_INITIAL_MIN_MSE = 1000000.0
_SKIPPED_FIRST_VALUES = (-1, 0)


def calculate_mse(pixel1: Sequence[int], pixel2: Sequence[int]) -> float:
    """Return the root of the mean squared difference between two pixels."""
    if len(pixel1) != len(pixel2):
        raise ValueError("pixels have different numbers of bands")
    if not pixel1:
        raise ValueError("pixels have no bands")
    total = sum((a - b) ** 2 for a, b in zip(pixel1, pixel2))
    return math.sqrt(total / len(pixel1))


@dataclass
class CompressionSettings:
    """Error thresholds for matching pixels against references."""

    main_error: int = 26000
    additional_error: int = 21000


@dataclass(frozen=True)
class MatchResult:
    """How one pixel was encoded: reference indices and the error, or -1 if new."""

    main: int
    additional: int
    mse: float


@dataclass
class CompressedImage:
    """Reference pixels grouped under main references, plus per-pixel results."""

    standards: list[list[tuple[int, ...]]] = field(default_factory=list)
    results: list[MatchResult] = field(default_factory=list)

    @property
    def num_ref(self) -> int:
        return len(self.standards)

    @property
    def ref_counts(self) -> list[int]:
        return [len(group) for group in self.standards]

    @property
    def size(self) -> int:
        return len(self.results)

    def add_standard(self, pixel: Sequence[int]) -> MatchResult:
        """Start a new main reference from ``pixel``."""
        self.standards.append([tuple(pixel)])
        # The main index reported for a new reference is its count, not its index.
        return MatchResult(main=self.num_ref, additional=0, mse=-1.0)

    def add_internal_standard(self, pixel: Sequence[int], best_i: int) -> MatchResult:
        """Add ``pixel`` as an additional reference under main reference ``best_i``."""
        group = self.standards[best_i]
        new_j = len(group)
        group.append(tuple(pixel))
        return MatchResult(main=best_i, additional=new_j, mse=-1.0)

    def check_pixel(
        self, pixel: Sequence[int], settings: CompressionSettings
    ) -> MatchResult:
        """Match ``pixel`` against the references, adding one when nothing is close."""
        min_mse = _INITIAL_MIN_MSE
        best_i = -1
        for i, group in enumerate(self.standards):
            mse = calculate_mse(pixel, group[0])
            if mse < min_mse:
                min_mse, best_i = mse, i

        if best_i == -1 or min_mse > settings.main_error:
            return self.add_standard(pixel)

        min_additional_mse = _INITIAL_MIN_MSE
        best_j = -1
        for j, reference in enumerate(self.standards[best_i]):
            mse = calculate_mse(pixel, reference)
            if mse < min_additional_mse:
                min_additional_mse, best_j = mse, j

        if min_additional_mse <= settings.additional_error:
            return MatchResult(main=best_i, additional=best_j, mse=min_additional_mse)
        return self.add_internal_standard(pixel, best_i)


def compress(
    pixels: Iterable[Sequence[int]], settings: CompressionSettings
) -> CompressedImage:
    """Compress pixels, skipping those whose first value is -1 or 0."""
    image = CompressedImage()
    for pixel in pixels:
        if pixel[0] in _SKIPPED_FIRST_VALUES:
            continue
        image.results.append(image.check_pixel(pixel, settings))
    return image