"""Similarity scoring for one pair of images."""

import time
from dataclasses import dataclass

import numpy as np

from .config import SCORE_SCALE
from .decoder import decode_image
from .hashing import compute_fingerprints, hamming_distance


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two images."""

    score: float  # max(average_distance, difference_distance) / SCORE_SCALE
    elapsed_ms: float  # whole milliseconds
    average_distance: int
    difference_distance: int

    @property
    def distance(self) -> int:
        return max(self.average_distance, self.difference_distance)

    def score_cells(self) -> tuple[str, str]:
        """The two cells appended to a results row."""
        return format_decimal(self.score), format_decimal(self.elapsed_ms)


def format_decimal(value: float) -> str:
    """Shortest positional decimal text: 0.0 -> '0', 0.12 -> '0.12', 3.0 -> '3'."""
    return np.format_float_positional(value, trim="-")


def compare_images(path_a: str, path_b: str) -> ComparisonResult:
    """
    Compare two images by average hash and difference hash.

    The score is the larger of the two Hamming distances divided by
    SCORE_SCALE, so images only score as similar when both hashes agree.
    Elapsed time covers decoding through distance computation.

    Raises UnsupportedFormat or DecodeError from either image.
    """
    start = time.perf_counter()

    fp_a = compute_fingerprints(decode_image(path_a))
    fp_b = compute_fingerprints(decode_image(path_b))

    average_distance = hamming_distance(fp_a.average, fp_b.average)
    difference_distance = hamming_distance(fp_a.difference, fp_b.difference)
    distance = max(average_distance, difference_distance)

    elapsed_ms = float(int((time.perf_counter() - start) * 1000))
    return ComparisonResult(
        score=distance / SCORE_SCALE,
        elapsed_ms=elapsed_ms,
        average_distance=average_distance,
        difference_distance=difference_distance,
    )
