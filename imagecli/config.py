"""Configuration - formats, hash sizes, and output constants."""

import os
from enum import Enum

VERSION = "2020.02.02"


class ImageFormat(Enum):
    """Supported raster formats, valued by their Pillow codec name."""

    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    WEBP = "WEBP"
    TIFF = "TIFF"


# Extensions are matched case-insensitively, never by magic bytes
EXTENSION_TO_FORMAT = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
    ".gif": ImageFormat.GIF,
    ".bmp": ImageFormat.BMP,
    ".webp": ImageFormat.WEBP,
    ".tiff": ImageFormat.TIFF,
}

# Fingerprint grid: 8x8 for average hash, 9x8 for difference hash (64 bits each)
HASH_SIZE = 8

# Distance is divided by this before being reported.
# Not the bit length: kept as-is so scores match earlier results files.
SCORE_SCALE = 100.0

# Job table format
DELIMITER = " "
RESULTS_SUFFIX = "results.csv"
RESULT_COLUMNS = ("Similar", "Elapsed")

# Written in the score cell of a row that could not be compared
ERROR_CELL = "ERROR"

# 1 = rows compared in order in this process; 0 = one worker per spare core
DEFAULT_WORKERS = 1


def resolve_workers(workers: int) -> int:
    """Turn a --workers value into a concrete process count."""
    if workers < 0:
        raise ValueError(f"workers must be >= 0, got {workers}")
    if workers == 0:
        return max(1, (os.cpu_count() or 1) - 2)
    return workers
