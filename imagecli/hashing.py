"""
Perceptual fingerprints: average hash and difference hash.

Both hashes reduce the RGB image with a box filter, convert the reduced grid
to 8-bit luma (Pillow "L": R*299/1000 + G*587/1000 + B*114/1000), and pack one
bit per cell in row-major order. Bit 0 is the most significant bit of the hex
string returned by str(hash).

The reduction is done here rather than through imagehash.average_hash /
imagehash.dhash, which resize with LANCZOS after converting to grayscale and
compare right-to-left for dhash. Scores must stay comparable with
existing results files.
"""

from typing import NamedTuple

import imagehash
import numpy as np
from PIL import Image

from .config import HASH_SIZE


class Fingerprints(NamedTuple):
    """Both fingerprint kinds for one image."""

    average: imagehash.ImageHash
    difference: imagehash.ImageHash


def _reduced_luma(image: Image.Image, width: int, height: int) -> np.ndarray:
    """Box-resample to width x height, then convert each cell to luma."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    small = image.resize((width, height), Image.Resampling.BOX)
    return np.asarray(small.convert("L"), dtype=np.float64)


def average_hash(image: Image.Image, hash_size: int = HASH_SIZE) -> imagehash.ImageHash:
    """
    Compute average hash (aHash).

    Bit i is set when cell i of the hash_size x hash_size grid is strictly
    brighter than the grid mean. A flat image hashes to all zeros.
    """
    pixels = _reduced_luma(image, hash_size, hash_size)
    return imagehash.ImageHash(pixels > pixels.mean())


def difference_hash(image: Image.Image, hash_size: int = HASH_SIZE) -> imagehash.ImageHash:
    """
    Compute difference hash (dHash).

    Uses a grid one column wider than tall. Bit i is set when a cell is
    strictly brighter than its right-hand neighbour in the same row.
    """
    pixels = _reduced_luma(image, hash_size + 1, hash_size)
    return imagehash.ImageHash(pixels[:, :-1] > pixels[:, 1:])


def compute_fingerprints(image: Image.Image, hash_size: int = HASH_SIZE) -> Fingerprints:
    """Compute both fingerprints from an already decoded image."""
    return Fingerprints(
        average=average_hash(image, hash_size),
        difference=difference_hash(image, hash_size),
    )


def hamming_distance(hash1: imagehash.ImageHash, hash2: imagehash.ImageHash) -> int:
    """
    Number of differing bits between two fingerprints.

    Lower distance = more similar images.
    """
    if hash1.hash.size != hash2.hash.size:
        raise ValueError(
            f"Fingerprint lengths differ: {hash1.hash.size} vs {hash2.hash.size}"
        )
    return int(hash1 - hash2)
