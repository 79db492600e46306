"""Shared fixtures: small synthetic images written into tmp_path."""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from PIL import Image


def gradient_image(width: int = 64, height: int = 48, reverse: bool = False) -> Image.Image:
    """Horizontal gray ramp, dark on the left (bright on the left if reverse)."""
    ramp = np.linspace(0, 252, width).astype(np.uint8)
    if reverse:
        ramp = ramp[::-1]
    gray = np.tile(ramp, (height, 1))
    return Image.fromarray(np.stack([gray] * 3, axis=-1), "RGB")


def photo_image(width: int = 80, height: int = 60) -> Image.Image:
    """Something with structure in both directions and some colour."""
    y, x = np.mgrid[0:height, 0:width]
    r = (x * 255 // width).astype(np.uint8)
    g = (y * 255 // height).astype(np.uint8)
    b = (((x // 10) + (y // 10)) % 2 * 200).astype(np.uint8)
    return Image.fromarray(np.stack([r, g, b], axis=-1), "RGB")


@pytest.fixture
def gradient_png(tmp_path) -> Path:
    path = tmp_path / "gradient.png"
    gradient_image().save(path)
    return path


@pytest.fixture
def reversed_png(tmp_path) -> Path:
    path = tmp_path / "reversed.png"
    gradient_image(reverse=True).save(path)
    return path


@pytest.fixture
def photo_png(tmp_path) -> Path:
    path = tmp_path / "catA.png"
    photo_image().save(path)
    return path


@pytest.fixture
def write_job(tmp_path):
    """Write a job table from a list of rows and return its path."""
    def _write(rows, name="jobs.csv"):
        path = tmp_path / name
        path.write_text("".join(" ".join(str(c) for c in row) + "\n" for row in rows))
        return path
    return _write
