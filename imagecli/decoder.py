"""Image decoding: extension dispatch and canonical RGB conversion."""

from pathlib import Path

import numpy as np
from PIL import Image

from .config import EXTENSION_TO_FORMAT, ImageFormat
from .errors import DecodeError, UnsupportedFormat


def image_format(path) -> ImageFormat:
    """
    Map an image path to its format using the file extension only.

    Raises UnsupportedFormat for unknown or missing extensions. The file
    itself is never touched.
    """
    ext = Path(path).suffix.lower()
    fmt = EXTENSION_TO_FORMAT.get(ext)
    if fmt is None:
        raise UnsupportedFormat(str(path), ext)
    return fmt


def _to_8bit(img: Image.Image) -> Image.Image:
    """
    Scale high bit-depth grayscale down to 8 bits.

    convert() clips I;16, I and F samples at 255 instead of scaling them, so
    integer modes keep their high byte and float samples are clipped to 0-255.
    """
    if img.mode.startswith("I"):
        arr = np.clip(np.asarray(img, dtype=np.int64), 0, 65535) >> 8
        return Image.fromarray(arr.astype(np.uint8))
    if img.mode == "F":
        arr = np.clip(np.asarray(img, dtype=np.float64), 0, 255)
        return Image.fromarray(arr.astype(np.uint8))
    return img


def decode_image(path) -> Image.Image:
    """
    Decode an image file into a fully loaded 8-bit RGB image.

    Only the codec matching the extension is allowed to read the bytes, so a
    PNG saved as photo.jpg fails instead of being silently sniffed. For
    animated GIF/WebP the first frame is used. The file is closed before
    returning on every path.
    """
    fmt = image_format(path)

    try:
        with Image.open(path, formats=[fmt.value]) as img:
            img.load()
            if img.width <= 0 or img.height <= 0:
                raise DecodeError(str(path), f"empty image {img.size}")
            # convert() returns a new image that doesn't hold the file open
            return _to_8bit(img).convert("RGB")
    except DecodeError:
        raise
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(str(path), str(e) or type(e).__name__) from e
