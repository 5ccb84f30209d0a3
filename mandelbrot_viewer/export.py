"""Writing rendered buffers to image files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import PIL.Image

from .logs import log

DEFAULT_OUTPUT = "mandelbrot.png"


def _pil_format_name(ext: str) -> str:
    upper = ext.upper().lstrip(".")
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def buffer_to_array(pixels: np.ndarray) -> np.ndarray:
    """Unpack ``0xRRGGBB`` values into a ``(height, width, 3)`` uint8 array."""

    pixels = np.asarray(pixels, dtype=np.uint32)
    rgb = np.stack(((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1)
    return rgb.astype(np.uint8)


def buffer_to_image(pixels: np.ndarray) -> PIL.Image.Image:
    return PIL.Image.fromarray(buffer_to_array(pixels))


def save_image(pixels: np.ndarray, path=DEFAULT_OUTPUT, image_format: str = "png") -> bool:
    """Encode ``pixels`` and write them to ``path``.

    Failures are logged and reported through the return value; the caller
    keeps running either way.
    """

    output_path = Path(path).expanduser()
    if np.asarray(pixels).size == 0:
        log(f"Nothing to save to {output_path}: the buffer is empty.", "error")
        return False

    try:
        image = buffer_to_image(pixels)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(str(output_path), format=_pil_format_name(image_format))
    except (OSError, ValueError, KeyError) as exc:
        log(f"Failed to save the image to {output_path}: {exc}", "error")
        return False

    log(f"Image saved to {output_path.resolve()}", "success")
    return True
