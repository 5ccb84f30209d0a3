"""Escape-count to colour mapping."""

from __future__ import annotations

import numpy as np
from matplotlib.colors import hsv_to_rgb

BASE_HUE = 0.7
INSIDE_COLOR = 0x000000


def _pack(rgb: np.ndarray) -> np.ndarray:
    channels = np.floor(np.asarray(rgb, dtype=np.float64) * 255.0 + 0.5).astype(np.uint32)
    channels = np.clip(channels, 0, 255)
    return (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]


def _wrap_hue(hue):
    return hue - np.floor(hue)


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> int:
    """Convert one HSB colour to a packed ``0xRRGGBB`` integer.

    Hue is circular and wraps modulo 1; saturation and brightness are
    expected in ``[0, 1]``.
    """

    hsv = np.array([_wrap_hue(np.float64(hue)), saturation, brightness], dtype=np.float64)
    return int(_pack(hsv_to_rgb(hsv)))


def colorize(iterations: np.ndarray, max_iterations: int) -> np.ndarray:
    """Map an array of escape counts to packed RGB values.

    Points that reached ``max_iterations`` are in the set and painted black;
    every escaped point gets full saturation and brightness with a hue
    offset by its normalised escape count.
    """

    iterations = np.asarray(iterations)
    if iterations.size == 0 or max_iterations <= 0:
        return np.zeros(iterations.shape, dtype=np.uint32)

    inside = iterations >= max_iterations
    hue = _wrap_hue(BASE_HUE + iterations.astype(np.float64) / max_iterations)
    hsv = np.stack((hue, np.ones_like(hue), np.ones_like(hue)), axis=-1)
    packed = _pack(hsv_to_rgb(hsv))
    return np.where(inside, np.uint32(INSIDE_COLOR), packed).astype(np.uint32)
