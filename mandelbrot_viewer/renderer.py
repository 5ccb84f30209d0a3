"""Escape-time rendering of the Mandelbrot set."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

import numpy as np
import tensorflow as tf

from .colors import colorize
from .config import DEFAULT_MAX_ITERATIONS
from .logs import log
from .viewport import Viewport

HORIZON = 2.0
DEVICE = "/CPU:0"


@dataclass(frozen=True)
class Complex:
    """Immutable complex value used by the scalar escape-time iteration."""

    re: float
    im: float

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)


@dataclass(frozen=True)
class SamplingMetadata:
    """Metadata describing the sampling grid for a rendered frame."""

    x_min: float
    y_min: float
    x_step: float
    y_step: float
    x_res: int
    y_res: int


@dataclass(frozen=True)
class RenderResult:
    """Pixel buffer and escape counts of a single render."""

    pixels: np.ndarray
    iterations: np.ndarray
    metadata: SamplingMetadata
    max_iterations: int


def escape_time(c: Complex, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> int:
    """Count iterations of ``z = z*z + c`` from zero until ``|z| > 2``."""

    z = Complex(0.0, 0.0)
    n = 0
    while z.magnitude() <= HORIZON and n < max_iterations:
        z = z.multiply(z).add(c)
        n += 1
    return n


@tf.function
def _mandelbrot_step(
    zr: tf.Tensor, zi: tf.Tensor, cr: tf.Tensor, ci: tf.Tensor, ns: tf.Tensor, active: tf.Tensor
) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor, tf.Tensor]:
    """Advance every point that is still bounded by one iteration."""

    zr_new = (zr * zr - zi * zi) + cr
    zi_new = (zr * zi + zi * zr) + ci
    zr = tf.where(active, zr_new, zr)
    zi = tf.where(active, zi_new, zi)
    ns = ns + tf.cast(active, tf.int32)
    magnitude = tf.sqrt(zr * zr + zi * zi)
    horizon = tf.constant(HORIZON, dtype=magnitude.dtype)
    active = tf.logical_and(active, magnitude <= horizon)
    return zr, zi, ns, active


@tf.function(reduce_retracing=True)
def _mandelbrot_run(cr: tf.Tensor, ci: tf.Tensor, max_iterations: tf.Tensor) -> tf.Tensor:
    """Iterate the whole grid with a TensorFlow while loop and return the counts."""

    max_iterations = tf.cast(max_iterations, tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    zr = tf.zeros_like(cr)
    zi = tf.zeros_like(ci)
    ns = tf.zeros_like(cr, dtype=tf.int32)
    active = tf.ones_like(ns, dtype=tf.bool)

    def cond(i, zr, zi, ns, active):
        return tf.logical_and(tf.less(i, max_iterations), tf.reduce_any(active))

    def body(i, zr, zi, ns, active):
        zr, zi, ns, active = _mandelbrot_step(zr, zi, cr, ci, ns, active)
        return i + 1, zr, zi, ns, active

    _, _, _, ns, _ = tf.while_loop(cond, body, (i, zr, zi, ns, active))
    return ns


def _compute_metadata(viewport: Viewport, width: int, height: int) -> SamplingMetadata:
    x_res = max(int(width), 0)
    y_res = max(int(height), 0)
    x_step = (viewport.x_max - viewport.x_min) / x_res if x_res else 0.0
    y_step = (viewport.y_max - viewport.y_min) / y_res if y_res else 0.0
    return SamplingMetadata(
        x_min=float(viewport.x_min),
        y_min=float(viewport.y_min),
        x_step=float(x_step),
        y_step=float(y_step),
        x_res=x_res,
        y_res=y_res,
    )


def sample_grid(viewport: Viewport, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """Return the real and imaginary coordinate grids, shape ``(height, width)``."""

    px = np.arange(width, dtype=np.float64)
    py = np.arange(height, dtype=np.float64)
    x = np.float64(viewport.x_min) + px * (np.float64(viewport.x_max) - np.float64(viewport.x_min)) / np.float64(width)
    y = np.float64(viewport.y_min) + py * (np.float64(viewport.y_max) - np.float64(viewport.y_min)) / np.float64(height)
    return np.meshgrid(x, y)


def render_frame(
    viewport: Viewport,
    width: int,
    height: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RenderResult:
    """Render ``viewport`` into a ``height x width`` buffer of packed RGB values."""

    metadata = _compute_metadata(viewport, width, height)
    if metadata.x_res == 0 or metadata.y_res == 0:
        empty = np.zeros((0, 0), dtype=np.uint32)
        return RenderResult(
            pixels=empty,
            iterations=np.zeros((0, 0), dtype=np.int32),
            metadata=metadata,
            max_iterations=max_iterations,
        )

    X, Y = sample_grid(viewport, metadata.x_res, metadata.y_res)

    with tf.device(DEVICE):
        cr = tf.convert_to_tensor(X, dtype=tf.float64)
        ci = tf.convert_to_tensor(Y, dtype=tf.float64)
        ns = _mandelbrot_run(cr, ci, tf.constant(max_iterations, dtype=tf.int32))

    iterations = ns.numpy()
    return RenderResult(
        pixels=colorize(iterations, max_iterations),
        iterations=iterations,
        metadata=metadata,
        max_iterations=max_iterations,
    )


def render(
    viewport: Viewport,
    width: int,
    height: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> np.ndarray:
    return render_frame(viewport, width, height, max_iterations).pixels


def render_bounds(
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    width: int,
    height: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> np.ndarray:
    """Render an explicit rectangle of the plane without a long-lived viewport."""

    return render(Viewport(x_min, x_max, y_min, y_max), width, height, max_iterations)


def timed_render(
    viewport: Viewport,
    width: int,
    height: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RenderResult:
    start = time.perf_counter()
    result = render_frame(viewport, width, height, max_iterations)
    log(f"Render time: {int((time.perf_counter() - start) * 1000)} ms")
    return result
