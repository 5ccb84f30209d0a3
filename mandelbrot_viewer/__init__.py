"""Public API for the Mandelbrot viewer."""

from .benchmark import BenchmarkRow, benchmark_sizes, run_benchmark
from .colors import colorize, hsb_to_rgb
from .config import RenderConfig
from .controls import Action, KEY_BINDINGS, action_for_key, apply_action
from .export import buffer_to_image, save_image
from .renderer import (
    Complex,
    RenderResult,
    SamplingMetadata,
    escape_time,
    render,
    render_bounds,
    render_frame,
)
from .scheduler import RenderScheduler
from .viewport import DEFAULT_BOUNDS, Viewport

__all__ = [
    "Action",
    "BenchmarkRow",
    "Complex",
    "DEFAULT_BOUNDS",
    "KEY_BINDINGS",
    "RenderConfig",
    "RenderResult",
    "RenderScheduler",
    "SamplingMetadata",
    "Viewport",
    "action_for_key",
    "apply_action",
    "benchmark_sizes",
    "buffer_to_image",
    "colorize",
    "escape_time",
    "hsb_to_rgb",
    "render",
    "render_bounds",
    "render_frame",
    "run_benchmark",
    "save_image",
]
