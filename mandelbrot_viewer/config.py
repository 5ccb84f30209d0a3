"""Default configuration for Mandelbrot renders and the viewer."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_ZOOM_FACTOR = 0.8
TARGET_FPS = 60


@dataclass(frozen=True)
class RenderConfig:
    """Settings shared by the window, the headless render and the benchmark."""

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    zoom_factor: float = DEFAULT_ZOOM_FACTOR
    target_fps: int = TARGET_FPS
    output: str = "mandelbrot.png"
    image_format: str = "png"

    @property
    def frame_interval_ms(self) -> int:
        return max(1, 1000 // max(self.target_fps, 1))
