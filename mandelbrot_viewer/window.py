"""Interactive matplotlib window for exploring the set."""

from __future__ import annotations

from typing import Callable, Optional

import matplotlib.pyplot as plt
import numpy as np

from .config import RenderConfig
from .controls import KEY_BINDINGS, Action, action_for_key, apply_action
from .export import buffer_to_array, save_image
from .logs import log
from .renderer import Complex, RenderResult, escape_time, timed_render
from .scheduler import RenderScheduler
from .viewport import Viewport

WINDOW_TITLE = "Mandelbrot Set Window"


def release_default_keymaps() -> None:
    """Remove viewer keys from matplotlib's built-in navigation shortcuts."""

    for name in list(plt.rcParams):
        if not name.startswith("keymap."):
            continue
        keys = plt.rcParams[name]
        kept = [key for key in keys if key not in KEY_BINDINGS]
        if len(kept) != len(keys):
            plt.rcParams[name] = kept


class ViewerWindow:
    """Displays the latest render and maps key presses to viewport changes.

    Renders run on the scheduler's worker thread. A canvas timer at the
    configured frame rate picks up finished buffers on the GUI thread.
    """

    def __init__(
        self,
        config: RenderConfig,
        viewport: Optional[Viewport] = None,
        scheduler: Optional[RenderScheduler] = None,
    ) -> None:
        self.config = config
        self.viewport = viewport if viewport is not None else Viewport()
        self.scheduler = scheduler if scheduler is not None else RenderScheduler()
        self.width = config.width
        self.height = config.height
        self._shown_generation = self.scheduler.generation
        self.displayed: Optional[RenderResult] = None

        release_default_keymaps()
        dpi = 100
        self.figure = plt.figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        manager = getattr(self.figure.canvas, "manager", None)
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)

        self.axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.axes.set_axis_off()
        self.image = self.axes.imshow(
            np.zeros((self.height, self.width, 3), dtype=np.uint8),
            interpolation="nearest",
        )
        self.axes.format_coord = self.format_coord

        canvas = self.figure.canvas
        canvas.mpl_connect("key_press_event", self.on_key)
        canvas.mpl_connect("resize_event", self.on_resize)
        self.timer = canvas.new_timer(interval=config.frame_interval_ms)
        self.timer.add_callback(self.refresh)
        self.timer.start()

        self.request_render()

    def request_render(self) -> bool:
        """Schedule a render of the current viewport; dropped if one is running."""

        accepted = self.scheduler.submit(
            timed_render,
            self.viewport.copy(),
            self.width,
            self.height,
            self.config.max_iterations,
        )
        if not accepted:
            log("Render already in progress, request dropped.")
        return accepted

    def refresh(self) -> bool:
        """Show the newest finished render, if it has not been shown yet.

        A render that failed on the worker thread is logged and the previous
        frame stays on screen.
        """

        error = self.scheduler.take_error()
        if error is not None:
            log(f"Render failed: {error!r}", "error")

        generation = self.scheduler.generation
        if generation == self._shown_generation:
            return False
        result = self.scheduler.result
        self._shown_generation = generation
        if result is None:
            return False
        self._display(result)
        return True

    def _display(self, result: RenderResult) -> None:
        if result.pixels.size == 0:
            return
        self.displayed = result
        height, width = result.pixels.shape
        self.image.set_data(buffer_to_array(result.pixels))
        self.image.set_extent((-0.5, width - 0.5, height - 0.5, -0.5))
        self.figure.canvas.draw_idle()

    def on_key(self, event) -> None:
        action = action_for_key(event.key)
        if action is None:
            return
        if action is Action.SAVE:
            self.save()
        else:
            apply_action(self.viewport, action, self.config.zoom_factor)
        self.request_render()

    def on_resize(self, event) -> None:
        width = int(getattr(event, "width", 0) or 0)
        height = int(getattr(event, "height", 0) or 0)
        if width <= 0 or height <= 0:
            return
        self.width, self.height = width, height
        self.request_render()

    def save(self, prompt: Callable[[str], str] = input) -> bool:
        """Ask for an output size, render it synchronously and write the image.

        Non-numeric answers raise ``ValueError``.
        """

        self.width = int(prompt("Enter image width: "))
        self.height = int(prompt("Enter image height: "))
        result = timed_render(self.viewport.copy(), self.width, self.height, self.config.max_iterations)
        self._display(result)
        return save_image(result.pixels, self.config.output, self.config.image_format)

    def format_coord(self, x: float, y: float) -> str:
        """Describe the point under the cursor in the frame currently shown."""

        if self.displayed is None:
            return ""
        metadata = self.displayed.metadata
        re = metadata.x_min + x * metadata.x_step
        im = metadata.y_min + y * metadata.y_step
        n = escape_time(Complex(re, im), self.displayed.max_iterations)
        return f"c = {re:.6g}{im:+.6g}i  n = {n}"

    def show(self) -> None:
        plt.show()

    def close(self) -> None:
        self.timer.stop()
        plt.close(self.figure)
