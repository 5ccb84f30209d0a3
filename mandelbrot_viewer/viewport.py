"""The visible rectangle of the complex plane and its pan/zoom transforms."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

DEFAULT_BOUNDS = (-2.0, 1.0, -1.2, 1.2)
PAN_FRACTION = 0.1


def _pan_step(x_min: float, x_max: float) -> float:
    return PAN_FRACTION * (x_max - x_min)


@dataclass
class Viewport:
    """Bounds of the complex plane mapped onto the pixel buffer.

    ``pan_step`` is the plane distance covered by one pan action. It follows
    the horizontal extent but is only refreshed by :meth:`zoom` and
    :meth:`reset`, so panning never changes it. No validation is performed on
    the bounds: repeated zooming may produce degenerate ranges.
    """

    x_min: float = DEFAULT_BOUNDS[0]
    x_max: float = DEFAULT_BOUNDS[1]
    y_min: float = DEFAULT_BOUNDS[2]
    y_max: float = DEFAULT_BOUNDS[3]
    pan_step: float = field(init=False)

    def __post_init__(self) -> None:
        self.pan_step = _pan_step(self.x_min, self.x_max)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self.x_min, self.x_max, self.y_min, self.y_max

    @property
    def center(self) -> tuple[float, float]:
        return (self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2

    def copy(self) -> "Viewport":
        """Return an independent snapshot, keeping the current pan step."""

        snapshot = replace(self)
        snapshot.pan_step = self.pan_step
        return snapshot

    def pan(self, dx: int = 0, dy: int = 0) -> None:
        """Translate the bounds by ``dx``/``dy`` multiples of ``pan_step``."""

        if dx:
            shift = dx * self.pan_step
            self.x_min += shift
            self.x_max += shift
        if dy:
            shift = dy * self.pan_step
            self.y_min += shift
            self.y_max += shift

    def pan_left(self) -> None:
        self.pan(dx=-1)

    def pan_right(self) -> None:
        self.pan(dx=1)

    def pan_up(self) -> None:
        self.pan(dy=-1)

    def pan_down(self) -> None:
        self.pan(dy=1)

    def zoom(self, factor: float) -> None:
        """Rescale both axes about the centre; ``factor < 1`` zooms in."""

        x_center = (self.x_min + self.x_max) / 2
        y_center = (self.y_min + self.y_max) / 2
        x_range = (self.x_max - self.x_min) * factor
        y_range = (self.y_max - self.y_min) * factor
        self.x_min = x_center - x_range / 2
        self.x_max = x_center + x_range / 2
        self.y_min = y_center - y_range / 2
        self.y_max = y_center + y_range / 2
        self.pan_step = _pan_step(self.x_min, self.x_max)

    def reset(self) -> None:
        self.x_min, self.x_max, self.y_min, self.y_max = DEFAULT_BOUNDS
        self.pan_step = _pan_step(self.x_min, self.x_max)

    def pixel_to_complex(self, px: float, py: float, width: int, height: int) -> tuple[float, float]:
        """Map pixel ``(px, py)`` to the plane.

        The divisor is the pixel count, not ``count - 1``, so the last column
        and row stop one step short of ``x_max`` and ``y_max``.
        """

        re = self.x_min + px * (self.x_max - self.x_min) / width
        im = self.y_min + py * (self.y_max - self.y_min) / height
        return re, im
