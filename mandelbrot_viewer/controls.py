"""Keyboard actions and the viewport transforms they trigger."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .config import DEFAULT_ZOOM_FACTOR
from .viewport import Viewport


class Action(Enum):
    PAN_LEFT = "pan_left"
    PAN_RIGHT = "pan_right"
    PAN_UP = "pan_up"
    PAN_DOWN = "pan_down"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    RESET = "reset"
    SAVE = "save"


# Key names as reported by matplotlib key events.
KEY_BINDINGS: dict[str, Action] = {
    "left": Action.PAN_LEFT,
    "right": Action.PAN_RIGHT,
    "up": Action.PAN_UP,
    "down": Action.PAN_DOWN,
    "1": Action.ZOOM_IN,
    "2": Action.ZOOM_OUT,
    "r": Action.RESET,
    "s": Action.SAVE,
}

_TRANSFORMS: dict[Action, Callable[[Viewport, float], None]] = {
    Action.PAN_LEFT: lambda viewport, _: viewport.pan_left(),
    Action.PAN_RIGHT: lambda viewport, _: viewport.pan_right(),
    Action.PAN_UP: lambda viewport, _: viewport.pan_up(),
    Action.PAN_DOWN: lambda viewport, _: viewport.pan_down(),
    Action.ZOOM_IN: lambda viewport, factor: viewport.zoom(factor),
    Action.ZOOM_OUT: lambda viewport, factor: viewport.zoom(1 / factor),
    Action.RESET: lambda viewport, _: viewport.reset(),
}


def action_for_key(key: Optional[str]) -> Optional[Action]:
    if key is None:
        return None
    return KEY_BINDINGS.get(key.lower())


def apply_action(viewport: Viewport, action: Action, zoom_factor: float = DEFAULT_ZOOM_FACTOR) -> bool:
    """Apply the viewport transform bound to ``action``.

    Returns ``False`` for actions that do not move the viewport (saving).
    """

    transform = _TRANSFORMS.get(action)
    if transform is None:
        return False
    transform(viewport, zoom_factor)
    return True
