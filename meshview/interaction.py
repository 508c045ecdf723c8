"""Mouse zones of the 3D view and the feedback each zone gives."""

from __future__ import annotations

import math
from enum import IntEnum

BORDER_UP = 20
BORDER_DOWN = 20
BORDER_LEFT = 20
BORDER_RIGHT = 20


class MouseZone(IntEnum):
    """The nine regions of the view, numbered row by row from the top left."""

    OUTSIDE = -1
    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    LEFT = 3
    CENTER = 4
    RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM = 7
    BOTTOM_RIGHT = 8


_HOVER_MESSAGES = {
    MouseZone.TOP_LEFT: "HOME",
    MouseZone.TOP: "",
    MouseZone.TOP_RIGHT: "Invert Normals",
    MouseZone.LEFT: "Rotate Around Horizontal Axis | Translate Left-Right",
    MouseZone.CENTER: "Rotate Object With Respect To Center",
    MouseZone.RIGHT: "Translate Object Along Viewing Direction",
    MouseZone.BOTTOM_LEFT: "Stop Animation",
    MouseZone.BOTTOM: "Rotate Around Vertical Axis | Translate Up-Down",
    MouseZone.BOTTOM_RIGHT: "Resume Animation",
}


def _as_zone(zone: int) -> MouseZone | None:
    try:
        return MouseZone(int(zone))
    except ValueError:
        return None


def mouse_zone(x: int, y: int, width: int, height: int) -> MouseZone:
    """Zone of the view of size ``width`` x ``height`` holding the point ``(x, y)``."""
    if x < BORDER_LEFT:
        code_x = 0
    elif x >= width - BORDER_RIGHT:
        code_x = 2
    else:
        code_x = 1
    if y < BORDER_UP:
        code_y = 0
    elif y >= height - BORDER_DOWN:
        code_y = 2
    else:
        code_y = 1
    return MouseZone(code_x + 3 * code_y)


def hover_message(zone: int) -> str:
    """Status message shown while the mouse moves over ``zone`` unpressed."""
    found = _as_zone(zone)
    if found is None:
        return ""
    return _HOVER_MESSAGES.get(found, "")


def press_message(
    zone: int, left: bool, right: bool, zone4_enabled: bool = True
) -> str | None:
    """Status message shown when a button is pressed in ``zone``.

    The left button takes precedence over the right one. None means the
    status message is left unchanged.
    """
    found = _as_zone(zone)
    if left:
        if found is MouseZone.TOP:
            return "Rotating Light Source" if zone4_enabled else None
        if found in (MouseZone.LEFT, MouseZone.BOTTOM):
            return "Rotating Object"
        if found is MouseZone.CENTER:
            return "Rotating Object" if zone4_enabled else None
        if found is MouseZone.RIGHT:
            return "Zooming"
        return ""
    if right:
        if found in (MouseZone.LEFT, MouseZone.BOTTOM):
            return "Translating Object"
        if found is MouseZone.CENTER:
            return "Rotating Light Source" if zone4_enabled else None
        return ""
    return None


def handle_rect(
    zone: int, width: float, height: float
) -> tuple[float, float, float, float] | None:
    """Rectangle ``(hx0, hy0, hx1, hy1)`` highlighting ``zone`` in unit coordinates.

    The y axis points up. Returns None for the centre, for positions outside
    the view, and when the rectangle would be empty.
    """
    if width <= 0 or height <= 0:
        raise ValueError("viewport size must be positive")
    w = float(width)
    h = float(height)
    xs = (0.0, BORDER_LEFT / w, (width - BORDER_RIGHT) / w, 1.0)
    ys = (1.0, (height - BORDER_UP) / h, BORDER_DOWN / h, 0.0)

    found = _as_zone(zone)
    if found is None or found in (MouseZone.OUTSIDE, MouseZone.CENTER):
        return None
    column = found % 3
    row = found // 3
    hx0, hx1 = xs[column], xs[column + 1]
    hy0, hy1 = ys[row], ys[row + 1]
    if hx0 == hx1 or hy0 == hy1:
        return None
    return hx0, hy0, hx1, hy1


def _qround(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def wheel_direction(pixel_dy: int, angle_dy: int) -> int:
    """Zoom direction of a wheel event: 1 towards, -1 away, 0 none.

    Pixel deltas win when present; otherwise the angle delta, in eighths of
    a degree, must amount to at least one 15-degree step.
    """
    if pixel_dy:
        return 1 if pixel_dy > 0 else -1
    degrees = _qround(angle_dy / 8)
    if degrees == 0:
        return 0
    steps = _qround(degrees / 15)
    if steps > 0:
        return 1
    if steps < 0:
        return -1
    return 0