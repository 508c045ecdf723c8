"""Screen-space rectangles drawn over the viewport to mark mouse zones."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def handle_vertices(hx0: float, hy0: float, hx1: float, hy1: float) -> np.ndarray:
    """Two triangles covering the rectangle ``[hx0,hx1] x [hy0,hy1]`` at z=0.

    Returns a ``(6, 3)`` float32 array in drawing order.
    """
    return np.array(
        [
            (hx0, hy0, 0.0),
            (hx0, hy1, 0.0),
            (hx1, hy0, 0.0),
            (hx1, hy1, 0.0),
            (hx1, hy0, 0.0),
            (hx0, hy1, 0.0),
        ],
        dtype=np.float32,
    )


class Handles:
    """A flat-coloured rectangle with its own transform matrix."""

    def __init__(self) -> None:
        self.matrix: np.ndarray = np.identity(4, dtype=np.float32)
        self.color: tuple[float, ...] = (0.0, 0.0, 0.0, 1.0)
        self.vertices: np.ndarray | None = None

    def set_color(self, color: Sequence[float]) -> None:
        """Set the fill colour as RGB or RGBA floats; alpha defaults to 1."""
        values = tuple(float(c) for c in color)
        if len(values) == 3:
            values += (1.0,)
        if len(values) != 4:
            raise ValueError("color needs 3 or 4 components")
        self.color = values

    def set_geometry(self, hx0: float, hy0: float, hx1: float, hy1: float) -> None:
        """Replace the rectangle geometry."""
        self.vertices = handle_vertices(hx0, hy0, hx1, hy1)

    def vertex_count(self) -> int:
        """Number of vertices to draw; zero before any geometry is set."""
        return 0 if self.vertices is None else len(self.vertices)