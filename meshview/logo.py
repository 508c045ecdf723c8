"""A ready-made demonstration mesh: an extruded ring with a slash through it."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

_HALF_THICKNESS = 0.05
_SCALE = 2.0
_NUM_SECTORS = 100


def _f(value: float) -> float:
    """Round a value to single precision, as the mesh stores it."""
    return float(np.float32(value))


_PI = _f(3.14159)


def plane_normal(v1: Sequence[float], v2: Sequence[float]) -> np.ndarray:
    """Unit normal of the plane spanned by ``v1`` and ``v2`` (cross product).

    Returns the zero vector when the two vectors are parallel.
    """
    a = np.asarray(v1, dtype=np.float64).reshape(3)
    b = np.asarray(v2, dtype=np.float64).reshape(3)
    n = np.cross(a, b)
    length = float(np.linalg.norm(n))
    if length == 0.0 or math.isclose(length, 0.0, abs_tol=1e-12):
        return np.zeros(3, dtype=np.float32)
    return (n / length).astype(np.float32)


class LogoMesh:
    """Triangle mesh of the logo, with one normal per face.

    ``coord`` and ``normal`` are flat float32 arrays of xyz triples and
    ``coord_index`` lists triangles closed by ``-1`` separators.
    """

    def __init__(self) -> None:
        self.name = "QtLogo"
        self.diffuse_color: tuple[float, float, float] = (1.0, 0.6, 0.3)
        self.normal_per_vertex = False
        self.coord_index: list[int] = []
        self._coord: list[float] = []
        self._normal: list[float] = []

        x1, y1 = _f(+0.06), _f(-0.14)
        x2, y2 = _f(+0.14), _f(-0.06)
        x3, y3 = _f(+0.08), _f(+0.00)
        x4, y4 = _f(+0.30), _f(+0.22)

        self._quad(x1, y1, x2, y2, y2, x2, y1, x1)
        self._quad(x3, y3, x4, y4, y4, x4, y3, x3)

        self._extrude(x1, y1, x2, y2)
        self._extrude(x2, y2, y2, x2)
        self._extrude(y2, x2, y1, x1)
        self._extrude(y1, x1, x1, y1)
        self._extrude(x3, y3, x4, y4)
        self._extrude(x4, y4, y4, x4)
        self._extrude(y4, x4, y3, x3)

        for sector in range(_NUM_SECTORS):
            angle1 = (sector * 2 * _PI) / _NUM_SECTORS
            angle2 = ((sector + 1) * 2 * _PI) / _NUM_SECTORS
            x5, y5 = 0.30 * math.sin(angle1), 0.30 * math.cos(angle1)
            x6, y6 = 0.20 * math.sin(angle1), 0.20 * math.cos(angle1)
            x7, y7 = 0.20 * math.sin(angle2), 0.20 * math.cos(angle2)
            x8, y8 = 0.30 * math.sin(angle2), 0.30 * math.cos(angle2)

            self._quad(x5, y5, x6, y6, x7, y7, x8, y8)
            self._extrude(x6, y6, x7, y7)
            self._extrude(x8, y8, x5, y5)

        self.coord: np.ndarray = np.array(self._coord, dtype=np.float32) * np.float32(_SCALE)
        self.normal: np.ndarray = np.array(self._normal, dtype=np.float32)
        del self._coord, self._normal

        points = self.coord.reshape(-1, 3)
        self.bbox_min: np.ndarray = points.min(axis=0)
        self.bbox_max: np.ndarray = points.max(axis=0)
        self.bbox_center: np.ndarray = (self.bbox_min + self.bbox_max) / np.float32(2)
        self.bbox_diameter = float(np.linalg.norm(self.bbox_max - self.bbox_min))

    def _vertex(self, x: float, y: float, z: float) -> int:
        index = len(self._coord) // 3
        self._coord.extend((_f(x), _f(y), _f(z)))
        return index

    def _face_normal(self, n: np.ndarray) -> None:
        self._normal.extend(float(c) for c in n)

    def _triangle(self, i0: int, i1: int, i2: int) -> None:
        self.coord_index.extend((i0, i1, i2, -1))

    def _quad(
        self,
        x1: float, y1: float, x2: float, y2: float,
        x3: float, y3: float, x4: float, y4: float,
    ) -> None:
        i1m = self._vertex(x1, y1, -_HALF_THICKNESS)
        i2m = self._vertex(x2, y2, -_HALF_THICKNESS)
        i3m = self._vertex(x3, y3, -_HALF_THICKNESS)
        i4m = self._vertex(x4, y4, -_HALF_THICKNESS)

        nm = plane_normal((x2 - x1, y2 - y1, 0.0), (x4 - x1, y4 - y1, 0.0))
        self._triangle(i1m, i2m, i4m)
        self._face_normal(nm)
        self._triangle(i3m, i4m, i2m)
        self._face_normal(nm)

        i4p = self._vertex(x4, y4, _HALF_THICKNESS)
        i3p = self._vertex(x3, y3, _HALF_THICKNESS)
        i2p = self._vertex(x2, y2, _HALF_THICKNESS)
        i1p = self._vertex(x1, y1, _HALF_THICKNESS)

        np_ = plane_normal((x2 - x4, y2 - y4, 0.0), (x1 - x4, y1 - y4, 0.0))
        self._triangle(i4p, i2p, i1p)
        self._face_normal(np_)
        self._triangle(i2p, i4p, i3p)
        self._face_normal(np_)

    def _extrude(self, x1: float, y1: float, x2: float, y2: float) -> None:
        i1p = self._vertex(x1, y1, +_HALF_THICKNESS)
        i1m = self._vertex(x1, y1, -_HALF_THICKNESS)
        i2p = self._vertex(x2, y2, +_HALF_THICKNESS)
        i2m = self._vertex(x2, y2, -_HALF_THICKNESS)

        n = plane_normal((x2 - x1, y2 - y1, 0.0), (0.0, 0.0, -0.1))
        self._triangle(i1p, i2p, i1m)
        self._face_normal(n)
        self._triangle(i2m, i1m, i2p)
        self._face_normal(n)


def build_logo() -> LogoMesh:
    """Build the demonstration logo mesh."""
    return LogoMesh()