"""Vertex buffers for drawing indexed face sets and indexed line sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class BufferType(Enum):
    """Which per-vertex attributes a buffer carries besides positions."""

    MATERIAL = 0
    MATERIAL_NORMAL = 1
    COLOR = 2
    COLOR_NORMAL = 3

    @classmethod
    def select(cls, has_color: bool, has_normal: bool) -> BufferType:
        """Type for the given combination of colour and normal data."""
        if has_color:
            return cls.COLOR_NORMAL if has_normal else cls.COLOR
        return cls.MATERIAL_NORMAL if has_normal else cls.MATERIAL


def _triples(values: Iterable[float]) -> np.ndarray:
    array = np.asarray(list(values), dtype=np.float32)
    if array.size % 3:
        raise ValueError("coordinate array length must be a multiple of 3")
    return array.reshape(-1, 3)


def _runs(coord_index: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(run number, start, end)`` for each separator-closed run."""
    start = 0
    number = 0
    for position, value in enumerate(coord_index):
        if value < 0:
            yield number, start, position
            start = position + 1
            number += 1


def _pick(table: np.ndarray, index: Sequence[int], key: int, fallback: int) -> np.ndarray:
    return table[index[key] if len(index) > 0 else fallback]


def _empty() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.float32)


@dataclass
class VertexBuffer:
    """Unindexed vertex data ready for drawing as triangles, lines or points."""

    type: BufferType = BufferType.MATERIAL
    vertices: np.ndarray = field(default_factory=_empty)
    normals: np.ndarray = field(default_factory=_empty)
    colors: np.ndarray = field(default_factory=_empty)
    has_faces: bool = False
    has_polylines: bool = False
    has_color: bool = False
    has_normal: bool = False

    @classmethod
    def from_faces(
        cls,
        coord: Iterable[float],
        coord_index: Iterable[int],
        normal: Iterable[float],
        normal_index: Iterable[int],
        normal_per_vertex: bool,
        color: Iterable[float],
        color_index: Iterable[int],
        color_per_vertex: bool,
    ) -> VertexBuffer:
        """Triangulate every face as a fan; without faces, build a point cloud."""
        points = _triples(coord)
        corners = [int(i) for i in coord_index]
        normals = _triples(normal)
        normal_idx = [int(i) for i in normal_index]
        colors = _triples(color)
        color_idx = [int(i) for i in color_index]

        has_faces = any(value < 0 for value in corners)
        has_normal = len(normals) > 0
        has_color = len(colors) > 0

        out_v: list[np.ndarray] = []
        out_n: list[np.ndarray] = []
        out_c: list[np.ndarray] = []

        if has_faces:
            for face, i0, i1 in _runs(corners):
                face_normal = face_color = None
                if has_normal and not normal_per_vertex:
                    face_normal = _pick(normals, normal_idx, face, face)
                if has_color and not color_per_vertex:
                    face_color = _pick(colors, color_idx, face, face)
                for j2 in range(i0 + 2, i1):
                    for corner in (j2, j2 - 1, i0):
                        vertex = corners[corner]
                        out_v.append(points[vertex])
                        if has_normal:
                            out_n.append(
                                _pick(normals, normal_idx, corner, vertex)
                                if normal_per_vertex
                                else face_normal
                            )
                        if has_color:
                            out_c.append(
                                _pick(colors, color_idx, corner, vertex)
                                if color_per_vertex
                                else face_color
                            )
        else:
            for vertex, position in enumerate(points):
                out_v.append(position)
                if has_normal:
                    out_n.append(normals[vertex])
                if has_color:
                    out_c.append(colors[vertex])

        return cls(
            type=BufferType.select(has_color, has_normal),
            vertices=_stack(out_v),
            normals=_stack(out_n),
            colors=_stack(out_c),
            has_faces=has_faces,
            has_color=has_color,
            has_normal=has_normal,
        )

    @classmethod
    def from_lines(
        cls,
        coord: Iterable[float],
        coord_index: Iterable[int],
        color: Iterable[float],
        color_index: Iterable[int],
        color_per_vertex: bool,
    ) -> VertexBuffer:
        """Split every polyline into edges; without polylines, build a point cloud."""
        points = _triples(coord)
        corners = [int(i) for i in coord_index]
        colors = _triples(color)
        color_idx = [int(i) for i in color_index]

        has_polylines = any(value < 0 for value in corners)
        has_color = len(colors) > 0

        out_v: list[np.ndarray] = []
        out_c: list[np.ndarray] = []

        if has_polylines:
            for line, i0, i1 in _runs(corners):
                line_color = None
                if has_color and not color_per_vertex:
                    line_color = _pick(colors, color_idx, line, line)
                for j1 in range(i0 + 1, i1):
                    for corner in (j1, j1 - 1):
                        vertex = corners[corner]
                        out_v.append(points[vertex])
                        if has_color:
                            out_c.append(
                                _pick(colors, color_idx, corner, vertex)
                                if color_per_vertex
                                else line_color
                            )
        else:
            for vertex, position in enumerate(points):
                out_v.append(position)
                if has_color:
                    out_c.append(_pick(colors, color_idx, vertex, vertex))

        return cls(
            type=BufferType.COLOR if has_color else BufferType.MATERIAL,
            vertices=_stack(out_v),
            colors=_stack(out_c),
            has_polylines=has_polylines,
            has_color=has_color,
        )

    def has_points(self) -> bool:
        """True when the buffer holds neither faces nor polylines."""
        return not (self.has_faces or self.has_polylines)

    def interleaved(self) -> np.ndarray:
        """Flat float32 array: position, then normal and colour when present."""
        parts = [self.vertices]
        if len(self.normals) > 0:
            parts.append(self.normals)
        if len(self.colors) > 0:
            parts.append(self.colors)
        return np.concatenate(parts, axis=1).astype(np.float32).ravel()


def _stack(rows: list[np.ndarray]) -> np.ndarray:
    if not rows:
        return _empty()
    return np.array(rows, dtype=np.float32).reshape(-1, 3)