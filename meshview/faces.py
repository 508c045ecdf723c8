"""Polygon face connectivity built from a separator-terminated index array."""

from __future__ import annotations

from collections.abc import Iterable


class Faces:
    """Faces of a polygon mesh described by a ``coordIndex``-style array.

    Each face is a run of non-negative vertex indices closed by a negative
    separator. Separators count as corners, so every position of the input
    array is a corner index. A final face without a closing separator is
    still counted as a face.
    """

    def __init__(self, num_vertices: int, coord_index: Iterable[int]) -> None:
        indices = [int(value) for value in coord_index]
        self._indices: tuple[int, ...] = tuple(indices)

        largest = max((value for value in indices if value >= 0), default=-1)
        self._num_vertices = max(int(num_vertices), largest + 1)

        self._starts: list[int] = []
        self._sizes: list[int] = []
        self._corner_faces: list[int | None] = []

        start = 0
        for position, value in enumerate(indices):
            if value < 0:
                self._close_face(start, position)
                self._corner_faces.append(None)
                start = position + 1
            else:
                self._corner_faces.append(len(self._starts))
        if start < len(indices):
            self._close_face(start, len(indices))

    def _close_face(self, start: int, end: int) -> None:
        self._starts.append(start)
        self._sizes.append(end - start)

    def _check_face(self, face: int) -> None:
        if not 0 <= face < len(self._starts):
            raise IndexError(f"face index {face} out of range")

    def _check_corner(self, corner: int) -> int:
        if not 0 <= corner < len(self._indices):
            raise IndexError(f"corner index {corner} out of range")
        face = self._corner_faces[corner]
        if face is None:
            raise ValueError(f"corner {corner} is a face separator")
        return face

    def num_vertices(self) -> int:
        """Vertex count, raised to cover every index used by the faces."""
        return self._num_vertices

    def num_faces(self) -> int:
        """Number of faces."""
        return len(self._starts)

    def num_corners(self) -> int:
        """Length of the index array, separators included."""
        return len(self._indices)

    def face_size(self, face: int) -> int:
        """Number of corners of ``face``, separator excluded."""
        self._check_face(face)
        return self._sizes[face]

    def face_first_corner(self, face: int) -> int:
        """Corner index where ``face`` begins."""
        self._check_face(face)
        return self._starts[face]

    def face_vertex(self, face: int, j: int) -> int:
        """Vertex index stored at the ``j``-th corner of ``face``."""
        self._check_face(face)
        if not 0 <= j < self._sizes[face]:
            raise IndexError(f"corner {j} out of range for face {face}")
        return self._indices[self._starts[face] + j]

    def corner_face(self, corner: int) -> int:
        """Face that contains ``corner``."""
        return self._check_corner(corner)

    def next_corner(self, corner: int) -> int:
        """Next corner in the cyclic order of the face holding ``corner``."""
        face = self._check_corner(corner)
        start = self._starts[face]
        return start + (corner - start + 1) % self._sizes[face]