"""Viewer state shared between the drawing area and the tool panel."""

from __future__ import annotations

from typing import Any


class ViewerData:
    """Current scene graph and bounding-box grid settings."""

    MAX_BBOX_DEPTH = 10

    def __init__(self) -> None:
        self._scene_graph: Any = None
        self._bbox_depth = 0
        self._bbox_scale = 1.05
        self.bbox_cube = True
        self.bbox_occupied = False

    @property
    def scene_graph(self) -> Any:
        """The scene graph being viewed, or None."""
        return self._scene_graph

    def set_scene_graph(self, scene_graph: Any) -> None:
        """Replace the scene graph being viewed."""
        if scene_graph is not self._scene_graph:
            self._scene_graph = scene_graph

    @property
    def bbox_depth(self) -> int:
        """Subdivision depth of the bounding-box grid, from 0 to 10."""
        return self._bbox_depth

    @bbox_depth.setter
    def bbox_depth(self, depth: int) -> None:
        self._bbox_depth = min(max(int(depth), 0), self.MAX_BBOX_DEPTH)

    @property
    def bbox_scale(self) -> float:
        """Scale applied to the bounding box; never negative."""
        return self._bbox_scale

    @bbox_scale.setter
    def bbox_scale(self, scale: float) -> None:
        self._bbox_scale = max(float(scale), 0.0)