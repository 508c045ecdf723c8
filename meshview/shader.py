"""Shader programs and attribute layouts for drawing vertex buffers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from meshview.glbuffer import BufferType, VertexBuffer

FLOAT_SIZE = 4

_VS_MATERIAL = """\
attribute highp vec4 vertex;
uniform mediump float pointsize;
uniform mediump float linewidth;
uniform mediump mat4 mvpmatrix;
uniform mediump vec4 matcolor;
varying mediump vec4 color;
void main(void) {
  color = matcolor;
  gl_Position = mvpmatrix * vertex;
  gl_PointSize = pointsize;
}
"""

_VS_MATERIAL_NORMAL = """\
attribute highp vec4 vertex;
attribute mediump vec3 vnormal;
uniform mediump float pointsize;
uniform mediump float linewidth;
uniform mediump mat4 mvpmatrix;
uniform mediump vec4 matcolor;
uniform mediump vec3 lightsource;
varying mediump vec4 color;
void main(void) {
  vec3 toLight = normalize(lightsource);
  float angle = max(dot(vnormal, toLight), 0.0);
  vec3 col = vec3(matcolor);
  color = vec4(col * 0.2 + col * 0.8 * angle, 1.0);
  color = clamp(color, 0.0, 1.0);
  gl_Position = mvpmatrix * vertex;
  gl_PointSize = pointsize;
}
"""

_VS_COLOR = """\
attribute highp vec4 vertex;
attribute mediump vec4 vcolor;
uniform mediump float pointsize;
uniform mediump float linewidth;
uniform mediump mat4 mvpmatrix;
varying mediump vec4 color;
void main(void) {
  color = vcolor;
  gl_Position = mvpmatrix * vertex;
  gl_PointSize = pointsize;
}
"""

_VS_COLOR_NORMAL = """\
attribute highp vec4 vertex;
attribute mediump vec3 vnormal;
attribute mediump vec4 vcolor;
uniform mediump float pointsize;
uniform mediump float linewidth;
uniform mediump mat4 mvpmatrix;
uniform mediump vec3 lightsource;
varying mediump vec4 color;
void main(void) {
  vec3 toLight = normalize(lightsource);
  float angle = max(dot(vnormal, toLight), 0.0);
  vec3 col = vec3(vcolor);
  color = vec4(col * 0.2 + col * 0.8 * angle, 1.0);
  color = clamp(color, 0.0, 1.0);
  gl_Position = mvpmatrix * vertex;
  gl_PointSize = pointsize;
}
"""

FRAGMENT_SHADER_SOURCE = """\
varying mediump vec4 color;
void main(void) {
  gl_FragColor = color;
}
"""

_VERTEX_SOURCES = {
    BufferType.MATERIAL: _VS_MATERIAL,
    BufferType.MATERIAL_NORMAL: _VS_MATERIAL_NORMAL,
    BufferType.COLOR: _VS_COLOR,
    BufferType.COLOR_NORMAL: _VS_COLOR_NORMAL,
}

_ATTRIBUTE_NAMES = {
    BufferType.MATERIAL: ("vertex",),
    BufferType.MATERIAL_NORMAL: ("vertex", "vnormal"),
    BufferType.COLOR: ("vertex", "vcolor"),
    BufferType.COLOR_NORMAL: ("vertex", "vnormal", "vcolor"),
}


class DrawMode(Enum):
    """Primitive used to draw a vertex buffer."""

    TRIANGLES = "triangles"
    LINES = "lines"
    POINTS = "points"


@dataclass(frozen=True)
class Attribute:
    """Placement of one vertex attribute in an interleaved buffer, in bytes."""

    name: str
    offset: int
    components: int
    stride: int


def vertex_shader_source(buffer_type: BufferType) -> str:
    """GLSL vertex shader matching the attributes of ``buffer_type``."""
    return _VERTEX_SOURCES[BufferType(buffer_type)]


def attribute_layout(buffer_type: BufferType) -> list[Attribute]:
    """Attributes of an interleaved buffer of ``buffer_type``, in order."""
    names = _ATTRIBUTE_NAMES[BufferType(buffer_type)]
    stride = 3 * len(names) * FLOAT_SIZE
    return [
        Attribute(name, 3 * position * FLOAT_SIZE, 3, stride)
        for position, name in enumerate(names)
    ]


def _rgba(color: Sequence[float]) -> tuple[float, float, float, float]:
    values = tuple(float(c) for c in color)
    if len(values) == 3:
        values += (1.0,)
    if len(values) != 4:
        raise ValueError("color needs 3 or 4 components")
    return values  # type: ignore[return-value]


class Shader:
    """Drawing state for one vertex buffer: program sources, uniforms, layout."""

    def __init__(
        self,
        material_color: Sequence[float],
        light_source: Sequence[float] | None = None,
    ) -> None:
        self.material_color = _rgba(material_color)
        self.light_source = (
            None
            if light_source is None
            else np.asarray(light_source, dtype=np.float32).reshape(3)
        )
        self.point_size = 4.0
        self.line_width = 2.0
        self.mvp_matrix: np.ndarray = np.identity(4, dtype=np.float32)
        self.vertex_buffer: VertexBuffer | None = None
        self.vertex_source: str | None = None
        self.fragment_source: str | None = None
        self.attributes: list[Attribute] = []

    def set_point_size(self, point_size: float) -> None:
        """Set the point size; negative values become zero."""
        self.point_size = max(0.0, float(point_size))

    def set_line_width(self, line_width: float) -> None:
        """Set the line width; negative values become zero."""
        self.line_width = max(0.0, float(line_width))

    def set_vertex_buffer(self, vertex_buffer: VertexBuffer | None) -> None:
        """Attach a buffer and select the program and layout for its type."""
        self.vertex_buffer = vertex_buffer
        if vertex_buffer is None:
            self.vertex_source = None
            self.fragment_source = None
            self.attributes = []
            return
        self.vertex_source = vertex_shader_source(vertex_buffer.type)
        self.fragment_source = FRAGMENT_SHADER_SOURCE
        self.attributes = attribute_layout(vertex_buffer.type)

    def num_vertices(self) -> int:
        """Vertices in the attached buffer, or zero without one."""
        if self.vertex_buffer is None:
            return 0
        return len(self.vertex_buffer.vertices)

    def draw_mode(self) -> DrawMode | None:
        """Primitive for the attached buffer, or None when nothing is attached."""
        buffer = self.vertex_buffer
        if buffer is None:
            return None
        if buffer.has_faces:
            return DrawMode.TRIANGLES
        if buffer.has_polylines:
            return DrawMode.LINES
        return DrawMode.POINTS