# meshview

Building blocks for an interactive viewer of polygon meshes and polylines.
The package provides a face table over a flat `coord_index` array and
interleaved vertex buffers ready for upload to a GPU. It also provides
shader sources with their attribute layouts, a built-in demo logo mesh,
camera matrices, and the mouse-zone model of the viewer. Everything is
plain Python on top of NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `meshview.faces`

`Faces(num_vertices, coord_index)` describes the faces of a mesh. Each
face is a run of non-negative vertex indices closed by a negative
separator. A trailing run without a separator still counts as a face.
Separators count as corners.

- `num_vertices()` returns the given count, raised if needed to cover the
  largest index used.
- `num_faces()` and `num_corners()` return the face and corner counts.
  The corner count includes separators.
- `face_size(face)`, `face_first_corner(face)` and `face_vertex(face, j)`
  describe a single face.
- `corner_face(corner)` and `next_corner(corner)` look up the face that
  holds a corner and the next corner in that face's cyclic order.

An index out of range raises `IndexError`. Asking for the face of a
separator corner raises `ValueError`.

### `meshview.glbuffer`

`BufferType` tells which attributes a buffer carries: `MATERIAL`,
`MATERIAL_NORMAL`, `COLOR` or `COLOR_NORMAL`. The choice follows from
whether colour and normal data are present.

`VertexBuffer` holds unindexed `vertices`, `normals` and `colors` as
`(n, 3)` float32 arrays, together with the flags `has_faces`,
`has_polylines`, `has_color` and `has_normal`.

- `VertexBuffer.from_faces(coord, coord_index, normal, normal_index,
  normal_per_vertex, color, color_index, color_per_vertex)`
  fan-triangulates every face.
- `VertexBuffer.from_lines(coord, coord_index, color, color_index,
  color_per_vertex)` splits every polyline into segments.
- Normals and colours can be given per vertex, per corner (through an
  index list) or per face or line. They can also be left out.
- When `coord_index` holds no separator, the coordinates become a point
  cloud.
- `has_points()` is true when the buffer holds neither faces nor
  polylines.
- `interleaved()` returns a flat float32 array with the position, then
  the normal, then the colour of each vertex.

### `meshview.shader`

- `vertex_shader_source(buffer_type)` returns the GLSL vertex shader for
  a buffer type. `FRAGMENT_SHADER_SOURCE` is the shared fragment shader.
- `attribute_layout(buffer_type)` returns `Attribute(name, offset,
  components, stride)` entries, in bytes, for an interleaved buffer.
- `Shader(material_color, light_source=None)` keeps the drawing state:
  - point size (default 4) and line width (default 2), both set through
    `set_point_size` and `set_line_width`, with negative values clamped
    to zero;
  - the MVP matrix and the material colour (RGB or RGBA);
  - the attached buffer, set with `set_vertex_buffer`, which selects the
    sources and layout.

  `num_vertices()` and `draw_mode()` report what is attached. `draw_mode()`
  returns `DrawMode.TRIANGLES`, `LINES` or `POINTS`, or `None` when no
  buffer is attached.

### `meshview.handles`

- `handle_vertices(hx0, hy0, hx1, hy1)` returns the six vertices (two
  triangles, z = 0) that cover a rectangle.
- `Handles` holds such a rectangle with its own `matrix` and `color`, set
  through `set_color` and `set_geometry`.
- `Handles.vertex_count()` is 0 until geometry is set.

### `meshview.logo`

- `build_logo()` returns a `LogoMesh`: an extruded ring crossed by a
  slash, built as triangles with one normal per face.
- Its attributes are `coord`, `normal`, `coord_index`, `diffuse_color`,
  `bbox_min`, `bbox_max`, `bbox_center` and `bbox_diameter`.
- `plane_normal(v1, v2)` is the unit cross product used to build it. It
  returns the zero vector for parallel inputs.

### `meshview.viewer_data`

`ViewerData` holds the current `scene_graph`, set with `set_scene_graph`,
and the bounding-box settings:

- `bbox_depth` is clamped to 0–10.
- `bbox_scale` defaults to 1.05 and is kept non-negative.
- `bbox_cube` and `bbox_occupied` are plain flags.

### `meshview.camera`

- `rotation_matrix(angle, x, y, z)` takes the angle in degrees.
- The other matrix functions are `translation_matrix(x, y, z)`,
  `perspective_matrix(vertical_angle, aspect_ratio, near, far)` and
  `look_at_matrix(eye, center, up)`.
- All of them return 4×4 NumPy arrays and raise `ValueError` on
  degenerate input.

`Camera` orbits a bounding box:

- `set_bbox(center, diameter)` frames a box and returns to the home
  view. `None` as the centre stands for an empty box.
- `zoom(value)` moves the eye along z. The eye never comes closer to the
  centre than a quarter of the diameter.
- `set_home_view(identity)` resets the view rotation and spin, and places
  the eye five diameters from the centre.
- `projection_matrix(width, height)` and `mvp_matrix(width, height)`
  build the matrices for a viewport of the given size.

### `meshview.interaction`

The view is split into a 3×3 grid: 20-pixel borders around a central
area, listed by `MouseZone`.

- `mouse_zone(x, y, width, height)` classifies a point.
- `hover_message(zone)` gives the status text shown while hovering over
  a zone.
- `press_message(zone, left, right, zone4_enabled=True)` gives the text
  shown on a button press. `None` means the message is left unchanged.
- `handle_rect(zone, width, height)` returns the highlight rectangle in
  unit coordinates, or `None` for the centre zone and for zones outside
  the view.
- `wheel_direction(pixel_dy, angle_dy)` turns a wheel event into 1
  (towards), -1 (away) or 0 (none).

## Example

```python
from meshview.camera import Camera
from meshview.faces import Faces
from meshview.glbuffer import VertexBuffer

coord = [0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0]
coord_index = [0, 1, 2, 3, -1]

faces = Faces(4, coord_index)
print(faces.num_faces(), faces.face_size(0), faces.next_corner(3))  # 1 4 0

buffer = VertexBuffer.from_faces(
    coord, coord_index,
    normal=[], normal_index=[], normal_per_vertex=True,
    color=[], color_index=[], color_per_vertex=True,
)
print(buffer.interleaved().shape)  # (18,): two triangles, positions only

camera = Camera()
camera.set_bbox((0.5, 0.5, 0.0), 1.5)
mvp = camera.mvp_matrix(600, 600)
```

## What it does not do

meshview opens no window and issues no graphics calls. Shaders are
returned as source text and buffers as arrays, ready to hand to whatever
OpenGL binding the application uses. It also has no:

- scene-graph node classes (`ViewerData` stores whatever object it is
  given);
- file loading or saving;
- command-line program.