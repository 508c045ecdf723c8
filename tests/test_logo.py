import numpy as np
import pytest

from meshview.faces import Faces
from meshview.glbuffer import BufferType, VertexBuffer
from meshview.logo import LogoMesh, build_logo, plane_normal


@pytest.fixture(scope="module")
def logo():
    return build_logo()


def test_plane_normal_of_axes():
    n = plane_normal((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(n, (0.0, 0.0, 1.0))


def test_plane_normal_parallel_vectors_is_zero():
    n = plane_normal((1.0, 2.0, 3.0), (2.0, 4.0, 6.0))
    assert np.allclose(n, (0.0, 0.0, 0.0))


def test_plane_normal_is_unit_and_orthogonal():
    v1 = (0.3, -1.2, 0.7)
    v2 = (2.0, 0.5, -0.4)
    n = plane_normal(v1, v2)
    assert np.isclose(np.linalg.norm(n), 1.0, atol=1e-6)
    assert np.isclose(np.dot(n, v1), 0.0, atol=1e-5)
    assert np.isclose(np.dot(n, v2), 0.0, atol=1e-5)


def test_plane_normal_antisymmetric():
    a = (1.0, 2.0, 0.5)
    b = (-0.5, 1.0, 3.0)
    assert np.allclose(plane_normal(a, b), -plane_normal(b, a))


def test_logo_material(logo):
    assert logo.name == "QtLogo"
    assert logo.diffuse_color == (1.0, 0.6, 0.3)
    assert logo.normal_per_vertex is False


def test_build_logo_returns_logo_mesh():
    mesh = build_logo()
    assert isinstance(mesh, LogoMesh)
    assert np.array_equal(mesh.coord, LogoMesh().coord)


def test_one_normal_per_triangle(logo):
    faces = Faces(len(logo.coord) // 3, logo.coord_index)
    assert faces.num_faces() * 3 == len(logo.normal)
    assert len(logo.coord_index) == 4 * faces.num_faces()
    assert all(faces.face_size(f) == 3 for f in range(faces.num_faces()))


def test_indices_refer_to_existing_vertices(logo):
    n_vertices = len(logo.coord) // 3
    used = [i for i in logo.coord_index if i >= 0]
    assert min(used) == 0
    assert max(used) == n_vertices - 1
    assert all(i == -1 for i in logo.coord_index if i < 0)


def test_normals_are_unit_length(logo):
    lengths = np.linalg.norm(logo.normal.reshape(-1, 3), axis=1)
    assert np.allclose(lengths, 1.0, atol=1e-5)


def test_slab_is_symmetric_in_z(logo):
    z = logo.coord.reshape(-1, 3)[:, 2]
    assert np.isclose(z.max(), -z.min())
    assert set(np.abs(z).tolist()) == {float(np.abs(z[0]))}


def test_bbox_encloses_points(logo):
    points = logo.coord.reshape(-1, 3)
    assert np.all(points >= logo.bbox_min)
    assert np.all(points <= logo.bbox_max)
    assert np.allclose(logo.bbox_center, (logo.bbox_min + logo.bbox_max) / 2)
    assert np.isclose(
        logo.bbox_diameter, np.linalg.norm(logo.bbox_max - logo.bbox_min)
    )


def test_logo_feeds_vertex_buffer(logo):
    buffer = VertexBuffer.from_faces(
        logo.coord, logo.coord_index, logo.normal, [], logo.normal_per_vertex,
        [], [], True,
    )
    n_faces = len(logo.normal) // 3
    assert buffer.type is BufferType.MATERIAL_NORMAL
    assert len(buffer.vertices) == 3 * n_faces
    assert len(buffer.normals) == 3 * n_faces