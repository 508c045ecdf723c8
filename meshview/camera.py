"""Viewing transforms and the orbiting camera used by the 3D view."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

HOME_ANGLE_X = 10.0
HOME_ANGLE_Y = 10.0
HOME_ANGLE_Z = 0.0
VERTICAL_ANGLE = 10.0
DEFAULT_DIAMETER = 2.0


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(3)


def rotation_matrix(angle: float, x: float, y: float, z: float) -> np.ndarray:
    """4x4 rotation by ``angle`` degrees around the axis ``(x, y, z)``."""
    axis = _vec3((x, y, z))
    length = float(np.linalg.norm(axis))
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    ux, uy, uz = axis / length
    radians = math.radians(angle)
    c = math.cos(radians)
    s = math.sin(radians)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [t * ux * ux + c, t * ux * uy - s * uz, t * ux * uz + s * uy],
        [t * ux * uy + s * uz, t * uy * uy + c, t * uy * uz - s * ux],
        [t * ux * uz - s * uy, t * uy * uz + s * ux, t * uz * uz + c],
    ]
    return matrix


def translation_matrix(x: float, y: float, z: float) -> np.ndarray:
    """4x4 translation by ``(x, y, z)``."""
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def perspective_matrix(
    vertical_angle: float, aspect_ratio: float, near: float, far: float
) -> np.ndarray:
    """Perspective projection with a vertical field of view in degrees."""
    if near == far:
        raise ValueError("near and far planes must differ")
    if aspect_ratio == 0.0:
        raise ValueError("aspect ratio must not be zero")
    half = math.radians(vertical_angle) / 2.0
    sine = math.sin(half)
    if sine == 0.0:
        raise ValueError("vertical angle must not be a multiple of 360 degrees")
    cotan = math.cos(half) / sine
    clip = far - near
    matrix = np.zeros((4, 4))
    matrix[0, 0] = cotan / aspect_ratio
    matrix[1, 1] = cotan
    matrix[2, 2] = -(near + far) / clip
    matrix[2, 3] = -(2.0 * near * far) / clip
    matrix[3, 2] = -1.0
    return matrix


def look_at_matrix(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Viewing matrix placing ``eye`` at the origin looking toward ``center``."""
    eye_v = _vec3(eye)
    forward = _vec3(center) - eye_v
    length = float(np.linalg.norm(forward))
    if length == 0.0:
        raise ValueError("eye and center must differ")
    forward /= length
    side = np.cross(forward, _vec3(up))
    side_length = float(np.linalg.norm(side))
    if side_length == 0.0:
        raise ValueError("up vector must not be parallel to the viewing direction")
    side /= side_length
    up_vector = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = up_vector
    matrix[2, :3] = -forward
    return matrix @ translation_matrix(*(-eye_v))


class Camera:
    """Camera orbiting the bounding box of a scene.

    The model-view-projection matrix is built as projection, then camera
    translation and look-at view, then the scene spin and view rotation
    applied around the box centre.
    """

    def __init__(self) -> None:
        self.bbox_diameter = DEFAULT_DIAMETER
        self.eye = np.zeros(3)
        self.center = np.array([0.0, 0.0, 1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.translate_step = 0.010
        self.camera_translation = np.zeros(3)
        self.view_rotation = np.identity(4)
        self.spin_angle = 0.0

    def set_bbox(self, center: Sequence[float] | None, diameter: float) -> None:
        """Frame a bounding box and return to the home view.

        ``center`` of None stands for an empty box: the view is then centred
        on the origin with the default diameter.
        """
        if center is None:
            self.center = np.zeros(3)
            self.bbox_diameter = DEFAULT_DIAMETER
        else:
            self.center = _vec3(center).copy()
            self.bbox_diameter = float(diameter)
        self.translate_step = 0.001 * self.bbox_diameter
        self.set_home_view(False)

    def zoom(self, value: float) -> None:
        """Move the eye along z, never closer than a quarter diameter."""
        self.eye = self.eye + np.array([0.0, 0.0, value])
        minimum = 0.25 * self.bbox_diameter
        if self.eye[2] - self.center[2] < minimum:
            self.eye[2] = self.center[2] + minimum

    def set_home_view(self, identity: bool) -> None:
        """Reset rotation, spin and eye distance to the home position."""
        if identity:
            self.view_rotation = np.identity(4)
        else:
            self.view_rotation = (
                rotation_matrix(HOME_ANGLE_X, 1.0, 0.0, 0.0)
                @ rotation_matrix(HOME_ANGLE_Y, 0.0, 1.0, 0.0)
                @ rotation_matrix(HOME_ANGLE_Z, 0.0, 0.0, 1.0)
            )
        self.spin_angle = 0.0
        self.eye = self.center + np.array([0.0, 0.0, 5.0 * self.bbox_diameter])

    def projection_matrix(self, width: float, height: float) -> np.ndarray:
        """Perspective projection for a viewport of the given size."""
        if height == 0:
            raise ValueError("viewport height must not be zero")
        return perspective_matrix(
            VERTICAL_ANGLE,
            float(width) / float(height),
            1.0 * self.bbox_diameter,
            100.0 * self.bbox_diameter,
        )

    def mvp_matrix(self, width: float, height: float) -> np.ndarray:
        """Full model-view-projection matrix for a viewport of the given size."""
        view = translation_matrix(*self.camera_translation) @ look_at_matrix(
            self.eye, self.center, self.up
        )
        cx, cy, cz = self.center
        return (
            self.projection_matrix(width, height)
            @ view
            @ translation_matrix(cx, cy, cz)
            @ rotation_matrix(self.spin_angle, 0.0, 1.0, 0.0)
            @ self.view_rotation
            @ translation_matrix(-cx, -cy, -cz)
        )