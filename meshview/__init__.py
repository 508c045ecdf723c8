"""Mesh connectivity, vertex buffers, shader selection and camera math for a 3D mesh viewer."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "faces",
    "glbuffer",
    "handles",
    "interaction",
    "logo",
    "shader",
    "viewer_data",
]