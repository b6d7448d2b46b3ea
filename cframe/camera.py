"""A camera holding projection, rotation and position matrices."""

from __future__ import annotations

from cframe import transforms
from cframe.matrix import Matrix4
from cframe.vector import Vec3


class Camera:
    """Perspective camera whose view is ``rotation * position``."""

    def __init__(self):
        self.projection = Matrix4()
        self.rotation = Matrix4()
        self.position = Matrix4()
        self.position_vector = Vec3(0.0)
        self.view = Matrix4()
        self.create_projection(45.0, 16.0 / 9.0, 0.5, 100.0)
        self.create_view(Vec3(0.0, 0.0, -10.0), 0.0, Vec3(1.0, 0.0, 0.0))

    def create_projection(self, fovy: float, aspect: float, near: float, far: float) -> None:
        """Set a perspective projection; ``fovy`` in degrees."""
        self.projection = transforms.perspective(fovy, aspect, near, far)

    def look_at(self, pos: Vec3, at: Vec3, up: Vec3) -> None:
        """Store a look-at matrix in :attr:`view`."""
        self.view = transforms.look_at(pos, at, up)

    def create_view(self, pos: Vec3, angle: float, orientation: Vec3) -> None:
        """Place the camera at ``pos`` rotated ``angle`` degrees about ``orientation``."""
        self.position_vector = Vec3(pos.x, pos.y, pos.z)
        self.position = transforms.translate(pos)
        self.rotation = transforms.rotate(angle, orientation)

    def set_rotation(self, angle: float, orientation: Vec3) -> None:
        """Replace the rotation with ``angle`` degrees about ``orientation``."""
        self.rotation = transforms.rotate(angle, orientation)

    def set_rotation_matrix(self, rotation: Matrix4) -> None:
        """Replace the rotation with a given matrix."""
        self.rotation = Matrix4(list(rotation))

    def view_matrix(self) -> Matrix4:
        """The view matrix: rotation applied after translation."""
        return self.rotation * self.position