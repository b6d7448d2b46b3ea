"""Base scene object holding its transform matrices."""

from __future__ import annotations

from typing import Any, Optional

from cframe import transforms
from cframe.matrix import Matrix4
from cframe.vector import Vec3, mag


class GameObject:
    """An object in a scene with a model matrix and optional render assets.

    ``mesh``, ``shader``, ``texture`` and ``env_map`` are whatever the
    renderer uses; they are only stored here.
    """

    def __init__(
        self,
        position: Optional[Vec3] = None,
        *,
        mesh: Any = None,
        shader: Any = None,
        texture: Any = None,
        env_map: Any = None,
    ):
        self.position = Vec3(*position) if position is not None else Vec3(0.0)
        self.mesh = mesh
        self.shader = shader
        self.texture = texture
        self.env_map = env_map
        self.model_matrix = Matrix4()
        self.base_matrix = Matrix4()
        self.position_matrix = Matrix4()
        self.rotation_matrix = Matrix4()
        self.has_enviromap = False
        self.delta_time = 0.0

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds; a plain object has nothing to animate."""

    def add_rotation(self, angle: float, orientation: Vec3) -> None:
        """Prepend a rotation of ``angle`` degrees about ``orientation``."""
        self.rotation_matrix = transforms.rotate(angle, orientation) * self.rotation_matrix

    def add_translation(
        self, direction: Vec3, distance: float = 1.0, use_distance: bool = False
    ) -> None:
        """Translate the model matrix by ``direction``.

        With ``use_distance`` the direction is normalised and moved ``distance``.
        """
        if use_distance:
            unit = direction / mag(direction)
            self.model_matrix = self.model_matrix * transforms.translate(unit * distance)
        else:
            self.model_matrix = self.model_matrix * transforms.translate(direction)

    def set_original_transform(
        self, position: Vec3, angle: float, rotation: Vec3, scale: Vec3
    ) -> None:
        """Set the base matrix to translate * rotate * scale."""
        self.base_matrix = (
            transforms.translate(position)
            * transforms.rotate(angle, rotation)
            * transforms.scale(scale)
        )

    def world_position(self) -> Vec3:
        """Elements 13, 14 and 15 of the model matrix."""
        m = self.model_matrix
        return Vec3(m[13], m[14], m[15])