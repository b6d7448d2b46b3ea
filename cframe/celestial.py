"""Rotating and orbiting bodies such as planets and moons."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, List, Optional

from cframe import transforms
from cframe.gameobject import GameObject
from cframe.matrix import Matrix4
from cframe.vector import Vec3

PI = 22.0 / 7.0
"""The value of pi used for orbit angles."""

_BASE_FIX_AXIS = Vec3(1.0, 0.0, 0.0)


class Axis(Enum):
    """Axis an orbit revolves around."""

    X = 0
    Y = 1
    Z = 2


def revolution_translation(axis: Axis, position1: float, position2: float) -> Matrix4:
    """Translation placing an orbit's two coordinates in the plane normal to ``axis``."""
    if axis is Axis.X:
        return transforms.translate(0.0, position2, position1)
    if axis is Axis.Y:
        return transforms.translate(position2, 0.0, position1)
    if axis is Axis.Z:
        return transforms.translate(position1, position2, 0.0)
    return Matrix4()


class CelestialBody(GameObject):
    """A body spinning about its own axis and optionally orbiting another object.

    Angles are in degrees and speeds in degrees per second.
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
        super().__init__(position, mesh=mesh, shader=shader, texture=texture, env_map=env_map)
        self.rotation_speed = 0.0
        self.rotation_angle = 0.0
        self.rotation_orientation = Vec3(0.0, 0.0, 1.0)
        self.rotation_tilt_angle = 0.0
        self.rotation_tilt_orientation = Vec3(0.0, 0.0, 1.0)
        self.satellites: List[CelestialBody] = []
        self.revolution_radius = 0.0
        self.revolution_speed = 0.0
        self.revolution_angle = 0.0
        self.eliptical_proportion = 1.0
        self.revolution_axis = Axis.Z
        self.scale = Vec3(1.0)
        self.gravity_center: Optional[GameObject] = None
        self.is_satellite = False

    def set_rotation(self, speed: float, orientation: Vec3) -> None:
        """Spin at ``speed`` about ``orientation``."""
        self.rotation_speed = speed
        self.rotation_orientation = orientation

    def set_revolution(
        self,
        speed: float,
        axis: Axis,
        gravity_center: Optional[GameObject],
        radius: float,
        eliptical_proportion: float = 1.0,
    ) -> None:
        """Orbit ``gravity_center`` at ``speed`` with the given radius.

        The orbit's eliptical proportion is left as it is.
        """
        self.revolution_speed = speed
        self.revolution_axis = axis
        self.gravity_center = gravity_center
        self.revolution_radius = radius

    def set_scale(self, factor: float) -> None:
        """Multiply the current scale by ``factor``."""
        self.scale = self.scale * factor

    def set_gravity_center(self, gravity_center: Optional[GameObject]) -> None:
        self.gravity_center = gravity_center

    def set_rotation_tilt(self, angle: float, orientation: Optional[Vec3] = None) -> None:
        """Tilt the spin axis by ``angle`` about ``orientation`` (default the y axis)."""
        self.rotation_tilt_angle = angle
        self.rotation_tilt_orientation = orientation if orientation is not None else Vec3(0.0, 1.0, 0.0)

    def add_satellite(self, satellite: CelestialBody) -> None:
        self.satellites.append(satellite)

    def _spin(self) -> Matrix4:
        return (
            transforms.rotate(self.rotation_angle, self.rotation_orientation)
            * transforms.rotate(self.rotation_tilt_angle, self.rotation_tilt_orientation)
            * transforms.scale(self.scale)
        )

    def update(self, delta_time: float) -> None:
        """Advance spin and orbit by ``delta_time`` seconds and rebuild the model matrix."""
        self.rotation_angle += self.rotation_speed * delta_time
        self.revolution_angle += self.revolution_speed * delta_time

        radians = self.revolution_angle * (PI / 180.0)
        x = math.cos(radians) * self.revolution_radius
        y = math.sin(radians) * self.revolution_radius * self.eliptical_proportion
        center = self.gravity_center
        if center is not None:
            self.position = Vec3(x + center.position.x, y + center.position.y, center.position.z)
            # Order matters: base fix, placement, spin, tilt, then scale.
            self.model_matrix = (
                transforms.rotate(-90.0, _BASE_FIX_AXIS)
                * transforms.translate(self.position)
                * self._spin()
            )
        else:
            self.position = Vec3(x, y, self.position.z)
            self.model_matrix = self._spin()


class Moon(CelestialBody):
    """A body orbiting its gravity centre, advancing a fixed step per update."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.planet: Optional[GameObject] = None

    def update(self, delta_time: float) -> None:
        """Step the angle by the rotation speed (independent of ``delta_time``)."""
        center = self.gravity_center
        if center is None:
            raise ValueError("a moon needs a gravity centre to orbit")
        self.rotation_angle += self.rotation_speed
        radians = self.rotation_angle * (PI / 180.0)
        center_position = center.world_position()
        x = math.cos(radians) * self.revolution_radius + center_position.x
        y = math.sin(radians) * self.revolution_radius + center_position.y
        self.model_matrix = (
            transforms.scale(self.scale)
            * transforms.rotate(-90.0, _BASE_FIX_AXIS)
            * transforms.rotate(self.rotation_angle, self.rotation_orientation)
            * revolution_translation(self.revolution_axis, x, y)
        )