"""A fountain of particles whose paths are evaluated on the GPU.

The fountain keeps the per-column launch directions and a looping particle
clock; the renderer feeds them to a shader as uniforms.
"""

from __future__ import annotations

import random
from typing import Any, List, Optional

from cframe.gameobject import GameObject
from cframe.vector import Vec3, normalize, rotate

DIRECTION_SLOTS = 500
"""Size of the launch direction table."""

_UP = Vec3(0.0, 1.0, 0.0)
_DOWN = Vec3(0.0, -1.0, 0.0)


class ParticleFountain(GameObject):
    """Instanced particles launched upwards with a random spread.

    ``rng`` is any object with a ``randrange`` method; it defaults to a new
    :class:`random.Random`.
    """

    def __init__(
        self,
        *,
        mesh: Any = None,
        shader: Any = None,
        texture: Any = None,
        skybox: Any = None,
        rng: Optional[Any] = None,
    ):
        super().__init__(mesh=mesh, shader=shader, texture=texture, env_map=skybox)
        self._rng = rng if rng is not None else random.Random()
        self.horizontal_instances = 200
        self.vertical_instances = 50
        self.particle_speed = 30.0
        self.air_drag = 100.0
        self.particle_life_span = 10.0
        self.gravity = 10.0
        self.angular_deviation = 10.0
        self.time = 0.0
        self.delta_time = 0.0
        self.particle_time = 0.0
        self.time_cycle = 0
        self.direction_array: List[Vec3] = [
            self.particle_direction() for _ in range(200)
        ]
        self.direction_array.extend(Vec3(0.0) for _ in range(DIRECTION_SLOTS - 200))

    def update(self, delta_time: float) -> None:
        """Advance the clock; the particle time wraps every life span."""
        self.delta_time = delta_time
        self.time += delta_time
        life = self.particle_life_span
        while self.time - self.time_cycle * life > life:
            self.time_cycle += 1
        self.particle_time = self.time - self.time_cycle * life

    def gaussian_random(self, stability: int, include_negative: bool = False) -> float:
        """Mean of ``stability`` uniform draws in [0, 1], or [-1, 1] with ``include_negative``."""
        if include_negative:
            total = sum(
                self._rng.randrange(20001) / 10000.0 - 1.0 for _ in range(stability)
            )
        else:
            total = sum(self._rng.randrange(10001) / 10000.0 for _ in range(stability))
        return total / float(stability)

    def particle_movement(self, direction: Vec3) -> Vec3:
        """Displacement of a particle launched along ``direction`` at the current particle time."""
        t = self.particle_time
        return direction * self.particle_speed * t + _DOWN * self.gravity * t * t * 0.5

    def particle_direction(self) -> Vec3:
        """A random launch direction: up, tipped about a random horizontal axis."""
        axis = normalize(
            Vec3(self.gaussian_random(1, True), 0.0, self.gaussian_random(1, True))
        )
        return rotate(axis, self.angular_deviation * self.gaussian_random(10), _UP)