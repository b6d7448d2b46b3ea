"""Point lights and the uniform values they feed to a shader."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from cframe.gameobject import GameObject
from cframe.vector import Vec3, Vec4


class Light(GameObject):
    """A coloured point light with an intensity."""

    def __init__(
        self,
        colour: Optional[Vec4] = None,
        intensity: float = 1.0,
        position: Optional[Vec3] = None,
        shader: Any = None,
    ):
        super().__init__(position, shader=shader)
        self.colour = Vec4(*colour) if colour is not None else Vec4(1.0, 1.0, 1.0, 0.0)
        self.intensity = float(intensity)

    def weighted_colour(self) -> Vec4:
        """The colour scaled by the intensity."""
        return self.colour * self.intensity


def light_uniforms(lights: Iterable[Optional[Light]]) -> List[Tuple[int, Vec3, Vec4]]:
    """``(slot, position, weighted colour)`` for each light; ``None`` entries leave their slot unset."""
    return [
        (slot, light.position, light.weighted_colour())
        for slot, light in enumerate(lights)
        if light is not None
    ]