"""Small vector types and the vector math used by the rest of the framework."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional

VERY_SMALL = 1.0e-7
"""Magnitudes below this count as zero when dividing."""

DEGREES_TO_RADIANS = math.pi / 180.0


def _check_divisor(s: float) -> None:
    if abs(s) < VERY_SMALL:
        raise ZeroDivisionError("Divide by nearly zero!")


@dataclass
class Vec2:
    """A two component vector, used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(init=False)
class Vec3:
    """A three component vector.

    ``Vec3(s)`` fills every component with ``s``; ``Vec3(x, y, z)`` sets each.
    """

    x: float
    y: float
    z: float

    def __init__(self, x: float = 0.0, y: Optional[float] = None, z: Optional[float] = None):
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("Vec3 takes one value or three")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return self * (1.0 / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass(init=False)
class Vec4(Vec3):
    """A four component vector built on :class:`Vec3`.

    ``Vec4(s)`` fills every component with ``s``.
    """

    w: float

    def __init__(
        self,
        x: float = 0.0,
        y: Optional[float] = None,
        z: Optional[float] = None,
        w: Optional[float] = None,
    ):
        if y is None and z is None and w is None:
            y = z = w = x
        elif y is None or z is None or w is None:
            raise TypeError("Vec4 takes one value or four")
        super().__init__(x, y, z)
        self.w = float(w)

    @classmethod
    def from_vec3(cls, v: Vec3) -> Vec4:
        """Widen a Vec3 to a Vec4 with ``w`` set to 1."""
        return cls(v.x, v.y, v.z, 1.0)

    @staticmethod
    def _widen(other: Vec3) -> Vec4:
        return other if isinstance(other, Vec4) else Vec4.from_vec3(other)

    def __add__(self, other: Vec3) -> Vec4:
        if not isinstance(other, Vec3):
            return NotImplemented
        o = self._widen(other)
        return Vec4(self.x + o.x, self.y + o.y, self.z + o.z, self.w + o.w)

    def __sub__(self, other: Vec3) -> Vec4:
        if not isinstance(other, Vec3):
            return NotImplemented
        o = self._widen(other)
        # The w component is computed as other.w - self.w.
        return Vec4(self.x - o.x, self.y - o.y, self.z - o.z, o.w - self.w)

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(scalar * self.x, scalar * self.y, scalar * self.z, scalar * self.w)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return self * (1.0 / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass(init=False)
class Plane(Vec3):
    """A plane: normal ``(x, y, z)`` and distance ``d`` from the origin."""

    d: float

    def __init__(
        self,
        x: float = 0.0,
        y: Optional[float] = None,
        z: Optional[float] = None,
        d: Optional[float] = None,
    ):
        if y is None and z is None and d is None:
            y = z = d = x
        elif y is None or z is None or d is None:
            raise TypeError("Plane takes one value or four")
        super().__init__(x, y, z)
        self.d = float(d)

    def normalized(self) -> Plane:
        """Return the plane with a unit normal and ``d`` scaled to match."""
        a = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        _check_divisor(a)
        return Plane(self.x / a, self.y / a, self.z / a, self.d / a)


@dataclass(init=False)
class Sphere(Vec3):
    """A sphere: centre ``(x, y, z)`` and radius ``r``."""

    r: float

    def __init__(
        self,
        x: float = 0.0,
        y: Optional[float] = None,
        z: Optional[float] = None,
        r: Optional[float] = None,
    ):
        if y is None and z is None and r is None:
            y = z = r = x
        elif y is None or z is None or r is None:
            raise TypeError("Sphere takes one value or four")
        super().__init__(x, y, z)
        self.r = float(r)


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of the xyz parts of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def mag(a: Vec3) -> float:
    """Length of a vector."""
    return math.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def rotate(n: Vec3, theta: float, v: Vec3) -> Vec3:
    """Rotate ``v`` by ``theta`` radians about the unit axis ``n``."""
    c = math.cos(theta)
    s = math.sin(theta)
    return Vec3(*v) * c + dot(v, n) * Vec3(*n) * (1.0 - c) + cross(n, v) * s


def normalize(a: Vec3) -> Vec3:
    """Return a unit vector in the direction of ``a``."""
    magnitude = mag(a)
    _check_divisor(magnitude)
    return Vec3(a.x / magnitude, a.y / magnitude, a.z / magnitude)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` about a normal or a plane's normal."""
    scalar = 2.0 * dot(v, n)
    return Vec3(n.x, n.y, n.z) * scalar - Vec3(v.x, v.y, v.z)


def distance(a: Vec3, b: Vec3) -> float:
    """Distance between two points, a point and a plane, or a sphere and a plane."""
    if isinstance(b, Plane):
        point_distance = a.x * b.x + a.y * b.y + a.z * b.z - b.d
        if isinstance(a, Sphere):
            return point_distance - a.r
        return point_distance
    return mag(Vec3(a.x - b.x, a.y - b.y, a.z - b.z))


def lerp(v1: Vec3, v2: Vec3, t: float) -> Vec3:
    """Linear interpolation from ``v1`` (t = 0) to ``v2`` (t = 1)."""
    return v1 + t * (v2 - v1)