"""Matrix builders for OpenGL-style transforms.

Every matrix is a column-major :class:`~cframe.matrix.Matrix4`.
"""

from __future__ import annotations

import math
from typing import List

from cframe.matrix import Matrix4
from cframe.vector import DEGREES_TO_RADIANS, VERY_SMALL, Vec3, cross, dot, normalize


def _xyz(args: tuple, name: str) -> tuple:
    """Accept either one vector or three numbers."""
    if len(args) == 1:
        x, y, z = tuple(args[0])[:3]
        return float(x), float(y), float(z)
    if len(args) == 3:
        return tuple(float(a) for a in args)
    raise TypeError(f"{name} takes a vector or three numbers, got {len(args)} arguments")


def rotate(degrees: float, axis: Vec3) -> Matrix4:
    """Rotation of ``degrees`` about ``axis`` (normalised first)."""
    a = normalize(Vec3(*tuple(axis)[:3]))
    radians = degrees * DEGREES_TO_RADIANS
    c = math.cos(radians)
    s = math.sin(radians)
    k = 1.0 - c
    return Matrix4(
        a.x * a.x * k + c, a.x * a.y * k + a.z * s, a.x * a.z * k - a.y * s, 0.0,
        a.x * a.y * k - a.z * s, a.y * a.y * k + c, a.y * a.z * k + a.x * s, 0.0,
        a.x * a.z * k + a.y * s, a.y * a.z * k - a.x * s, a.z * a.z * k + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def translate(*args) -> Matrix4:
    """Translation by a vector or by ``x, y, z``."""
    x, y, z = _xyz(args, "translate")
    return Matrix4(
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        x, y, z, 1.0,
    )


def scale(*args) -> Matrix4:
    """Scale by a vector or by ``x, y, z``."""
    x, y, z = _xyz(args, "scale")
    return Matrix4(
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def perspective(fovy: float, aspect: float, z_near: float, z_far: float) -> Matrix4:
    """Right-handed perspective projection; ``fovy`` in degrees."""
    cot = 1.0 / math.tan(fovy * 0.5 * DEGREES_TO_RADIANS)
    return Matrix4(
        cot / aspect, 0.0, 0.0, 0.0,
        0.0, cot, 0.0, 0.0,
        0.0, 0.0, (z_near + z_far) / (z_near - z_far), -1.0,
        0.0, 0.0, (2.0 * z_near * z_far) / (z_near - z_far), 0.0,
    )


def viewport_ndc(width: int, height: int) -> Matrix4:
    """Map normalised device coordinates to screen pixels (y pointing down)."""
    min_z, max_z = 0.0, 1.0
    flip = scale(1.0, -1.0, 1.0)
    stretch = scale(width / 2.0, height / 2.0, max_z - min_z)
    shift = translate(width / 2.0, height / 2.0, min_z)
    return shift * stretch * flip


def orthographic(
    x_min: float, x_max: float, y_min: float, y_max: float, z_min: float, z_max: float
) -> Matrix4:
    """Orthographic projection of the given box."""
    s = scale(2.0 / (x_max - x_min), 2.0 / (y_max - y_min), -2.0 / (z_max - z_min))
    t = translate(
        -(x_max + x_min) / (x_max - x_min),
        -(y_max + y_min) / (y_max - y_min),
        -(z_max + z_min) / (z_max - z_min),
    )
    return t * s


def un_ortho(ortho: Matrix4) -> Matrix4:
    """Undo the scale and translation of an orthographic matrix."""
    m = Matrix4()
    m[0] = 1.0 / ortho[0]
    m[5] = 1.0 / ortho[5]
    m[10] = 1.0 / ortho[10]
    m[12] = -ortho[12] * m[0]
    m[13] = -ortho[13] * m[5]
    m[14] = -ortho[14] * m[10]
    m[15] = 1.0
    return m


def look_at(eye: Vec3, at: Vec3, up: Vec3) -> Matrix4:
    """View matrix for a camera at ``eye`` looking at ``at``."""
    forward = normalize(at - eye)
    up_n = normalize(up)
    side = normalize(cross(forward, up_n))
    true_up = cross(side, forward)
    return Matrix4(
        side.x, side.y, side.z, 0.0,
        true_up.x, true_up.y, true_up.z, 0.0,
        -forward.x, -forward.y, -forward.z, 0.0,
        -dot(side, eye), -dot(true_up, eye), dot(forward, eye), 1.0,
    )


def transpose(m: Matrix4) -> Matrix4:
    """Swap rows and columns."""
    return Matrix4([m[col * 4 + row] for row in range(4) for col in range(4)])


def _det3(a: List[List[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def inverse(m: Matrix4) -> Matrix4:
    """Inverse of ``m``; raises ZeroDivisionError when it is (nearly) singular."""
    rows = [[m[col * 4 + row] for col in range(4)] for row in range(4)]

    def cofactor(r: int, c: int) -> float:
        minor = [
            [value for j, value in enumerate(row) if j != c]
            for i, row in enumerate(rows)
            if i != r
        ]
        return (-1.0) ** (r + c) * _det3(minor)

    cof = [[cofactor(r, c) for c in range(4)] for r in range(4)]
    determinant = sum(rows[0][c] * cof[0][c] for c in range(4))
    if abs(determinant) < VERY_SMALL:
        raise ZeroDivisionError("Divide by nearly zero in inverse!")
    factor = 1.0 / determinant
    # inverse[r][c] = cof[c][r] / det, stored column-major at c * 4 + r
    return Matrix4([cof[c][r] * factor for c in range(4) for r in range(4)])


def remove_translation(m: Matrix4) -> Matrix4:
    """Copy of ``m`` with the last row and the translation column zeroed."""
    result = Matrix4(list(m))
    for index in (3, 7, 11, 12, 13, 14, 15):
        result[index] = 0.0
    return result