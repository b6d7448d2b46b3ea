"""Column-major 4x4 and 3x3 matrices in the OpenGL layout.

A 4x4 matrix is stored as 16 numbers; element ``i`` sits at row ``i % 4``
and column ``i // 4``::

    0  4  8  12
    1  5  9  13
    2  6  10 14
    3  7  11 15
"""

from __future__ import annotations

from numbers import Real
from typing import Iterator, List, Sequence

from cframe.vector import Vec3, Vec4


def _identity(size: int) -> List[float]:
    return [1.0 if i // size == i % size else 0.0 for i in range(size * size)]


def _elements(values: Sequence, size: int, kind: str) -> List[float]:
    """Turn constructor arguments into a flat list of ``size * size`` floats.

    No arguments, or the single value 1.0, give the identity; any other single
    number fills every element; a single iterable or ``size * size`` numbers
    give the elements in storage order.
    """
    count = size * size
    if not values:
        return _identity(size)
    if len(values) == 1:
        (only,) = values
        if isinstance(only, Real):
            return _identity(size) if only == 1.0 else [float(only)] * count
        values = tuple(only)
    if len(values) != count:
        raise TypeError(f"{kind} takes one value or {count}, got {len(values)}")
    return [float(v) for v in values]


def _product(a: List[float], b: List[float], n: int) -> List[float]:
    return [
        sum(a[k * n + row] * b[col * n + k] for k in range(n))
        for col in range(n)
        for row in range(n)
    ]


def _format(m: List[float], n: int) -> str:
    return "\n".join(
        " ".join(f"{m[col * n + row]:1.8f}" for col in range(n))
        for row in range(n)
    )


class Matrix4:
    """A 4x4 column-major matrix."""

    def __init__(self, *values):
        self._m = _elements(values, 4, "Matrix4")

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls()

    @classmethod
    def filled(cls, value: float) -> Matrix4:
        """A matrix built from one value: the identity for 1.0, else ``value`` everywhere."""
        return cls(value)

    def __mul__(self, other):
        """Multiply by a matrix, a :class:`Vec4`, or a :class:`Vec3` taken as a point (w = 1)."""
        m = self._m
        if isinstance(other, Matrix4):
            return Matrix4(_product(m, other._m, 4))
        if isinstance(other, Vec4):
            return Vec4(
                *(
                    other.x * m[r] + other.y * m[4 + r] + other.z * m[8 + r] + other.w * m[12 + r]
                    for r in range(4)
                )
            )
        if isinstance(other, Vec3):
            return Vec3(
                *(
                    other.x * m[r] + other.y * m[4 + r] + other.z * m[8 + r] + m[12 + r]
                    for r in range(3)
                )
            )
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __len__(self) -> int:
        return len(self._m)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def column(self, index: int) -> Vec4:
        """Column ``index`` as a vector."""
        if not 0 <= index < 4:
            raise IndexError("column index out of range")
        return Vec4(*self._m[4 * index:4 * index + 4])

    def row(self, index: int) -> Vec4:
        """Row ``index`` as a vector."""
        if not 0 <= index < 4:
            raise IndexError("row index out of range")
        return Vec4(*self._m[index::4])

    def __str__(self) -> str:
        return _format(self._m, 4)

    def __repr__(self) -> str:
        return f"Matrix4({', '.join(repr(v) for v in self._m)})"


class Matrix3:
    """A 3x3 column-major matrix."""

    def __init__(self, *values):
        self._m = _elements(values, 3, "Matrix3")

    @classmethod
    def identity(cls) -> Matrix3:
        """The identity matrix."""
        return cls()

    @classmethod
    def filled(cls, value: float) -> Matrix3:
        """A matrix built from one value: the identity for 1.0, else ``value`` everywhere."""
        return cls(value)

    @classmethod
    def from_matrix4(cls, m: Matrix4) -> Matrix3:
        """The upper-left 3x3 block of a 4x4 matrix."""
        return cls(m[0], m[1], m[2], m[4], m[5], m[6], m[8], m[9], m[10])

    def __mul__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(_product(self._m, other._m, 3))

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __len__(self) -> int:
        return len(self._m)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return _format(self._m, 3)

    def __repr__(self) -> str:
        return f"Matrix3({', '.join(repr(v) for v in self._m)})"