"""Reader for the triangle subset of the Wavefront OBJ format."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

from cframe.vector import Vec2, Vec3

PathLike = Union[str, "os.PathLike[str]"]


class ObjParseError(ValueError):
    """Raised when OBJ text cannot be read."""


@dataclass
class MeshData:
    """Per-corner attributes of a triangle list, ready for drawing."""

    vertices: List[Vec3] = field(default_factory=list)
    uv_coords: List[Vec2] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)


def _floats(tokens: Sequence[str], count: int, line_no: int) -> List[float]:
    if len(tokens) < count:
        raise ObjParseError(f"line {line_no}: expected {count} numbers")
    try:
        return [float(t) for t in tokens[:count]]
    except ValueError as exc:
        raise ObjParseError(f"line {line_no}: {exc}") from None


def _face_corners(tokens: Sequence[str], line_no: int) -> List[Tuple[int, int, int]]:
    """The first three ``v/vt/vn`` corners of a face; any further corners are ignored."""
    if len(tokens) < 3:
        raise ObjParseError(f"line {line_no}: a face needs three v/vt/vn corners")
    corners = []
    for token in tokens[:3]:
        parts = token.split("/")
        if len(parts) != 3:
            raise ObjParseError(f"line {line_no}: face corner {token!r} is not v/vt/vn")
        try:
            v, vt, vn = (int(p) for p in parts)
        except ValueError:
            raise ObjParseError(f"line {line_no}: face corner {token!r} is not v/vt/vn") from None
        corners.append((v, vt, vn))
    return corners


def _lookup(items: list, index: int, kind: str):
    if not 1 <= index <= len(items):
        raise ObjParseError(f"{kind} index {index} is out of range")
    return items[index - 1]


def parse_obj(lines: Iterable[str]) -> MeshData:
    """Parse OBJ lines into flat vertex, texture-coordinate and normal lists.

    Texture ``v`` coordinates are negated. Faces must be triangles given as
    ``v/vt/vn``; lines with other keywords are skipped.
    """
    positions: List[Vec3] = []
    uvs: List[Vec2] = []
    normals: List[Vec3] = []
    corners: List[Tuple[int, int, int]] = []

    for line_no, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        head, rest = tokens[0], tokens[1:]
        if head == "v":
            positions.append(Vec3(*_floats(rest, 3, line_no)))
        elif head == "vt":
            u, v = _floats(rest, 2, line_no)
            uvs.append(Vec2(u, -v))
        elif head == "vn":
            normals.append(Vec3(*_floats(rest, 3, line_no)))
        elif head == "f":
            corners.extend(_face_corners(rest, line_no))

    mesh = MeshData()
    for v, vt, vn in corners:
        mesh.vertices.append(_lookup(positions, v, "vertex"))
        mesh.uv_coords.append(_lookup(uvs, vt, "texture coordinate"))
        mesh.normals.append(_lookup(normals, vn, "normal"))
    return mesh


def load_obj(path: PathLike) -> MeshData:
    """Read and parse an OBJ file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_obj(handle)