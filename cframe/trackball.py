"""A virtual trackball turning mouse drags into rotation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cframe import transforms
from cframe.matrix import Matrix3, Matrix4
from cframe.vector import VERY_SMALL, Vec3, cross, dot, mag, normalize


class EventType(Enum):
    """Kinds of input event the trackball reacts to."""

    KEY_DOWN = auto()
    KEY_UP = auto()
    MOUSE_BUTTON_DOWN = auto()
    MOUSE_BUTTON_UP = auto()
    MOUSE_MOTION = auto()
    WINDOW_SIZE_CHANGED = auto()


class Key(Enum):
    """Keys with a meaning to the trackball."""

    LEFT_CTRL = auto()
    LEFT_SHIFT = auto()
    SPACE = auto()
    OTHER = auto()


@dataclass
class TrackballEvent:
    """One input event: a key, a mouse position, or a new window size."""

    type: EventType
    key: Key = Key.OTHER
    x: int = 0
    y: int = 0
    left_button_held: bool = False
    width: int = 0
    height: int = 0


def _axis_rotation(angle: float, axis: Vec3) -> Matrix4:
    if mag(axis) < VERY_SMALL:
        return Matrix4()
    return transforms.rotate(angle, axis)


class Trackball:
    """Maps mouse positions in a window onto a unit sphere and tracks drags.

    Holding left Ctrl locks motion to the x axis (rotation about y); left
    Shift locks it to the y axis (rotation about x).
    """

    def __init__(self, width: int = 1600, height: int = 900):
        self.mouse_press_flag = False
        self.mouse_rotation = Matrix4()
        self.rotation_matrix = Matrix4()
        self.viewport_inverse = Matrix4()
        self.start_point = Vec3(0.0)
        self.end_point = Vec3(0.0)
        self.ball_radius = 1.0
        self.x_axis_lock = False
        self.y_axis_lock = False
        self.mouse_x = 0
        self.mouse_y = 0
        self.minimum_movement = 1.0e-7
        self.has_moved = False
        self.set_window_dimensions(width, height)

    @property
    def mouse_rotation_m3(self) -> Matrix3:
        """The accumulated rotation as a 3x3 matrix."""
        return Matrix3.from_matrix4(self.mouse_rotation)

    def set_window_dimensions(self, width: int, height: int) -> None:
        """Use a window of ``width`` by ``height`` pixels."""
        self.viewport_inverse = transforms.inverse(transforms.viewport_ndc(width, height))

    def mouse_vector(self, x: int, y: int) -> Vec3:
        """Project window position ``(x, y)`` onto the trackball, honouring axis locks."""
        if self.x_axis_lock:
            position = Vec3(float(x), float(self.mouse_y), 0.0)
            self.mouse_x = x
        elif self.y_axis_lock:
            position = Vec3(float(self.mouse_x), float(y), 0.0)
            self.mouse_y = y
        else:
            position = Vec3(float(x), float(y), 0.0)
            self.mouse_x = x
            self.mouse_y = y

        v = self.viewport_inverse * position
        planar = v.x * v.x + v.y * v.y
        half_radius = self.ball_radius * 0.5
        if planar <= half_radius:
            return Vec3(v.x, v.y, math.sqrt(1.0 - planar))
        return normalize(Vec3(v.x, v.y, half_radius / math.sqrt(planar)))

    def on_left_mouse_down(self, x: int, y: int) -> None:
        """Start a drag at ``(x, y)``."""
        self.mouse_x = x
        self.mouse_y = y
        self.start_point = self.mouse_vector(x, y)
        self.mouse_press_flag = True

    def on_left_mouse_up(self) -> None:
        """End the drag."""
        self.mouse_press_flag = False

    def on_mouse_move(self, x: int, y: int) -> None:
        """Rotate by the arc from the last point to ``(x, y)`` while dragging."""
        if not self.mouse_press_flag:
            return
        self.has_moved = True
        self.end_point = self.mouse_vector(x, y)

        cos_angle = max(-1.0, min(1.0, dot(self.start_point, self.end_point)))
        angle = math.degrees(math.acos(cos_angle))
        axis = cross(self.start_point, self.end_point)

        if mag(axis) <= self.minimum_movement:
            rotation = Matrix4()
        elif self.x_axis_lock:
            rotation = _axis_rotation(angle, Vec3(0.0, axis.y, 0.0))
        elif self.y_axis_lock:
            rotation = _axis_rotation(angle, Vec3(axis.x, 0.0, 0.0))
        else:
            # z is dropped to keep tiny roundings from piling up over many frames.
            rotation = _axis_rotation(angle, Vec3(axis.x, axis.y, 0.0))

        self.rotation_matrix = rotation
        self.mouse_rotation = rotation * self.mouse_rotation
        self.start_point = self.end_point

    def handle_event(self, event: TrackballEvent) -> None:
        """React to one input event."""
        kind = event.type
        if kind is EventType.KEY_DOWN:
            if event.key is Key.LEFT_CTRL:
                self.x_axis_lock = True
            if event.key is Key.LEFT_SHIFT:
                self.y_axis_lock = True
        elif kind is EventType.KEY_UP:
            if event.key is Key.LEFT_CTRL:
                self.x_axis_lock = False
            if event.key is Key.LEFT_SHIFT:
                self.y_axis_lock = False
        elif kind is EventType.MOUSE_BUTTON_DOWN:
            self.on_left_mouse_down(event.x, event.y)
        elif kind is EventType.MOUSE_BUTTON_UP:
            self.on_left_mouse_up()
        elif kind is EventType.MOUSE_MOTION:
            if event.left_button_held:
                self.on_mouse_move(event.x, event.y)
        elif kind is EventType.WINDOW_SIZE_CHANGED:
            self.set_window_dimensions(event.width, event.height)

    def is_turning(self) -> bool:
        """Whether a drag is in progress."""
        return self.mouse_press_flag