"""Components: transform, camera and keyboard camera control, plus input events."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from . import mathutils
from .ecs import Component
from .renderer import Renderer


class EventType(enum.Enum):
    QUIT = enum.auto()
    WINDOW_RESIZED = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    MOUSE_MOTION = enum.auto()


class Key(enum.Enum):
    ESCAPE = enum.auto()
    TAB = enum.auto()
    Z = enum.auto()
    S = enum.auto()
    Q = enum.auto()
    D = enum.auto()


@dataclass(frozen=True)
class Event:
    """An input or window event; ``data1``/``data2`` carry a resize's size."""

    type: EventType
    key: Key | None = None
    data1: int = 0
    data2: int = 0


class TransformComponent(Component):
    """Position and orientation (quaternion ``[w, x, y, z]``) of an entity."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.position = np.array([x, y, z], dtype=float)
        self.rotation = np.array([1.0, 0.0, 0.0, 0.0])


@dataclass(eq=False)
class Camera(Component):
    """Perspective or orthographic camera feeding projection and view uniforms."""

    renderer: Renderer | None = None
    active: bool = True
    ortho: bool = False
    aspect_ratio: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 100.0
    fov_deg: float = 90.0
    height: float = 5.0
    width: float = field(init=False)
    projection: np.ndarray = field(init=False)
    view: np.ndarray = field(default_factory=mathutils.identity)
    transform: TransformComponent | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.width = self.height * self.aspect_ratio
        self.projection = mathutils.identity()

    def init(self) -> None:
        self.transform = self.entity.get_component(TransformComponent)
        self.update_projection(0.0)

    def set_perspective(self) -> None:
        self.projection = mathutils.perspective(
            math.radians(self.fov_deg), self.aspect_ratio, self.near, self.far
        )
        self.ortho = False

    def set_ortho(self) -> None:
        half_w, half_h = self.width / 2.0, self.height / 2.0
        self.projection = mathutils.ortho(
            -half_w, half_w, -half_h, half_h, self.near, self.far
        )
        self.ortho = True

    def update_projection(self, aspect: float) -> None:
        """Rebuild the projection; an aspect of 0.01 or less keeps the current one."""
        if aspect <= 0.01:
            aspect = self.aspect_ratio
        self.aspect_ratio = aspect
        self.width = self.height * aspect
        if self.ortho:
            self.set_ortho()
        else:
            self.set_perspective()

    def set_camera(self) -> None:
        """Upload projection and view to the renderer."""
        if self.renderer is None:
            raise RuntimeError("camera has no renderer")
        self.renderer.set_mat4("projection", self.projection)
        self.renderer.set_mat4("view", self.view)


_PRESS = {Key.Z: (0, -1.0), Key.S: (0, 1.0), Key.Q: (1, 1.0), Key.D: (1, -1.0)}


@dataclass(eq=False)
class CamKeyboardController(Component):
    """Rotates the entity's camera from Z/S (pitch) and Q/D (yaw) keys.

    ``event_source`` returns the current frame's event, or ``None``.
    """

    event_source: Callable[[], Event | None] | None = None
    rotspeed: float = math.pi / 60.0
    person: str = "third"
    inv_x: bool = True
    inv_y: bool = True
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    direction: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angles: np.ndarray = field(default_factory=lambda: np.zeros(3))
    camera_target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    transform: TransformComponent | None = field(init=False, default=None)
    camera: Camera | None = field(init=False, default=None)

    def init(self) -> None:
        self.transform = self.entity.get_component(TransformComponent)
        self.camera = self.entity.get_component(Camera)

    def update(self) -> None:
        event = self.event_source() if self.event_source is not None else None
        if event is not None and event.key in _PRESS:
            axis, value = _PRESS[event.key]
            if event.type is EventType.KEY_DOWN:
                self.direction[axis] = value
            elif event.type is EventType.KEY_UP:
                self.direction[axis] = 0.0

        if self.person == "first":
            self.update_firstperson()
        else:
            self.update_thirdperson()

    def update_firstperson(self) -> None:
        rotation = self.transform.rotation
        vertical = mathutils.normalize(mathutils.quat_rotate(rotation, (0.0, 1.0, 0.0)))
        yaw = mathutils.quat_from_axis_angle(self.rotspeed * self.direction[1], vertical)
        rotation = mathutils.quat_normalize(mathutils.quat_multiply(yaw, rotation))

        pitch = mathutils.quat_from_axis_angle(
            self.rotspeed * self.direction[0], (1.0, 0.0, 0.0)
        )
        rotation = mathutils.quat_normalize(mathutils.quat_multiply(pitch, rotation))
        self.transform.rotation = rotation

        trans = mathutils.translate(mathutils.identity(), -self.transform.position)
        rot = mathutils.quat_to_mat4(rotation)
        self.angles = mathutils.quat_to_euler(rotation)
        self.camera.view = rot @ trans

    def update_thirdperson(self) -> None:
        """Leave the view untouched; only refresh the recorded Euler angles."""
        if self.transform is not None:
            self.angles = mathutils.quat_to_euler(self.transform.rotation)

    def set_view_target(self) -> None:
        self.camera.view = mathutils.look_at(
            self.transform.position, self.camera_target, self.up
        )