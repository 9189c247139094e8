"""Vector, quaternion and 4x4 matrix helpers for 3D rendering.

Matrices are numpy arrays in the usual mathematical layout, ``m[row, col]``,
acting on column vectors; upload ``m.T`` (or ask for a transpose) where a
column-major array is expected. Quaternions are ``[w, x, y, z]`` arrays.
Projections follow the right-handed convention with a -1..1 depth range.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float)


def format_vec3(v: Sequence[float]) -> str:
    """Format a 3-component vector as ``(x, y, z)``."""
    x, y, z = (float(c) for c in v)
    return f"({x:g}, {y:g}, {z:g})"


def identity() -> np.ndarray:
    return np.eye(4)


def normalize(v: Sequence[float]) -> np.ndarray:
    arr = _vec(v)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def quat_from_axis_angle(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about a unit ``axis``."""
    half = angle * 0.5
    s = math.sin(half)
    ax, ay, az = _vec(axis)
    return np.array([math.cos(half), ax * s, ay * s, az * s])


def quat_multiply(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Hamilton product ``a * b``: rotation ``b`` followed by ``a``."""
    w1, x1, y1, z1 = _vec(a)
    w2, x2, y2, z2 = _vec(b)
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
            w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
        ]
    )


def quat_normalize(q: Sequence[float]) -> np.ndarray:
    """Unit quaternion; a zero quaternion becomes the identity rotation."""
    arr = _vec(q)
    length = float(np.linalg.norm(arr))
    if length <= 0.0:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return arr / length


def quat_rotate(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Rotate vector ``v`` by quaternion ``q``."""
    arr = _vec(q)
    w, qv = arr[0], arr[1:]
    vec = _vec(v)
    uv = np.cross(qv, vec)
    uuv = np.cross(qv, uv)
    return vec + (uv * w + uuv) * 2.0


def quat_to_mat4(q: Sequence[float]) -> np.ndarray:
    w, x, y, z = _vec(q)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def quat_to_euler(q: Sequence[float]) -> np.ndarray:
    """Euler angles ``(pitch, yaw, roll)`` in radians."""
    w, x, y, z = _vec(q)
    py = 2.0 * (y * z + w * x)
    px = w * w - x * x - y * y + z * z
    if abs(px) < _EPSILON and abs(py) < _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(py, px)
    yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))
    roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
    return np.array([pitch, yaw, roll])


def translate(m: np.ndarray, v: Sequence[float]) -> np.ndarray:
    """``m`` followed on the right by a translation by ``v``."""
    t = np.eye(4)
    t[:3, 3] = _vec(v)
    return np.asarray(m, dtype=float) @ t


def scale(m: np.ndarray, v: Sequence[float]) -> np.ndarray:
    """``m`` followed on the right by a per-axis scale by ``v``."""
    s = np.diag([*_vec(v), 1.0])
    return np.asarray(m, dtype=float) @ s


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fovy`` is the vertical field of view in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """View matrix placing the camera at ``eye`` looking toward ``center``."""
    eye_v = _vec(eye)
    f = normalize(_vec(center) - eye_v)
    s = normalize(np.cross(f, _vec(up)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye_v))
    m[1, 3] = -float(np.dot(u, eye_v))
    m[2, 3] = float(np.dot(f, eye_v))
    return m