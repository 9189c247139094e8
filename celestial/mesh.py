"""Triangle meshes loaded from Wavefront OBJ files."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable, Sequence

import numpy as np

from . import mathutils
from .components import TransformComponent
from .ecs import Component
from .renderer import Renderer

log = logging.getLogger(__name__)


def _floats(tokens: Sequence[str], count: int) -> list[float]:
    values: list[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values + [0.0] * (count - len(values))


def _face_corner(corner: str) -> tuple[int, int, int]:
    parts = corner.split("/")
    if len(parts) < 3:
        raise ValueError(f"face corner {corner!r} needs vertex/uv/normal indices")
    return int(parts[0]), int(parts[1]), int(parts[2])


def _resolve(table: list[list[float]], indices: list[int], width: int, kind: str) -> np.ndarray:
    resolved = []
    for index in indices:
        if not 1 <= index <= len(table):
            raise IndexError(f"{kind} index {index} out of range 1..{len(table)}")
        resolved.append(table[index - 1])
    return np.array(resolved, dtype=float).reshape(-1, width)


def parse_obj(lines: Iterable[str]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Parse OBJ text into per-corner ``(vertices, uvs, normals)`` arrays.

    Faces must give ``v/vt/vn`` for each corner; only the first three
    corners of a face are used.
    """
    positions: list[list[float]] = []
    tex_coords: list[list[float]] = []
    normals: list[list[float]] = []
    vertex_idx: list[int] = []
    uv_idx: list[int] = []
    normal_idx: list[int] = []

    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        prefix, rest = tokens[0], tokens[1:]
        if prefix == "v":
            positions.append(_floats(rest, 3))
        elif prefix == "vt":
            tex_coords.append(_floats(rest, 2))
        elif prefix == "vn":
            normals.append(_floats(rest, 3))
        elif prefix == "f":
            for corner in rest[:3]:
                v, t, n = _face_corner(corner)
                vertex_idx.append(v)
                uv_idx.append(t)
                normal_idx.append(n)

    return (
        _resolve(positions, vertex_idx, 3, "vertex"),
        _resolve(tex_coords, uv_idx, 2, "uv"),
        _resolve(normals, normal_idx, 3, "normal"),
    )


class Mesh(Component):
    """A coloured mesh drawn filled, with optional wireframe edges."""

    def __init__(
        self,
        renderer: Renderer,
        filepath: str | PathLike[str],
        color: Sequence[float],
    ) -> None:
        self.renderer = renderer
        self.filepath = filepath
        self.color = np.array(color, dtype=float)
        self.edgecolor = np.zeros(3)
        self.wireframe = True
        self.scale = np.ones(3)
        self.transform: TransformComponent | None = None
        self.vertices = np.empty((0, 3))
        self.uvs = np.empty((0, 2))
        self.normals = np.empty((0, 3))
        self.vertex_buffer = np.empty(0, dtype=np.float32)

    def load_obj(self, filepath: str | PathLike[str]) -> bool:
        """Append the geometry of an OBJ file; False if it cannot be opened."""
        try:
            with open(filepath, encoding="utf-8") as stream:
                log.info("Reading file %s", filepath)
                vertices, uvs, normals = parse_obj(stream)
        except OSError:
            return False
        self.vertices = np.concatenate([self.vertices, vertices])
        self.uvs = np.concatenate([self.uvs, uvs])
        self.normals = np.concatenate([self.normals, normals])
        return True

    def init(self) -> None:
        self.transform = self.entity.get_component(TransformComponent)
        self.load_obj(self.filepath)
        self.vertex_buffer = np.ascontiguousarray(self.vertices, dtype=np.float32).ravel()

    def render(self) -> None:
        model = mathutils.scale(mathutils.identity(), self.scale)
        model = mathutils.translate(model, self.transform.position)
        self.renderer.set_mat4("model", model)
        count = len(self.vertices)

        self.renderer.set_vec3("color", self.color)
        self.renderer.draw_calls.append(("fill", count, tuple(self.color.tolist())))

        if self.wireframe:
            self.renderer.set_vec3("color", self.edgecolor)
            self.renderer.draw_calls.append(
                ("line", count, tuple(self.edgecolor.tolist()))
            )