"""Shader-program state: shader sources, render settings and uniforms."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Sequence

import numpy as np

log = logging.getLogger(__name__)

VERTEX_SHADER = "shader0.vert"
FRAGMENT_SHADER = "shader0.frag"


def load_shader_file(path: str | PathLike[str]) -> str:
    """Read a shader source, ending every line with a newline.

    A file that cannot be opened yields an empty string.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        return ""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "".join(f"{line}\n" for line in lines)


class Renderer:
    """Holds one shader program and the uniforms set on it.

    ``draw_calls`` collects ``(polygon_mode, vertex_count, color)`` records
    for every draw issued against the program.
    """

    def __init__(self, shader_dir: str | PathLike[str] = "assets/shaders") -> None:
        self.shader_dir = Path(shader_dir)
        self.vertex_source = ""
        self.fragment_source = ""
        self.clear_color = (0.2, 0.2, 0.2, 1.0)
        self.depth_test = False
        self.depth_func: str | None = None
        self.initialized = False
        self.in_use = False
        self.draw_calls: list[tuple[str, int, tuple[float, ...]]] = []
        self._uniforms: dict[str, np.ndarray] = {}

    def init(self) -> None:
        """Enable depth testing and build the program from its shader files."""
        self.depth_test = True
        self.depth_func = "less"
        self.vertex_source = load_shader_file(self.shader_dir / VERTEX_SHADER)
        self.fragment_source = load_shader_file(self.shader_dir / FRAGMENT_SHADER)
        for kind, source in (
            ("Vertex", self.vertex_source),
            ("Fragment", self.fragment_source),
        ):
            if not source.strip():
                log.warning("%s shader compilation failed: empty source", kind)
        self._uniforms.clear()
        self.draw_calls.clear()
        self.in_use = False
        self.initialized = True

    def use(self) -> None:
        """Make the program current."""
        if not self.initialized:
            raise RuntimeError("renderer has not been initialised")
        self.in_use = True

    def _require_program(self) -> None:
        if not self.in_use:
            raise RuntimeError("no shader program is in use")

    def set_mat4(self, name: str, mat: Sequence[Sequence[float]] | np.ndarray) -> None:
        self._require_program()
        arr = np.array(mat, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError(f"uniform {name!r} needs a 4x4 matrix, got {arr.shape}")
        self._uniforms[name] = arr

    def set_vec3(self, name: str, vec: Sequence[float] | np.ndarray) -> None:
        self._require_program()
        arr = np.array(vec, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f"uniform {name!r} needs a 3-vector, got {arr.shape}")
        self._uniforms[name] = arr

    def uniform(self, name: str) -> np.ndarray:
        """Current value of a uniform, as a copy."""
        try:
            return self._uniforms[name].copy()
        except KeyError:
            raise KeyError(f"uniform {name!r} has not been set") from None