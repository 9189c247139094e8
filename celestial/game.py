"""The application: a scene of entities, input handling and the frame loop."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable

import numpy as np

from .components import (
    Camera,
    CamKeyboardController,
    Event,
    EventType,
    Key,
    TransformComponent,
)
from .ecs import Entity, EntityManager
from .mesh import Mesh
from .renderer import Renderer

log = logging.getLogger(__name__)

FRAMERATE = 60
FRAMELENGTH_MS = 1000 // FRAMERATE

COLOR_RED = (1.0, 0.0, 0.0)
COLOR_CYAN = (0.0, 1.0, 1.0)
COLOR_DARK_RED = (0.5, 0.1, 0.1)


class Game:
    """Owns the scene and the window state, and drives frames from events.

    Each frame's event is held in ``event`` so that components such as the
    keyboard camera controller can read it during ``update``.
    """

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer
        self.entity_manager = EntityManager()
        self.models_dir = Path("assets/models")
        self.event: Event | None = None
        self.is_running = False
        self.title = ""
        self.window_size = (0, 0)
        self.viewport = (0, 0, 0, 0)
        self.main_camera: Entity | None = None
        self.age = 0
        self.cursor_visible = True
        self.mouse_grabbed = False
        self.cursor_position: tuple[int, int] | None = None
        self.frames_presented = 0
        self.frame_pacing = True
        self.closed = False

    def init(self, title: str, width: int, height: int) -> None:
        """Open the window state, build the shader program and populate the scene."""
        self.title = title
        self.window_size = (width, height)
        self.viewport = (0, 0, width, height)
        self.renderer.init()
        self.is_running = True
        self.closed = False

        ico = self.models_dir / "ico.obj"
        cube = self.models_dir / "coob.obj"

        e1 = self.entity_manager.add_entity()
        e1.add_component(TransformComponent, 0.0, 0.0, 0.0)
        e1.add_component(Mesh, self.renderer, ico, COLOR_RED).scale = np.full(3, 0.5)

        e2 = self.entity_manager.add_entity()
        e2.add_component(TransformComponent, 3.0, 0.0, 0.0)
        e2.add_component(Mesh, self.renderer, cube, COLOR_CYAN).scale[1] = 5.0

        e3 = self.entity_manager.add_entity()
        e3.add_component(TransformComponent, 0.0, 5.0, 0.0)
        e3.add_component(Mesh, self.renderer, ico, COLOR_DARK_RED).scale = np.full(3, 0.2)

        camera = self.entity_manager.add_entity()
        camera.add_component(TransformComponent, 0.0, 1.5, 3.0)
        camera.add_component(Camera, renderer=self.renderer)
        camera.add_component(CamKeyboardController, event_source=lambda: self.event)
        self.main_camera = camera

    def handle_event(self, event: Event | None) -> None:
        """Record this frame's event and react to quit, resize and key presses."""
        self.event = event
        if event is None:
            return
        if event.type is EventType.QUIT:
            self.is_running = False
        elif event.type is EventType.WINDOW_RESIZED:
            width, height = event.data1, event.data2
            self.window_size = (width, height)
            self.viewport = (0, 0, width, height)
            if self.main_camera is not None:
                aspect = width / height if height else 0.0
                self.main_camera.get_component(Camera).update_projection(aspect)
            log.info("Window resized to (%d, %d)", width, height)
        elif event.type is EventType.KEY_DOWN:
            if event.key is Key.ESCAPE:
                self.is_running = False
            elif event.key is Key.TAB:
                self.toggle_cursor()

    def update(self, framelength: int) -> None:
        self.entity_manager.refresh()
        self.entity_manager.update()
        self.age += 1

    def render(self) -> None:
        """Clear the frame, upload the camera and draw every entity."""
        if self.main_camera is None:
            raise RuntimeError("game has no camera; call init() first")
        self.renderer.draw_calls.clear()
        self.renderer.use()
        self.main_camera.get_component(Camera).set_camera()
        self.entity_manager.render()
        self.frames_presented += 1

    def toggle_cursor(self, state: bool | None = None) -> None:
        """Show (and free) or hide (and grab) the cursor; toggles when ``state`` is None."""
        if state is None:
            state = not self.cursor_visible
        if state:
            width, height = self.window_size
            self.cursor_position = (width // 2, height // 2)
            self.cursor_visible = True
            self.mouse_grabbed = False
        else:
            self.cursor_visible = False
            self.mouse_grabbed = True

    def clean(self) -> None:
        self.is_running = False
        self.closed = True
        log.info("Travail termine !")

    def run(self, events: Iterable[Event | None]) -> int:
        """Run one frame per event until quit or the events run out; return frames run."""
        frames = 0
        for event in events:
            if not self.is_running:
                break
            start = time.monotonic()
            self.handle_event(event)
            self.update(FRAMELENGTH_MS)
            self.render()
            frames += 1
            if self.frame_pacing:
                elapsed_ms = (time.monotonic() - start) * 1000.0
                if elapsed_ms < FRAMELENGTH_MS:
                    time.sleep((FRAMELENGTH_MS - elapsed_ms) / 1000.0)
        self.clean()
        return frames