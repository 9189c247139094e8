import math

import numpy as np
import pytest

from celestial.components import (
    Camera,
    CamKeyboardController,
    Event,
    EventType,
    Key,
    TransformComponent,
)
from celestial.game import Game
from celestial.mesh import Mesh
from celestial.renderer import Renderer

TRIANGLE_OBJ = """v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""


@pytest.fixture
def game(tmp_path):
    models = tmp_path / "models"
    models.mkdir()
    (models / "ico.obj").write_text(TRIANGLE_OBJ)
    (models / "coob.obj").write_text(TRIANGLE_OBJ)
    g = Game(Renderer(tmp_path / "shaders"))
    g.models_dir = models
    g.frame_pacing = False
    g.init("Celestial", 1280, 720)
    return g


def test_init_builds_scene(game):
    assert game.is_running
    assert game.window_size == (1280, 720)
    assert len(game.entity_manager.entities) == 4
    pos = game.main_camera.get_component(TransformComponent).position
    assert np.allclose(pos, [0.0, 1.5, 3.0])
    assert game.main_camera.has_component(CamKeyboardController)


def test_mesh_scales_and_geometry(game):
    e1, e2, e3, _ = game.entity_manager.entities
    assert np.allclose(e1.get_component(Mesh).scale, [0.5, 0.5, 0.5])
    assert np.allclose(e2.get_component(Mesh).scale, [1.0, 5.0, 1.0])
    assert np.allclose(e3.get_component(Mesh).scale, [0.2, 0.2, 0.2])
    assert len(e1.get_component(Mesh).vertices) == 3


def test_resize_updates_window_and_camera(game):
    game.handle_event(Event(EventType.WINDOW_RESIZED, data1=800, data2=400))
    assert game.window_size == (800, 400)
    assert game.viewport == (0, 0, 800, 400)
    camera = game.main_camera.get_component(Camera)
    assert math.isclose(camera.aspect_ratio, 2.0)


def test_resize_to_zero_height_keeps_aspect(game):
    camera = game.main_camera.get_component(Camera)
    before = camera.aspect_ratio
    game.handle_event(Event(EventType.WINDOW_RESIZED, data1=800, data2=0))
    assert camera.aspect_ratio == before


@pytest.mark.parametrize(
    "event",
    [Event(EventType.QUIT), Event(EventType.KEY_DOWN, key=Key.ESCAPE)],
)
def test_quit_and_escape_stop(game, event):
    game.handle_event(event)
    assert game.is_running is False


def test_tab_toggles_cursor(game):
    game.handle_event(Event(EventType.KEY_DOWN, key=Key.TAB))
    assert game.cursor_visible is False
    assert game.mouse_grabbed is True
    game.handle_event(Event(EventType.KEY_DOWN, key=Key.TAB))
    assert game.cursor_visible is True
    assert game.mouse_grabbed is False
    assert game.cursor_position == (640, 360)


def test_update_ages_and_refreshes(game):
    first = game.entity_manager.entities[0]
    first.destroy()
    game.update(16)
    assert game.age == 1
    assert first not in game.entity_manager.entities
    assert len(game.entity_manager.entities) == 3


def test_render_uploads_camera_and_draws(game):
    game.render()
    camera = game.main_camera.get_component(Camera)
    assert np.allclose(game.renderer.uniform("projection"), camera.projection)
    assert np.allclose(game.renderer.uniform("view"), camera.view)
    assert len(game.renderer.draw_calls) == 6
    assert game.frames_presented == 1


def test_render_without_init_raises(tmp_path):
    g = Game(Renderer(tmp_path))
    with pytest.raises(RuntimeError):
        g.render()


def test_controller_reads_current_event(game):
    controller = game.main_camera.get_component(CamKeyboardController)
    game.handle_event(Event(EventType.KEY_DOWN, key=Key.Q))
    game.update(16)
    assert controller.direction[1] == 1.0
    game.handle_event(Event(EventType.KEY_UP, key=Key.Q))
    game.update(16)
    assert controller.direction[1] == 0.0


def test_run_stops_at_quit(game):
    events = [None, None, Event(EventType.QUIT), None, None]
    frames = game.run(events)
    assert frames == 3
    assert game.age == 3
    assert game.closed is True
    assert game.is_running is False


def test_run_ends_when_events_exhausted(game):
    frames = game.run([None, None])
    assert frames == 2
    assert game.frames_presented == 2
    assert game.closed is True