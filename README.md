# celestial

A small 3D scene engine built around an entity-component system. A scene is
made of entities. Each entity carries components: a transform, a camera, a
keyboard-driven camera controller, or a mesh loaded from a Wavefront OBJ file.
The maths uses numpy. It covers 4×4 matrices, quaternions, and the
perspective, orthographic and look-at projections.

## Modules

- `celestial.ecs` has `Component`, `Entity` and `EntityManager`.
  - An entity holds at most one component of each type. `add_component`
    builds the component, attaches it and runs its `init`.
  - `get_component` raises `KeyError` when the entity has no component of
    that type.
  - Entities can join numbered groups from 0 to 63. Any other group number
    raises `IndexError`.
  - `EntityManager.refresh()` removes destroyed entities. It also drops
    entities from groups they have left.
- `celestial.vectors` has the `Vector2` and `Vector3` dataclasses.
  - The binary operators `+`, `-`, `*` and `/` work element-wise and return
    new vectors.
  - The augmented forms (`+=` and the others) change the vector in place.
  - `str()` gives `(x, y)` or `(x, y, z)`.
- `celestial.mathutils` has matrix and quaternion helpers: `identity`,
  `translate`, `scale`, `perspective`, `ortho`, `look_at`,
  `quat_from_axis_angle`, `quat_multiply`, `quat_normalize`, `quat_rotate`,
  `quat_to_mat4`, `quat_to_euler`, `normalize` and `format_vec3`.
  - Matrices are numpy arrays indexed `m[row, col]` and act on column
    vectors.
  - Quaternions are `[w, x, y, z]`.
- `celestial.renderer` has `load_shader_file` and `Renderer`.
  - `Renderer.init()` reads `shader0.vert` and `shader0.frag` from its
    `shader_dir`, which defaults to `assets/shaders`. A missing shader file
    gives an empty source and logs a warning.
  - `use()` makes the program current. After that, `set_mat4` and `set_vec3`
    store uniform values, and `uniform(name)` returns a copy of one.
  - Every draw is recorded in `draw_calls` as a tuple
    `(polygon_mode, vertex_count, color)`.
- `celestial.components` has `TransformComponent`, `Camera`,
  `CamKeyboardController`, and the input types `Event`, `EventType` and `Key`.
- `celestial.mesh` has `parse_obj` and the `Mesh` component.
  - `parse_obj` reads OBJ lines into per-corner vertex, UV and normal arrays.
  - Each face corner must be given as `v/vt/vn`. Only the first three corners
    of a face are used.
  - `Mesh.load_obj` returns `False` when the file cannot be opened.
- `celestial.game` has `Game`. It builds the demo scene and handles input
  events.
  - The scene has three meshes, read from `assets/models/ico.obj` and
    `assets/models/coob.obj`, and one camera entity.
  - `Game.run(events)` runs one frame per event and paces frames to 60 per
    second. It stops on quit or when the events run out, and returns the
    number of frames it ran.

## Example

```python
from celestial.ecs import Component, EntityManager
from celestial.vectors import Vector2


class Counter(Component):
    def init(self):
        self.ticks = 0

    def update(self):
        self.ticks += 1


manager = EntityManager()
entity = manager.add_entity()
entity.add_component(Counter)

manager.refresh()
manager.update()
assert entity.get_component(Counter).ticks == 1

entity.add_group(2)
assert entity in manager.get_group(2)

entity.destroy()
manager.refresh()
assert manager.get_group(2) == []

print(Vector2(1.0, 2.0) + Vector2(3.0, 4.0))  # (4, 6)
```

Driving the game with scripted events:

```python
from celestial.components import Event, EventType, Key
from celestial.game import Game
from celestial.renderer import Renderer

game = Game(Renderer())
game.init("Celestial", 1280, 720)
game.frame_pacing = False
frames = game.run([
    Event(EventType.WINDOW_RESIZED, data1=800, data2=600),
    Event(EventType.KEY_DOWN, key=Key.ESCAPE),
    None,
])
print(frames, game.window_size)  # 2 (800, 600)
```

## Controls

`CamKeyboardController` reads key events in the AZERTY layout:

- `Z` and `S` pitch the camera.
- `Q` and `D` yaw it.

A key-down event starts the rotation and a key-up event stops it. The keys
move the view only when the controller's `person` is `"first"`. With the
default, `"third"`, the controller only refreshes its recorded Euler `angles`.

In `Game`, the following events apply:

- `Tab` shows or hides the cursor. Hiding the cursor also grabs the mouse.
- `Escape` quits, and so does a `QUIT` event.
- A `WINDOW_RESIZED` event updates the viewport and the camera's aspect ratio.

## What it does not do

The package opens no window and draws nothing on screen. It installs no
command. Window, cursor and viewport state are plain attributes of `Game`, and
input arrives as `Event` values that you supply. `Renderer` compiles no
shaders and talks to no graphics API. It keeps the shader sources, the uniform
values and a record of the draw calls, for your own presentation layer to use.