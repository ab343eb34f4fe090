# engine3d

The core of a small real-time 3D engine, written in pure Python with no
third-party dependencies. It has the math, camera, mesh, input and
application-state pieces. Window and GPU work goes to a front end that you
plug in.

## Modules

- `engine3d.constants` has `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD` and
  `RAD_TO_DEG`.
- `engine3d.vectors` has the immutable `Vector2`, `Vector3` and `Vector4`
  types. They support `+`, `-`, unary minus, scalar `*` and `/`, and
  iteration, and each has a `filled(value)` constructor.
  - `Vector2` and `Vector3` have `ZERO`, `ONE` and axis constants.
  - `Vector4` also exposes `r`, `g`, `b` and `a`.
  - The module functions are `dot`, `cross`, `normalize`, `magnitude`,
    `magnitude_sqr`, `distance`, `distance_sqr`, `clamp`, `lerp` and `sqr`.
- `engine3d.matrix` has `Matrix4`, an immutable row-major 4x4 matrix.
  - The constructors are `translation`, `rotation_x`, `rotation_y`,
    `rotation_z`, `rotation_axis` and `scaling`, where `scaling` is uniform
    when given one argument. There are also `from_rows`, `ZERO` and
    `IDENTITY`.
  - Elements are read as `m[row, col]`. The `rows` and `columns` properties
    give the rows and columns.
  - Matrices support element-wise `+` and `-`, scalar `*` and `/`, and matrix
    products with `@`.
  - The module functions are `transform_coord`, `transform_normal`,
    `transpose`, `determinant`, `adjoint` and `inverse`. `inverse` raises
    `ValueError` for a singular matrix.
  - The basis accessors are `get_right`, `get_up`, `get_look`,
    `get_translation` and `get_scale`.
- `engine3d.quaternion` has `Quaternion` with these members:
  - `conjugate`, `inverse`, `magnitude`, `magnitude_sqr`, `normalized` and
    `dot`;
  - the static `lerp` and `slerp`;
  - the constructors `from_axis_angle`, `from_yaw_pitch_roll` and
    `from_rotation_matrix`.

  `matrix_from_quaternion` turns a quaternion into a `Matrix4`.
- `engine3d.colors` holds the standard named colours as RGBA `Vector4`
  constants, such as `RED`, `CORNFLOWER_BLUE` and `TRANSPARENT`. It also has a
  read-only `NAMED` mapping keyed by names like `"CornflowerBlue"`, and
  `by_name()`. `by_name()` ignores case, spaces, dashes and underscores, and
  raises `KeyError` for unknown names.
- `engine3d.mesh` covers vertex formats and meshes.
  - The vertex formats are `VertexP`, `VertexPC`, `VertexPX` and `Vertex`.
    Each carries a `FORMAT` made of `VertexElement` flags.
  - `vertex_layout(fmt)` lists the `LayoutElement(semantic, components)`
    entries for a format.
  - `Mesh(vertex_type, vertices, indices)` holds a mesh.
  - `create_cube_pc(size, color=None, rng=None)` builds an indexed cube with
    8 vertices and 36 indices. Without a colour, the corners cycle through a
    debug palette that starts at a random point.
- `engine3d.camera` has `Camera`, a first-person camera.
  - Movement: `walk`, `strafe`, `rise`, `yaw`, `pitch` and `zoom`.
  - Aiming: `look_at`, `set_direction` and `set_fov`.
  - `set_fov` clamps the field of view to 10°–170°.
  - `set_direction` ignores directions that are near vertical or zero.
  - `view_matrix()` and `projection_matrix()` produce the matrices. The
    projection follows `camera.mode`, which is `ProjectionMode.PERSPECTIVE`
    or `ProjectionMode.ORTHOGRAPHIC`.
  - When `aspect_ratio` or the orthographic size is left at zero, the camera
    takes it from `back_buffer_size`. Otherwise it raises `RuntimeError`.
- `engine3d.timeutil` has `Clock`, which reports `time()` and `delta_time()`
  in whole milliseconds from a nanosecond source that you can inject. The
  process-wide helpers are `get_time()` and `get_delta_time()`.
- `engine3d.input` has `KeyCode` (virtual key codes), `MouseButton` and
  `InputSystem`.
  - You feed events through `key_down`, `key_up`, `mouse_button_down`,
    `mouse_button_up`, `mouse_wheel`, `mouse_move` and `activate`.
  - Calling `update()` once per frame works out "just pressed" states and
    mouse movement.
  - The queries are `is_key_down`, `is_key_pressed`, `is_mouse_down`,
    `is_mouse_pressed` and the `mouse_*` properties.
- `engine3d.app` has `AppConfig`, `AppState`, `Frontend`, the `App` state
  machine and a shared `main_app()` instance.
- `engine3d.demos` has ready-made states and the apps `hello_window_app()`,
  `hello_shapes_app()` and `hello_cube_app()`.

## Conventions

Matrices are row-major and vectors are row vectors, so transforms compose
left to right: `world @ view @ projection`. The camera is left-handed, with
`+Z` forward and `+Y` up.

```python
from engine3d.vectors import Vector3
from engine3d.matrix import Matrix4, transform_coord, inverse
from engine3d.camera import Camera

m = Matrix4.translation(1.0, 2.0, 3.0)
p = transform_coord(Vector3(0.0, 0.0, 0.0), m)      # Vector3(1.0, 2.0, 3.0)
back = transform_coord(p, inverse(m))                # back at the origin

camera = Camera()
camera.position = Vector3(0.0, 1.0, -3.0)
camera.look_at(Vector3(0.0, 0.0, 0.0))
camera.aspect_ratio = 16 / 9
wvp = Matrix4.IDENTITY @ camera.view_matrix() @ camera.projection_matrix()
```

## Application states

An `App` holds named states, and exactly one of them is current.
`add_state(name, state_type)` registers a new instance of the state type. A
name that is already taken keeps its existing state. The first state added
becomes current.

`change_state(name)` takes effect at the start of the next frame. At that
point the old state's `terminate()` runs and then the new state's
`initialize()`. Names that were never registered are ignored.

Each frame, `App.run(config, frontend)` does the following:

1. It delivers the pending events to the input system and calls `update()`.
2. It quits if the front end is inactive or Escape was just pressed.
3. It updates the current state with the frame's delta time. If `max_delta`
   is set and the delta time reaches it, the update is skipped.
4. It renders the current state between `begin_render()` and `end_render()`.

The base `Frontend` is headless:

- `post(event)` queues a callable that receives the `InputSystem`.
- `draw(mesh, transform)` calls are collected into `last_frame`.
- The front end stays active until `active` is cleared.

```python
from engine3d.app import Frontend
from engine3d.demos import hello_shapes_app
from engine3d.input import KeyCode

app = hello_shapes_app()
frontend = Frontend()
frontend.post(lambda inp: inp.key_down(KeyCode.ESCAPE))
app.run(frontend=frontend)   # initialises ShapeState, sees Escape, quits
```

## What it does not do

The package opens no window and draws nothing on screen. It does not talk to
a GPU and it compiles no shaders. `Frontend` only records what would be
drawn. Showing the demos for real means subclassing `Frontend` and connecting
it to a windowing and rendering library of your choice. The package installs
no command-line programs.