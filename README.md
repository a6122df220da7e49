# darkflame

A small pure-Python toolkit of 3D maths and simple physics for game-style
simulations. It has no runtime dependencies.

## Modules

### `darkflame.vector`

- `Point3D`: a mutable point with `distance`, in-place `scale`, `set`, `copy`,
  and `+` / `-` between points.
- `Vector3D`: a mutable vector. It is built directly or with
  `Vector3D.from_points(begin, end)` and `Vector3D.from_point(point)`. It has
  `cross`, `dot`, `triple` (scalar triple product), in-place `scale`, `length`,
  `add_to(point)`, `as_point`, and the arithmetic operators `-v`, `+`, `-`,
  `+=`, `-=`. `set_length` and `project_onto` return `False` and leave the
  vector unchanged when the vector or the base is nearly zero.

### `darkflame.geometry`

- `triangle_in_cube(centre, half_edge, a, b, c)`: false when all three
  vertices lie beyond one face of an axis-aligned cube.
- `line_in_cube(centre, half_edge, begin, end)`: a segment test against the
  sphere that circumscribes the cube.
- `mirror_matrix(plane_point, plane_normal)`: a 16-float reflection matrix,
  indexed `row * 4 + column`, with the translation in the last row.
- `Frustum`: six normalised clipping planes taken from 16-element projection
  and model-view matrices (both default to the identity). `set_planes` raises
  `ValueError` on a wrong matrix size or a degenerate plane. It offers
  `sphere_visible` (0 when hidden), `cube_visible`, and `box_visible`, which
  returns a `Visibility` value: `INVISIBLE`, `PARTIAL` or `FULL`.
- `Triangle`: has `normal` (a unit vector) and `d`, and `is_degenerate()`.
  `collision(begin, end)` returns the point where the segment crosses the
  triangle, or `end` when it misses. `ray_collision(position, vector)` returns
  where the line meets the triangle's plane. `nested()` returns the triangle
  through the edge midpoints.

### `darkflame.signal`

- `Signal`: a frozen 32-bit integer value. `+` saturates to `Signal.MAX` when
  the result does not grow, and `-` saturates to `Signal.MIN` when it does not
  shrink.
- `Level`: a frozen float bounded by `Level.MIN = 0.0` and `Level.MAX = 1.0`.

### `darkflame.logger`

- `LogFile(path)`: an append-only log. Each entry is written as `" <n> "`
  followed by the text, and the entry number `n` is shared by every log in the
  process. `add`, `addf(template, *args)` (formatted with `%`), `deny` (disable
  the log), `close`, and use as a context manager. `LogFile.create(path, text)`
  truncates the file first. A log with an empty path ignores writes, and I/O
  errors are swallowed.
- `default_log`: a `LogFile` for `log.txt`. The file is opened on its first
  entry.

### `darkflame.solver`

- `Solver`: a world holding active and disabled objects and an `Environment`
  (`env.gravity`, zero by default). It has `register`, `unregister`,
  `enable`, `disable`, `actors()`, `disabled()` and `close()`. `close()`
  detaches every object. A `Solver` can be used as a context manager.
- `PhysObject`: an abstract base class that registers itself in its world when
  created. Subclasses implement `update(delta_time)` and
  `collide(begin, end)`. `collide` returns a `Hit(point, normal)`.

### `darkflame.particle`

- `Particle`: a point with mass, volume, velocity, spin and a time to live.
  `update(dt, env_density, env_force, gravity)` applies the external force,
  gravity and buoyancy. It returns `False` once the particle has expired.
- `Emitter`: a `PhysObject` that emits `pps` particles per second, up to
  `max_particles` alive at once. The emitted particles take the `p_*`
  parameters, with random spread from the `p_delta_*` parameters. Pass `rng`
  (a `random.Random`) for reproducible runs. It also has `configure`,
  `start_emission`, `stop_emission`, `dots()` and `clone()`.

### `darkflame.masspoint`

- `MassPoint`: a point mass with `reset`, `add_external_force`, `reflect`,
  `friction`, `impulse()`, `update(dt)` (which returns the new position) and
  `clone()`. `update` raises `ZeroDivisionError` for a massless point.
  `link(other, low_coeff, high_coeff, damping)` attaches a spring and returns
  its `Connection`. The spring's rest length is the current distance between
  the two points.

### `darkflame.wave`

- `Wave`: a `PhysObject` carrying a `dimension` × `dimension` height field over
  [-1, 1] in x and y, made of `WaveVertex` nodes. It steps at a fixed
  `frames_per_second` and carries leftover time over to the next update. A
  dimension of 1 raises `ValueError`. A dimension of 0 or less, or a rate of
  0.01 or less, gives an empty surface. `randomize(force)` pushes down a random
  node. `collide(begin, end)` returns the nearest crossing with the surface and
  its normal. `clone()` returns an independent copy.

## Example

```python
import random

from darkflame.vector import Point3D, Vector3D
from darkflame.geometry import Triangle
from darkflame.solver import Solver
from darkflame.particle import Emitter

tri = Triangle(Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0))
print(tri.collision(Point3D(0.2, 0.2, 1), Point3D(0.2, 0.2, -1)))

world = Solver()
world.env.gravity = Vector3D(0, 0, -9.8)

emitter = Emitter(world, Point3D(0, 0, 0), 30, 100, rng=random.Random(1))
emitter.p_mass = 1
emitter.p_ttl = 2
emitter.start_emission()
for _ in range(10):
    emitter.update(0.1)
print(len(emitter.dots()))
```

## What it does not do

The package simulates and computes only. It does not render, read model or
texture files, provide a game loop, or install a command-line program. Apart
from `Emitter`, `Wave`, and any `PhysObject` subclasses you write yourself,
it has no other kinds of world objects.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```