# gameball

Rigid-body physics, game-world bookkeeping and a third-person camera
controller for a rolling-ball game. It does no rendering. The logic world
advances in fixed ticks of 1/64 second.

## Install

    pip install .

To install the test dependencies, run `pip install .[test]`. Then run `pytest`.

## Physics

`gameball.physics` holds three modules.

- `bodies` defines `RigidBody`, `Sphere` and `Cube`, plus `rotation_matrix(v)`.
  `rotation_matrix(v)` returns a rotation of `|v|` radians about the axis of `v`.
  - A cube or sphere with infinite mass has a zero inverse inertia, so it cannot be moved.
- `collision` defines the following.
  - `Collision`: the contact point, the normal and the penetration depth.
  - `detect_sphere_sphere` and `detect_sphere_cube`: each returns a `Collision`, or `None` when the bodies do not touch.
  - `solve_collision`: applies a normal impulse and a friction impulse. It returns `False` when the bodies are already separating.
- `simulation` defines `PhysicsWorld`. It does the following:
  - creates spheres and cubes and hands out ids that start at 1;
  - applies each body's own gravity;
  - resolves sphere–sphere and sphere–cube contacts in random order until none of them is approaching;
  - integrates motion.

  You can pass `random.Random` to `PhysicsWorld(rng=...)` to get a reproducible contact order.

```python
from gameball.physics.simulation import PhysicsWorld

world = PhysicsWorld()
ball = world.get_sphere(world.create_sphere(1.0, 1.0))
ball.position[:] = (0.0, 5.0, 0.0)
floor = world.get_cube(world.create_cube(20.0, float("inf")))
floor.position[:] = (0.0, -10.0, 0.0)
floor.gravity[:] = 0.0

for _ in range(64):
    world.apply_gravity(1 / 64)
    world.solve_collisions()
    world.update(1 / 64)
print(ball.position)
```

## Game logic

`gameball.logic` holds the following modules.

- `world.World` keeps players, units and obstacles by id. It owns a
  `PhysicsWorld` as `physics_world`. It provides:
  - `create_player`, `create_unit(unit_type, player_id, ...)` and `create_obstacle(obstacle_type, ...)`;
  - the matching `get_*` and `remove_*` methods; each `remove_*` method returns `False` for an unknown id;
  - `update_tick()`. It applies gravity, solves collisions, calls every object's `update_tick`, solves collisions again, integrates, and then increments `version`.
- `player` defines `Player` and `PlayerInput`.
  - A player has a `player_id`, a `primary_unit_id` and a pending `input`.
  - `take_input()` returns the pending input and resets it.
- `objects` defines the base types `GameObject`, `Unit` (owned by a player) and `Obstacle`.
  - Each of them registers itself with the world when it is created.
  - `destroy()` unregisters it.
- `block.Block` is a cube obstacle backed by a physics cube.
  - By default it has infinite mass and no gravity.
  - It exposes `set_mass`, `set_gravity`, `set_side_length` and `set_motion`.
  - After each tick it copies the cube's motion back into itself.
- `events` holds `event_create_player`, `event_create_unit`,
  `event_create_obstacle`, `event_remove_player`, `event_remove_unit` and
  `event_remove_obstacle`.
  - Each one queues a callable on `world.events`.
  - The world does not run these callables itself. Pop them and call them when you want the changes to happen.

```python
from gameball.logic.world import World
from gameball.logic.block import Block
from gameball.logic.events import event_remove_player

world = World()
player = world.create_player()
block = world.create_obstacle(Block, (0.0, 5.0, 0.0), 1.0, True, 1.0)

for _ in range(64):
    world.update_tick()
print(world.version, block.position)

event_remove_player(world, player.player_id)
while world.events:
    world.events.popleft()()
assert world.get_player(player.player_id) is None
```

## Camera

`gameball.camera.ThirdPersonCamera(aspect)` orbits a centre point.

- Targets are set with `set_center`, `set_pitch_yaw`, `set_distance`, `set_fov_y` and `cursor_move`. `cursor_move` keeps pitch within ±89°.
- The camera interpolates from its stored state towards these targets. Pitch and yaw take the shorter way round.
- `update(delta_time)` advances the interpolation and returns a `CameraData` holding the view and projection matrices.
- `store_current_state()` makes the current interpolated state the new starting point.

## What is not included

The package has these parts:

- physics;
- world bookkeeping;
- a generic `Unit` base type;
- a `Block` obstacle;
- the camera maths.

It does not have these:

- a ready-made player-controlled unit that turns `PlayerInput` into motion;
- a background thread that runs the world's ticks for you; call `World.update_tick()` yourself;
- a window, rendering, asset loading or a command-line program.