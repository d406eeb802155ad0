# tankarena

This package is the simulation core of a top-down 2D tank battle game. It is
plain Python and has no dependencies. The game advances in fixed ticks, 60 per
second. Each call to `GameCore.update()` does the following, in order:

1. updates players, then obstacles;
2. moves bullets and resolves their hits;
3. updates units and particles;
4. applies every queued event, first in, first out.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `tankarena.game_core`

`GameCore` holds the world.

- Players, units, bullets, particles and obstacles live in the dicts `players`, `units`, `bullets`, `particles` and `obstacles`. Each is keyed by a numeric id, and ids start at 1.
- Objects are created with `add_player`, `add_unit`, `add_obstacle`, `add_bullet` and `add_particle`. They are looked up with `get_player`, `get_unit` and so on, which return `None` for an unknown id.
- `push_event_*` methods put changes on the event queue: move, rotate, deal damage, kill, remove, and generate a bullet, obstacle or particle. `process_event_queue()` runs them. It also runs any events that are queued while it runs.
- `GameCore(seed=0)` seeds a private random source. Runs are therefore reproducible. The random helpers are `random_float`, `random_int`, `random_on_circle` and `random_in_circle`.
- The constructor calls `set_scene()`, which places the standard map:
  - a `Block` at (−3, 4);
  - a `River` at (3, 0);
  - four `ReboundingBlock`s at the corners;
  - two respawn points;
  - a boundary from −10 to 10 on both axes.
- `add_primary_unit_allocation_function(unit_type, name=None, has_skills=True)` registers a unit type that players can choose. `selectable_unit_list()` returns the labels of the registered types.
- `player_color`, `set_camera` and `follow_render_perspective` provide the tint and camera state that a renderer would use.

### `tankarena.objects`

This module holds the shared pieces the other modules build on.

- `GameObject` is the base of everything placed in the world. It has `position` and `rotation`, and converts points with `local_to_world` and `world_to_local`.
- `Obstacle`, `Particle` and `Bullet` are the base classes for the three kinds of world object.
- `Skill` and `SkillType` describe unit abilities.
- `InputData` is a validated snapshot of keys and mouse buttons, including the cursor position.
- The tick constants are `TICK_PER_SECOND` and `SECOND_PER_TICK`.

### `tankarena.unit`

`Unit` is the abstract base for combat units.

- `health` is a fraction that is clamped to `[0, 1]`.
- `max_health()` is the product of `health_scale()` and `basic_max_health()`, and is never less than 1.
- `show_life_bar()` and `hide_life_bar()` control the life bar.
- `generate_bullet` queues a bullet fired by the unit.

A subclass must implement `update()` and `is_hit(position)`.

### `tankarena.player`

`Player` owns one primary unit at a time. While that unit is missing, the player counts down and then calls `GameCore.allocate_primary_unit`. A brand-new player spawns on its first tick. After a death, the player respawns five seconds later.

### `tankarena.obstacles`

- `Block` is a solid obstacle.
- `River` blocks units but not a bullet standing exactly on the tested point.
- `ReboundingBlock` reports a hit point and a surface normal through `surface_normal`.
- `SafetyDeclaration` is a 3×3 barrier that removes itself after three seconds.

`Block` and `River` accept a `scale` argument but always use a unit square.

### `tankarena.particles`

- `Smoke` drifts and fades.
- `Explosion` deals 10 damage, once, to each unit inside its area.
- `BulletHole` and `Thunderbolt` are timed marks that disappear when their time runs out.

### `tankarena.bullets`

Straight-flying bullets:

- `CannonBall`
- `Coin`
- `CritBullet`
- `ElectricBall`
- `Mine`
- `SweatySoybean`
- `UdongeinDirectionalBullet`
- `WarningLine`
- `WaterDrop`

Most of them leave smoke when they are removed (`on_removed`).

### `tankarena.guided_bullets`

- `EnergyBeam` is a single-tick ray. Its `target()` method returns a `HitResult` with a `HitType`.
- `Missile` is a homing missile.
- `ReboundingBall` bounces off `ReboundingBlock`s.
- `Rocket` locks onto the unit nearest to its player's cursor.
- `SmokeBomb` is a lobbed area-damage bomb.

### `tankarena.vector`

`Vec2` is an immutable 2D vector. It provides `length`, `normalized`, `dot`, `cross` and `rotated`.

## Example

```python
from tankarena.game_core import GameCore
from tankarena.unit import Unit
from tankarena.vector import Vec2


class Tank(Unit):
    def update(self):
        pass

    def is_hit(self, position: Vec2) -> bool:
        return (position - self.position).length() < 0.8


core = GameCore()
core.add_primary_unit_allocation_function(Tank, "Tank - By Me", True)

player_id = core.add_player()
core.update()  # a new player's unit spawns on the first tick

unit = core.get_unit(core.get_player(player_id).primary_unit_id)
core.push_event_deal_damage(unit.id, 0, 25.0)
core.process_event_queue()
print(unit.health)  # 0.75, since max health is 100
```

## Behaviour

- **Arena boundary.** Points outside the boundary count as blocked by obstacles.
- **Leaving or spawning outside the arena.** A bullet or particle that leaves the arena is removed. `add_bullet` and `add_particle` return 0 and create nothing for a position outside the arena.
- **Damage.** Damage is divided by the unit's `max_health()` and subtracted from its health fraction. A unit at zero health is killed, and is then removed through the event queue.
- **Removing bullets.** When a bullet is removed, its `on_removed()` is called.
- **Choosing a unit to spawn.** A player's `selected_unit` indexes the registered unit types. `allocate_primary_unit` raises `IndexError` if no unit type is registered at that index. Register at least one type before the first `update()` with players present.

## What is not included

This package contains only the game state and rules. It does not include:

- a window or renderer;
- input capture from a keyboard or mouse;
- a command-line program;
- any concrete playable unit types.

Supplying input means setting `Player.input_data`. Drawing the world and defining units are left to the application that uses the package.