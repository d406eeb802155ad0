"""Bullets with steering or special flight: beams, missiles, rockets, bouncing balls, smoke bombs."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Optional

from tankarena.objects import SECOND_PER_TICK, TICK_PER_SECOND, Bullet
from tankarena.particles import Smoke
from tankarena.unit import Unit
from tankarena.vector import Vec2

_ZERO = Vec2(0.0, 0.0)
_SMOKE_COLOR = (0.0, 0.0, 0.0, 1.0)
_SMOKE_SIZE = 0.2
_SMOKE_DECAY = 3.0

_BEAM_STEP = 0.1
_BEAM_STEPS = 100
_BEAM_SMOKE_CHANCE = 0.2

_MISSILE_SEEK_RANGE = 12.0
_MISSILE_PROXIMITY = 1.0
_MISSILE_INITIAL_COST = 500.0

_ROCKET_PI = 3.141592653
_ROCKET_MAX_HARM = 20.0
_ROCKET_HARM_GROWTH = 1.02


def _emit_smoke(bullet: Bullet, count: int, spread: float) -> None:
    core = bullet.game_core
    for _ in range(count):
        core.push_event_generate_particle(
            Smoke,
            bullet.position,
            bullet.rotation,
            core.random_in_circle() * spread,
            _SMOKE_SIZE,
            _SMOKE_COLOR,
            _SMOKE_DECAY,
        )


class HitType(enum.Enum):
    """What an energy beam ran into."""

    MISS = "miss"
    OBSTACLE = "obstacle"
    UNIT = "unit"


@dataclass(frozen=True)
class HitResult:
    """Where a beam stopped and what stopped it."""

    hit_type: HitType
    unit: Optional[Unit]
    position: Vec2


class EnergyBeam(Bullet):
    """A single-tick ray that burns the first unit in its path."""

    def target(self) -> HitResult:
        """March along the beam until it meets an obstacle, a unit or its range."""
        current = self.position
        step = Vec2(0.0, _BEAM_STEP).rotated(self.rotation)
        units = self.game_core.units
        for _ in range(_BEAM_STEPS):
            if self.game_core.is_blocked_by_obstacles(current):
                return HitResult(HitType.OBSTACLE, None, current)
            for unit_id, unit in units.items():
                if unit_id != self.unit_id and unit.is_hit(current):
                    return HitResult(HitType.UNIT, unit, current)
            current = current + step
        return HitResult(HitType.MISS, None, current)

    def update(self) -> None:
        hit = self.target()
        core = self.game_core
        if hit.hit_type is HitType.UNIT:
            core.push_event_deal_damage(
                hit.unit.id, self.id, self.damage_scale * 10.0 * SECOND_PER_TICK
            )
        if hit.hit_type is not HitType.MISS and core.random_float() < _BEAM_SMOKE_CHANCE:
            core.push_event_generate_particle(
                Smoke,
                hit.position,
                self.rotation,
                core.random_in_circle() * 2.0,
                _SMOKE_SIZE,
                core.player_color(self.player_id),
                _SMOKE_DECAY,
            )
        core.push_event_remove_bullet(self.id)


class Missile(Bullet):
    """A homing missile that steers towards the cheapest enemy within range."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        velocity: Vec2,
        max_velocity: float,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation, damage_scale
        )
        self.velocity = velocity
        self.max_velocity = max(1.0, max_velocity)
        self.resistance = 0.02

    def _is_target(self, unit_id: int, unit: Unit) -> bool:
        return unit_id != self.unit_id and unit.player_id != self.player_id

    def update(self) -> None:
        core = self.game_core
        self.position = self.position + self.velocity * SECOND_PER_TICK
        self.rotation = math.atan2(self.velocity.y, self.velocity.x) - math.radians(90.0)
        should_die = core.is_blocked_by_obstacles(self.position)

        for unit_id, unit in core.units.items():
            if not self._is_target(unit_id, unit):
                continue
            if unit.is_hit(self.position):
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * 10.0)
                should_die = True

        if should_die:
            core.push_event_remove_bullet(self.id)
            return

        best_diff = self.velocity
        best_cost = _MISSILE_INITIAL_COST
        for unit_id, unit in core.units.items():
            if not self._is_target(unit_id, unit):
                continue
            diff = unit.position - self.position
            distance = diff.length()
            if distance > _MISSILE_SEEK_RANGE:
                continue
            if distance < _MISSILE_PROXIMITY:
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * 10.0)
                core.push_event_remove_bullet(self.id)
                return
            cost = self._cost(diff)
            if cost < best_cost:
                best_cost = cost
                best_diff = diff

        fix = self._fix(best_diff)
        speed = self.velocity.length()
        self.velocity = self.velocity * (1 - self.resistance * speed / self.max_velocity)
        self.velocity = self.velocity + fix
        if self.velocity.length() > self.max_velocity:
            self.velocity = self.velocity.normalized() * self.max_velocity

    def _cost(self, diff: Vec2) -> float:
        distance = diff.length()
        direction = diff.normalized()
        speed = self.velocity.length()
        if speed < 1e-3:
            return distance
        heading = self.velocity.normalized()
        angle = math.acos(max(-1.0, min(1.0, direction.dot(heading))))
        return distance * (1 - speed * math.cos(angle) / self.max_velocity)

    def _fix(self, diff: Vec2) -> Vec2:
        if diff.length() == 0.0:
            return _ZERO
        thrust = self.resistance * self.max_velocity
        direction = diff.normalized()
        speed = self.velocity.length()
        if speed < 1e-3:
            return direction * (2 * thrust)
        heading = self.velocity.normalized()
        angle = math.acos(max(-1.0, min(1.0, direction.dot(heading))))
        free_angle = math.atan2(
            thrust, (1 - self.resistance * speed / self.max_velocity) * speed
        )
        if angle < free_angle:
            return direction * thrust
        perpendicular = heading.rotated(math.radians(90.0))
        turn = math.radians(60.0)
        if perpendicular.dot(direction) < 0:
            turn = -turn
        return (heading * thrust).rotated(turn) + heading * (math.sin(angle) * thrust)

    def on_removed(self) -> None:
        _emit_smoke(self, 6, 3.0)


class ReboundingBall(Bullet):
    """A ball that bounces off reflective obstacles a limited number of times."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        velocity: Vec2,
        rebounding_times: int = 1,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation, damage_scale
        )
        self.velocity = velocity
        self.rebounding_times_left = rebounding_times

    def update(self) -> None:
        core = self.game_core
        last_position = self.position
        self.position = self.position + self.velocity * SECOND_PER_TICK
        should_die = False
        if core.is_blocked_by_obstacles(self.position):
            should_die = True
            obstacle = core.blocked_obstacle(self.position)
            if obstacle is not None and self.rebounding_times_left:
                hit_point, normal = obstacle.surface_normal(last_position, self.position)
                if normal != _ZERO:
                    self.rebounding_times_left -= 1
                    self.position = self.position - normal * (
                        normal.dot(self.position - hit_point) * 2.0
                    )
                    self.velocity = self.velocity - normal * (
                        normal.dot(self.velocity) * 2.0
                    )
                    should_die = False

        for unit_id, unit in core.units.items():
            if unit_id == self.unit_id:
                continue
            if unit.is_hit(self.position):
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * 10.0)
                should_die = True

        if should_die:
            core.push_event_remove_bullet(self.id)

    def on_removed(self) -> None:
        _emit_smoke(self, 5, 2.0)


def _rocket_heading(diff: Vec2) -> float:
    """Rotation that points the rocket sprite along ``diff``."""
    dx, dy = diff.x, diff.y
    if dx < 0:
        if dy < 0:
            return _ROCKET_PI / 2 + math.atan(abs(dy) / abs(dx))
        if dy == 0:
            return _ROCKET_PI / 2
        return math.atan(abs(dx) / abs(dy))
    if dx == 0:
        return 0.0 if dy >= 0 else _ROCKET_PI
    if dy > 0:
        return _ROCKET_PI * 2 - math.atan(abs(dx) / abs(dy))
    if dy == 0:
        return 1.5 * _ROCKET_PI
    return _ROCKET_PI + math.atan(abs(dx) / abs(dy))


class Rocket(Bullet):
    """A rocket locked on the unit nearest its player's cursor at launch."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        velocity: Vec2,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation, damage_scale
        )
        self.velocity = velocity
        self.player_locked = 0
        self.harmful = 5.0
        player = game_core.get_player(player_id)
        if player is None:
            raise ValueError(f"no player with id {player_id}")
        cursor = player.input_data.mouse_cursor_position
        distance = 1e30
        for other_id, unit in game_core.units.items():
            if other_id == unit_id:
                continue
            length = (cursor - unit.position).length()
            if length < distance:
                distance = length
                self.player_locked = other_id

    def update(self) -> None:
        core = self.game_core
        target = core.units.get(self.player_locked)
        if target is None:
            core.push_event_remove_bullet(self.id)
            return
        if self.harmful < _ROCKET_MAX_HARM:
            self.harmful *= _ROCKET_HARM_GROWTH
        diff = target.position - self.position
        length = diff.length()
        diff = diff * (0.25 * self.harmful / length) if length else _ZERO
        self.velocity = diff
        self.position = self.position + self.velocity * SECOND_PER_TICK
        self.rotation = _rocket_heading(diff)

        should_die = core.is_blocked_by_obstacles(self.position)
        for unit_id, unit in core.units.items():
            if unit_id == self.unit_id:
                continue
            if unit.is_hit(self.position):
                core.push_event_deal_damage(unit_id, self.id, self.damage_scale * self.harmful)
                should_die = True
        if should_die:
            core.push_event_remove_bullet(self.id)

    def on_removed(self) -> None:
        _emit_smoke(self, 5, 2.0)


class SmokeBomb(Bullet):
    """A lobbed bomb that lands at a target and pulses area damage five times."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float,
        target: Vec2,
        radius: float,
        duration: float,
        damage_duration: float,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation, damage_scale
        )
        self.target = target
        self.velocity = (target - position) * (1.0 / duration)
        self.radius = radius
        self.duration = int(duration * TICK_PER_SECOND + 0.5)
        self.damage_duration = int(damage_duration * TICK_PER_SECOND + 0.5)
        if self.damage_duration <= 0:
            raise ValueError("damage_duration must last at least one tick")
        self.current_time = 0

    def update(self) -> None:
        core = self.game_core
        self.current_time += 1
        if self.current_time < self.duration:
            self.position = self.position + self.velocity * SECOND_PER_TICK
            self.rotation += 5.0 * SECOND_PER_TICK
            return
        if self.current_time >= self.duration + self.damage_duration * 5:
            core.push_event_remove_bullet(self.id)
            return
        self.position = self.target
        elapsed = self.current_time - self.duration
        if elapsed == 0:
            core.push_event_generate_particle(
                Smoke,
                self.target,
                self.rotation,
                Vec2(0.0, 0.0),
                self.radius,
                _SMOKE_COLOR,
                TICK_PER_SECOND / (self.damage_duration * 8.0),
            )
        if elapsed % self.damage_duration == 0:
            damage = self.damage_scale * (10.0 - 2.0 * (elapsed // self.damage_duration))
            for unit_id, unit in core.units.items():
                if (unit.position - self.position).length() <= self.radius:
                    amount = damage * 0.5 if unit_id == self.unit_id else damage
                    core.push_event_deal_damage(unit_id, self.id, amount)