"""Straight-flying bullets: cannon balls, coins, mines, water drops and the like."""

from __future__ import annotations

from typing import Any, Iterator

from tankarena.objects import SECOND_PER_TICK, TICK_PER_SECOND, Bullet
from tankarena.particles import BulletHole, Explosion, Smoke
from tankarena.unit import Unit
from tankarena.vector import Vec2

_SMOKE_COLOR = (0.0, 0.0, 0.0, 1.0)
_SMOKE_DECAY = 3.0
_COIN_EXPLOSION_TICKS = 30
_MINE_ARMING_TICKS = TICK_PER_SECOND * 2


class _LinearBullet(Bullet):
    """A bullet travelling at a constant velocity.

    ``_skip_by_player_id`` selects which units the bullet passes through:
    those whose id equals the firing unit's id, or those whose id equals the
    owning player's id.
    """

    _skip_by_player_id = False
    _smoke_spread = 2.0
    _smoke_size = 0.2
    _smoke_count = 5

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

    def _advance(self) -> None:
        self.position = self.position + self.velocity * SECOND_PER_TICK

    def _hit_units(self) -> Iterator[tuple[int, Unit]]:
        """Units, other than the skipped one, that the bullet now touches."""
        skipped = self.player_id if self._skip_by_player_id else self.unit_id
        for unit_id, unit in self.game_core.units.items():
            if unit_id == skipped:
                continue
            if unit.is_hit(self.position):
                yield unit_id, unit

    def _emit_smoke(self) -> None:
        for _ in range(self._smoke_count):
            self.game_core.push_event_generate_particle(
                Smoke,
                self.position,
                self.rotation,
                self.game_core.random_in_circle() * self._smoke_spread,
                self._smoke_size,
                _SMOKE_COLOR,
                _SMOKE_DECAY,
            )

    def _damage(self, unit_id: int, unit: Unit) -> float:
        raise NotImplementedError

    def update(self) -> None:
        """Move, then die on an obstacle or on hitting units, damaging each."""
        self._advance()
        should_die = self.game_core.is_blocked_by_obstacles(self.position)
        for unit_id, unit in self._hit_units():
            self.game_core.push_event_deal_damage(
                unit_id, self.id, self._damage(unit_id, unit)
            )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)


class CannonBall(_LinearBullet):
    """A plain shell dealing 10 damage per hit."""

    def _damage(self, unit_id: int, unit: Unit) -> float:
        return self.damage_scale * 10.0

    def update(self) -> None:
        super().update()

    def on_removed(self) -> None:
        self._emit_smoke()


class ElectricBall(_LinearBullet):
    """A heavy charge dealing 63 damage and leaving a wide cloud."""

    _smoke_spread = 8.0
    _smoke_size = 0.8

    def _damage(self, unit_id: int, unit: Unit) -> float:
        return self.damage_scale * 63.0

    def update(self) -> None:
        super().update()

    def on_removed(self) -> None:
        self._emit_smoke()


class SweatySoybean(_LinearBullet):
    """A 10-damage bullet that passes the unit whose id is its player's id."""

    _skip_by_player_id = True

    def _damage(self, unit_id: int, unit: Unit) -> float:
        return self.damage_scale * 10.0

    def update(self) -> None:
        super().update()

    def on_removed(self) -> None:
        self._emit_smoke()


class UdongeinDirectionalBullet(_LinearBullet):
    """A light 2-damage bullet that leaves no smoke."""

    def _damage(self, unit_id: int, unit: Unit) -> float:
        return self.damage_scale * 2.0

    def update(self) -> None:
        super().update()


class WaterDrop(_LinearBullet):
    """A drop that destroys any unit it touches outright."""

    _skip_by_player_id = True

    def _damage(self, unit_id: int, unit: Unit) -> float:
        return self.game_core.get_unit(unit_id).max_health()

    def update(self) -> None:
        super().update()

    def on_removed(self) -> None:
        self._emit_smoke()


class WarningLine(_LinearBullet):
    """A harmless marker that vanishes on contact."""

    _skip_by_player_id = True

    def update(self) -> None:
        self._advance()
        should_die = self.game_core.is_blocked_by_obstacles(self.position)
        for _ in self._hit_units():
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)


class CritBullet(_LinearBullet):
    """A bullet with a chance of dealing extra critical damage."""

    _skip_by_player_id = True

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
        crit_chance: float,
        crit_damage: float,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation,
            damage_scale, velocity,
        )
        self.crit_chance = crit_chance
        self.crit_damage = crit_damage

    def _damage(self, unit_id: int, unit: Unit) -> float:
        base = self.damage_scale * 10.0
        if self.game_core.random_float() >= self.crit_chance:
            return base
        self.game_core.push_event_generate_particle(
            BulletHole, self.position, self.rotation, TICK_PER_SECOND
        )
        return base * (1.0 + self.crit_damage)

    def update(self) -> None:
        self._advance()
        should_die = self.game_core.is_blocked_by_obstacles(self.position)
        for unit_id, unit in self._hit_units():
            base = self.damage_scale * 10.0
            if self.game_core.random_float() >= self.crit_chance:
                self.game_core.push_event_deal_damage(unit_id, self.id, base)
            else:
                self.game_core.push_event_deal_damage(
                    unit_id, self.id, base * (1.0 + self.crit_damage)
                )
                self.game_core.push_event_generate_particle(
                    BulletHole, self.position, self.rotation, TICK_PER_SECOND
                )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_removed(self) -> None:
        self._emit_smoke()


class Coin(_LinearBullet):
    """A coin whose damage falls off over its lifetime; it explodes on units."""

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
        life_time: int,
    ) -> None:
        super().__init__(
            game_core, object_id, unit_id, player_id, position, rotation,
            damage_scale, velocity,
        )
        self.life_time = life_time
        self.total_time = life_time

    def update(self) -> None:
        should_die = False
        if self.life_time:
            self.life_time -= 1
            self._advance()
            if self.game_core.is_blocked_by_obstacles(self.position):
                should_die = True
            for unit_id, unit in self._hit_units():
                damage = (
                    self.damage_scale * 100.0 * self.life_time / self.total_time
                )
                self.game_core.push_event_deal_damage(unit_id, self.id, damage)
                self.game_core.push_event_generate_particle(
                    Explosion, unit.position, 0.0, _COIN_EXPLOSION_TICKS
                )
        else:
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_removed(self) -> None:
        self._emit_smoke()


class Mine(_LinearBullet):
    """A stationary charge that arms after two seconds and destroys what touches it."""

    _skip_by_player_id = True
    _smoke_spread = 5.0

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
            game_core, object_id, unit_id, player_id, position, rotation,
            damage_scale, velocity,
        )
        self.ready_count_down = _MINE_ARMING_TICKS

    def update(self) -> None:
        if self.ready_count_down:
            self.ready_count_down -= 1
            return
        should_die = False
        for unit_id, unit in self._hit_units():
            self.game_core.push_event_deal_damage(
                unit_id, self.id, self.game_core.get_unit(unit_id).max_health()
            )
            should_die = True
        if should_die:
            self.game_core.push_event_remove_bullet(self.id)

    def on_removed(self) -> None:
        self._emit_smoke()