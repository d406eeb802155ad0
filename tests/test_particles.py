import math

import pytest

from tankarena.particles import BulletHole, Explosion, Smoke, Thunderbolt
from tankarena.vector import Vec2


class _Unit:
    def __init__(self, position):
        self.position = position


class _Core:
    def __init__(self):
        self.units = {}
        self.removed_particles = []
        self.damage = []

    def push_event_remove_particle(self, particle_id):
        self.removed_particles.append(particle_id)

    def push_event_deal_damage(self, dst_unit_id, src_unit_id, damage):
        self.damage.append((dst_unit_id, src_unit_id, damage))


@pytest.fixture
def core():
    return _Core()


@pytest.mark.parametrize("kind", [BulletHole, Thunderbolt])
def test_timed_particle_removed_after_duration(core, kind):
    particle = kind(core, 9, Vec2(1.0, 1.0), 0.0, 3)
    particle.update()
    particle.update()
    assert core.removed_particles == []
    particle.update()
    assert core.removed_particles == [9]


@pytest.mark.parametrize("kind", [BulletHole, Thunderbolt])
def test_zero_duration_wraps_instead_of_removing(core, kind):
    particle = kind(core, 9, Vec2(0.0, 0.0), 0.0, 0)
    particle.update()
    assert core.removed_particles == []
    assert particle.duration > 0


def test_explosion_area(core):
    blast = Explosion(core, 1, Vec2(0.0, 0.0), 0.0, 30)
    assert blast.is_in_explosion(Vec2(0.0, 0.0))
    assert blast.is_in_explosion(Vec2(1.5, 1.5))
    assert not blast.is_in_explosion(Vec2(1.7, 0.0))
    assert not blast.is_in_explosion(Vec2(1.5, 1.9))
    assert not blast.is_in_explosion(Vec2(0.0, 2.0))


def test_explosion_area_follows_rotation(core):
    blast = Explosion(core, 1, Vec2(0.0, 0.0), math.pi / 2, 30)
    assert blast.is_in_explosion(Vec2(1.8, 0.0))
    assert not blast.is_in_explosion(Vec2(0.0, 1.8))


def test_explosion_damages_once(core):
    core.units = {1: _Unit(Vec2(0.5, 0.0)), 2: _Unit(Vec2(5.0, 5.0))}
    blast = Explosion(core, 7, Vec2(0.0, 0.0), 0.0, 30)
    blast.update()
    assert core.damage == [(1, 7, 10.0)]
    blast.update()
    assert core.damage == [(1, 7, 10.0)]


def test_explosion_removed_after_duration(core):
    blast = Explosion(core, 7, Vec2(0.0, 0.0), 0.0, 2)
    blast.update()
    assert core.removed_particles == []
    blast.update()
    assert core.removed_particles == [7]


def test_smoke_drifts_with_velocity(core):
    smoke = Smoke(core, 3, Vec2(0.0, 0.0), 0.0, Vec2(60.0, -120.0))
    smoke.update()
    assert smoke.position.x == pytest.approx(1.0)
    assert smoke.position.y == pytest.approx(-2.0)


def test_smoke_fades_then_removed(core):
    smoke = Smoke(core, 3, Vec2(0.0, 0.0), 0.0, Vec2(0.0, 0.0), 0.2, (0, 0, 0, 1), 30.0)
    smoke.update()
    assert smoke.strength == pytest.approx(0.5)
    assert core.removed_particles == []
    smoke.update()
    smoke.update()
    assert core.removed_particles == [3]


def test_fast_decaying_smoke_removed_at_once(core):
    smoke = Smoke(core, 4, Vec2(0.0, 0.0), 0.0, Vec2(0.0, 0.0), decay_scale=90.0)
    smoke.update()
    assert core.removed_particles == [4]
    assert smoke.strength < 0.0