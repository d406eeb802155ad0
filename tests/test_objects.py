import math

import pytest

from tankarena.objects import (
    KEY_RANGE,
    MOUSE_BUTTON_RANGE,
    Bullet,
    GameObject,
    InputData,
    Obstacle,
    Particle,
    Skill,
    SkillType,
)
from tankarena.vector import Vec2


class _Thing(GameObject):
    def update(self):
        self.position = self.position + Vec2(1.0, 0.0)


class _Wall(Obstacle):
    def is_blocked(self, p):
        return abs(p.x) <= 1.0


class _Spark(Particle):
    def update(self):
        self.rotation += 1.0


class _Shot(Bullet):
    def update(self):
        self.position = self.position + Vec2(0.0, 1.0)


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject(None, 1)


def test_obstacle_requires_is_blocked():
    with pytest.raises(TypeError):
        Obstacle(None, 1, Vec2(0.0, 0.0))


def test_defaults():
    thing = _Thing(None, 7)
    assert thing.id == 7
    assert thing.position == Vec2(0.0, 0.0)
    assert thing.rotation == 0.0


def test_local_origin_is_position():
    thing = _Thing(None, 1, Vec2(2.0, -3.0), 1.1)
    assert thing.local_to_world(Vec2(0.0, 0.0)) == Vec2(2.0, -3.0)


def test_local_to_world_quarter_turn():
    thing = _Thing(None, 1, Vec2(2.0, 3.0), math.pi / 2)
    p = thing.local_to_world(Vec2(1.0, 0.0))
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(4.0)


@pytest.mark.parametrize("rotation", [0.0, 0.7, -2.0, math.pi])
def test_world_local_round_trip(rotation):
    thing = _Thing(None, 1, Vec2(-4.0, 1.5), rotation)
    p = Vec2(3.0, 9.0)
    back = thing.local_to_world(thing.world_to_local(p))
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_update_is_dispatched():
    thing = _Thing(None, 1, Vec2(0.0, 0.0))
    thing.update()
    assert thing.position == Vec2(1.0, 0.0)
    spark = _Spark(None, 2, Vec2(0.0, 0.0))
    spark.update()
    assert spark.rotation == 1.0


def test_obstacle_default_surface_normal_is_zero():
    wall = _Wall(None, 1, Vec2(0.0, 0.0))
    assert wall.surface_normal(Vec2(-5.0, 0.0), Vec2(0.0, 0.0)) == (
        Vec2(0.0, 0.0),
        Vec2(0.0, 0.0),
    )
    assert wall.is_blocked(Vec2(0.5, 100.0)) is True
    assert wall.is_blocked(Vec2(2.0, 0.0)) is False


def test_obstacle_update_keeps_state():
    wall = _Wall(None, 1, Vec2(1.0, 1.0), 0.5)
    wall.update()
    assert wall.position == Vec2(1.0, 1.0)
    assert wall.rotation == 0.5


def test_bullet_fields():
    shot = _Shot(None, 3, 11, 2, Vec2(1.0, 1.0), 0.25)
    assert (shot.id, shot.unit_id, shot.player_id) == (3, 11, 2)
    assert shot.damage_scale == 1.0
    assert shot.rotation == 0.25
    shot.update()
    assert shot.position == Vec2(1.0, 2.0)


def test_skill_defaults_and_fields():
    skill = Skill("Blast", SkillType.E, 30, 120)
    assert skill.name == "Blast"
    assert skill.type is SkillType.E
    assert (skill.time_remain, skill.time_total) == (30, 120)
    assert skill.description == ""
    assert skill.function is None


def test_input_data_defaults():
    data = InputData()
    assert data.key_down == frozenset()
    assert data.mouse_cursor_position == Vec2(0.0, 0.0)


def test_input_data_converts_to_frozenset():
    data = InputData(key_down=[65, 87, 65], mouse_button_down={0})
    assert data.key_down == frozenset({65, 87})
    assert 0 in data.mouse_button_down


def test_input_data_rejects_out_of_range_key():
    with pytest.raises(ValueError):
        InputData(key_down={KEY_RANGE})


def test_input_data_rejects_out_of_range_button():
    with pytest.raises(ValueError):
        InputData(mouse_button_clicked={MOUSE_BUTTON_RANGE})