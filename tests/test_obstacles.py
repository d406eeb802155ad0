import math

import pytest

from tankarena.obstacles import Block, ReboundingBlock, River, SafetyDeclaration
from tankarena.vector import Vec2


class _Thing:
    def __init__(self, position):
        self.position = position


class _Core:
    def __init__(self):
        self.bullets = {}
        self.units = {}
        self.removed_obstacles = []

    def push_event_remove_obstacle(self, obstacle_id):
        self.removed_obstacles.append(obstacle_id)


@pytest.fixture
def core():
    return _Core()


def test_block_inside_and_outside(core):
    block = Block(core, 1, Vec2(0.0, 0.0))
    assert block.is_blocked(Vec2(0.5, 0.5))
    assert block.is_blocked(Vec2(1.0, 1.0))
    assert not block.is_blocked(Vec2(1.5, 0.0))


def test_block_respects_position_and_rotation(core):
    moved = Block(core, 1, Vec2(-3.0, 4.0))
    assert moved.is_blocked(Vec2(-3.5, 4.5))
    assert not moved.is_blocked(Vec2(0.0, 0.0))
    rotated = Block(core, 2, Vec2(0.0, 0.0), math.pi / 4)
    assert rotated.is_blocked(Vec2(1.3, 0.0))
    assert not Block(core, 3, Vec2(0.0, 0.0)).is_blocked(Vec2(1.3, 0.0))


def test_block_is_always_unit_sized(core):
    block = Block(core, 1, Vec2(0.0, 0.0), 0.0, Vec2(5.0, 5.0))
    assert not block.is_blocked(Vec2(2.0, 0.0))


def test_river_blocks_points_without_bullets(core):
    river = River(core, 1, Vec2(3.0, 0.0))
    assert river.is_blocked(Vec2(3.5, 0.5))
    assert not river.is_blocked(Vec2(5.0, 0.0))


def test_river_lets_bullet_positions_through(core):
    river = River(core, 1, Vec2(3.0, 0.0))
    core.bullets[7] = _Thing(Vec2(3.25, 0.5))
    assert not river.is_blocked(Vec2(3.25, 0.5))
    assert river.is_blocked(Vec2(3.5, 0.5))


def test_rebounding_block_uses_scale(core):
    block = ReboundingBlock(core, 1, Vec2(0.0, 0.0), 0.0, Vec2(2.0, 2.0))
    assert block.is_blocked(Vec2(1.5, 1.5))
    assert not block.is_blocked(Vec2(2.5, 0.0))


def test_surface_normal_left_edge(core):
    block = ReboundingBlock(core, 1, Vec2(0.0, 0.0))
    point, normal = block.surface_normal(Vec2(-3.0, 0.0), Vec2(-0.5, 0.0))
    assert point.x == pytest.approx(-1.0)
    assert point.y == pytest.approx(0.0)
    assert normal.x == pytest.approx(-1.0)
    assert normal.y == pytest.approx(0.0)


def test_surface_normal_top_edge(core):
    block = ReboundingBlock(core, 1, Vec2(0.0, 0.0))
    point, normal = block.surface_normal(Vec2(0.0, 3.0), Vec2(0.0, 0.5))
    assert point.y == pytest.approx(1.0)
    assert normal.x == pytest.approx(0.0)
    assert normal.y == pytest.approx(1.0)


def test_surface_normal_miss_returns_zeros(core):
    block = ReboundingBlock(core, 1, Vec2(0.0, 0.0))
    assert block.surface_normal(Vec2(3.0, 3.0), Vec2(4.0, 4.0)) == (
        Vec2(0.0, 0.0),
        Vec2(0.0, 0.0),
    )


def test_surface_normal_rotated_block_invariants(core):
    block = ReboundingBlock(core, 1, Vec2(10.0, -10.0), math.pi / 4)
    origin = Vec2(7.0, -10.0)
    terminus = Vec2(9.5, -10.0)
    point, normal = block.surface_normal(origin, terminus)
    assert normal.length() == pytest.approx(1.0)
    local = block.world_to_local(point)
    assert max(abs(local.x), abs(local.y)) == pytest.approx(1.0)
    assert normal.dot(origin - point) > 0


def test_safety_declaration_expires(core):
    barrier = SafetyDeclaration(core, 4, Vec2(0.0, 0.0))
    for _ in range(180):
        barrier.update()
    assert core.removed_obstacles == []
    barrier.update()
    assert core.removed_obstacles == [4]


def test_safety_declaration_is_three_wide(core):
    barrier = SafetyDeclaration(core, 4, Vec2(0.0, 0.0), 0.0, Vec2(1.0, 1.0))
    assert barrier.is_blocked(Vec2(2.5, 0.0))
    assert not barrier.is_blocked(Vec2(3.5, 0.0))