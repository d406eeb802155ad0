"""Concrete obstacles: plain blocks, rivers, bouncing blocks and timed barriers."""

from __future__ import annotations

from typing import Any

from tankarena.objects import TICK_PER_SECOND, Obstacle
from tankarena.vector import Vec2

_ZERO = Vec2(0.0, 0.0)


def _inside_box(local: Vec2, scale: Vec2) -> bool:
    return -scale.x <= local.x <= scale.x and -scale.y <= local.y <= scale.y


def _segments_intersect(a: Vec2, b: Vec2, c: Vec2, d: Vec2) -> bool:
    """Whether segment ab touches segment cd."""
    if (
        max(c.x, d.x) < min(a.x, b.x)
        or max(c.y, d.y) < min(a.y, b.y)
        or max(a.x, b.x) < min(c.x, d.x)
        or max(a.y, b.y) < min(c.y, d.y)
    ):
        return False
    if (a - d).cross(c - d) * (b - d).cross(c - d) > 0:
        return False
    if (c - a).cross(b - a) * (d - a).cross(b - a) > 0:
        return False
    return True


class Block(Obstacle):
    """A solid unit square; the ``scale`` argument is accepted but not applied."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        super().__init__(game_core, object_id, position, rotation)
        self.scale = Vec2(1.0, 1.0)

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)


class River(Obstacle):
    """A unit-square stretch of water that bullets pass over but units cannot."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        super().__init__(game_core, object_id, position, rotation)
        self.scale = Vec2(1.0, 1.0)

    def is_blocked(self, p: Vec2) -> bool:
        if not _inside_box(self.world_to_local(p), self.scale):
            return False
        return all(bullet.position != p for bullet in self.game_core.bullets.values())


class ReboundingBlock(Obstacle):
    """A block whose surface reflects bouncing bullets."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(1.0, 1.0),
    ) -> None:
        super().__init__(game_core, object_id, position, rotation)
        self.scale = scale

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)

    def surface_normal(self, origin: Vec2, terminus: Vec2) -> tuple[Vec2, Vec2]:
        """World hit point and outward unit normal of the first edge crossed."""
        origin = self.world_to_local(origin)
        terminus = self.world_to_local(terminus)
        sx, sy = self.scale.x, self.scale.y
        travel = terminus - origin
        intersection = _ZERO
        direction = _ZERO
        if _segments_intersect(origin, terminus, Vec2(-sx, -sy), Vec2(-sx, sy)):
            intersection = origin + travel * ((-sx - origin.x) / travel.x)
            direction = Vec2(-1.0, 0.0)
        elif _segments_intersect(origin, terminus, Vec2(sx, -sy), Vec2(sx, sy)):
            intersection = origin + travel * ((sx - origin.x) / travel.x)
            direction = Vec2(1.0, 0.0)
        elif _segments_intersect(origin, terminus, Vec2(-sx, -sy), Vec2(sx, -sy)):
            intersection = origin + travel * ((-sy - origin.y) / travel.y)
            direction = Vec2(0.0, -1.0)
        elif _segments_intersect(origin, terminus, Vec2(-sx, sy), Vec2(sx, sy)):
            intersection = origin + travel * ((sy - origin.y) / travel.y)
            direction = Vec2(0.0, 1.0)
        if direction != _ZERO:
            direction = (
                self.local_to_world(intersection + direction)
                - self.local_to_world(intersection)
            ).normalized()
            intersection = self.local_to_world(intersection)
        return intersection, direction


class SafetyDeclaration(Obstacle):
    """A temporary 3x3 barrier that removes itself after three seconds."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 = Vec2(3.0, 3.0),
    ) -> None:
        super().__init__(game_core, object_id, position, rotation)
        self.scale = Vec2(3.0, 3.0)
        self.valid_time = 3 * TICK_PER_SECOND

    def is_blocked(self, p: Vec2) -> bool:
        return _inside_box(self.world_to_local(p), self.scale)

    def update(self) -> None:
        if self.valid_time:
            self.valid_time -= 1
        else:
            self.game_core.push_event_remove_obstacle(self.id)