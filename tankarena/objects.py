"""Base game objects: skills, input snapshots, obstacles, particles and bullets."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from tankarena.vector import Vec2

TICK_PER_SECOND = 60
SECOND_PER_TICK = 1.0 / TICK_PER_SECOND

KEY_RANGE = 349
MOUSE_BUTTON_RANGE = 8


class SkillType(enum.Enum):
    """How a skill is triggered."""

    E = "E"
    Q = "Q"
    R = "R"
    P = "P"
    B = "B"
    SPACE = "SPACE"
    F = "F"


@dataclass
class Skill:
    """A unit ability with its cooldown and, for bullet skills, bullet selection."""

    name: str = ""
    type: SkillType = SkillType.P
    time_remain: int = 0
    time_total: int = 0
    bullet_type: int = 0
    bullet_total_number: int = 0
    description: str = ""
    src: str = ""
    function: Optional[Callable[[], None]] = None
    switch_bullet: Optional[Callable[[int], None]] = None


def _checked(values, limit: int, what: str) -> frozenset:
    result = frozenset(values)
    for value in result:
        if not 0 <= value < limit:
            raise ValueError(f"{what} {value} is outside the range [0, {limit})")
    return result


@dataclass(frozen=True)
class InputData:
    """A snapshot of keyboard and mouse state for one player."""

    key_down: frozenset = field(default_factory=frozenset)
    mouse_button_down: frozenset = field(default_factory=frozenset)
    mouse_button_clicked: frozenset = field(default_factory=frozenset)
    mouse_cursor_position: Vec2 = field(default_factory=Vec2)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_down", _checked(self.key_down, KEY_RANGE, "key"))
        object.__setattr__(
            self,
            "mouse_button_down",
            _checked(self.mouse_button_down, MOUSE_BUTTON_RANGE, "mouse button"),
        )
        object.__setattr__(
            self,
            "mouse_button_clicked",
            _checked(self.mouse_button_clicked, MOUSE_BUTTON_RANGE, "mouse button"),
        )


class GameObject(ABC):
    """Anything placed in the world with a position and a rotation."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        position: Vec2 = Vec2(0.0, 0.0),
        rotation: float = 0.0,
    ) -> None:
        self.game_core = game_core
        self.id = object_id
        self.position = position
        self.rotation = rotation

    def local_to_world(self, p: Vec2) -> Vec2:
        """Map a point from this object's frame to world coordinates."""
        return self.position + p.rotated(self.rotation)

    def world_to_local(self, p: Vec2) -> Vec2:
        """Map a world point into this object's frame."""
        return (p - self.position).rotated(-self.rotation)

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one game tick."""


class Obstacle(GameObject):
    """A static or timed object that blocks movement and bullets."""

    def update(self) -> None:
        return None

    @abstractmethod
    def is_blocked(self, p: Vec2) -> bool:
        """Whether the world point ``p`` lies inside the obstacle."""

    def surface_normal(self, origin: Vec2, terminus: Vec2) -> tuple[Vec2, Vec2]:
        """Hit point and unit normal of the segment's crossing; zeros if none."""
        return Vec2(0.0, 0.0), Vec2(0.0, 0.0)


class Particle(GameObject):
    """A short-lived visual effect."""


class Bullet(GameObject):
    """A projectile fired by a unit on behalf of a player."""

    def __init__(
        self,
        game_core: Any,
        object_id: int,
        unit_id: int,
        player_id: int,
        position: Vec2,
        rotation: float,
        damage_scale: float = 1.0,
    ) -> None:
        super().__init__(game_core, object_id, position, rotation)
        self.unit_id = unit_id
        self.player_id = player_id
        self.damage_scale = damage_scale
        self.removed = False

    def on_removed(self) -> None:
        """Mark the bullet as gone from the game; subclasses add their effects."""
        self.removed = True