"""Units: the player-controlled pieces that move, shoot and take damage."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from tankarena.objects import GameObject, Skill
from tankarena.vector import Vec2


class Unit(GameObject):
    """A combat unit owned by a player; health is kept as a ratio in [0, 1]."""

    def __init__(self, game_core: Any, unit_id: int, player_id: int) -> None:
        super().__init__(game_core, unit_id)
        self.player_id = player_id
        self._health = 1.0
        self.skills: list[Skill] = []
        self.lifebar_display = True
        self.lifebar_offset = Vec2(0.0, 1.0)
        self._lifebar_length = 2.4
        self.lifebar_front_color = (0.0, 1.0, 0.0, 0.9)
        self.lifebar_background_color = (1.0, 0.0, 0.0, 0.9)
        self.lifebar_fadeout_color = (1.0, 1.0, 1.0, 0.5)

    @property
    def health(self) -> float:
        """Remaining health as a fraction of the maximum."""
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = min(max(value, 0.0), 1.0)

    @property
    def lifebar_length(self) -> float:
        return self._lifebar_length

    @lifebar_length.setter
    def lifebar_length(self, value: float) -> None:
        self._lifebar_length = min(value, 0.0)

    def damage_scale(self) -> float:
        return 1.0

    def speed_scale(self) -> float:
        return 1.0

    def basic_max_health(self) -> float:
        return 100.0

    def health_scale(self) -> float:
        return 1.0

    def max_health(self) -> float:
        """Maximum health, never below one."""
        return max(self.health_scale() * self.basic_max_health(), 1.0)

    @abstractmethod
    def is_hit(self, position: Vec2) -> bool:
        """Whether a bullet at ``position`` hits this unit."""

    def unit_name(self) -> str:
        return "Unknown Unit"

    def author(self) -> str:
        return "Unknown Author"

    def show_life_bar(self) -> None:
        self.lifebar_display = True

    def hide_life_bar(self) -> None:
        self.lifebar_display = False

    def generate_bullet(
        self,
        bullet_type: type,
        position: Vec2,
        rotation: float,
        damage_scale: float = 1.0,
        *args: Any,
    ) -> None:
        """Queue a bullet fired by this unit."""
        self.game_core.push_event_generate_bullet(
            bullet_type, self.id, self.player_id, position, rotation, damage_scale, *args
        )