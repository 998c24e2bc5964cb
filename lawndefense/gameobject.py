"""Base class for every object that lives in the game world."""

from __future__ import annotations

from .constants import Category
from .objectbase import ObjectBase


class GameObject(ObjectBase):
    """An object with hit points, a category and collision hooks.

    Subclasses set ``category`` and, for projectiles, ``damage``.
    The hooks do nothing by default.
    """

    category: Category = Category.ENVIRONMENT
    damage: int = 0

    def __init__(self, image_id, x, y, layer, width, height, anim_id, hp=1):
        super().__init__(image_id, x, y, layer, width, height, anim_id)
        self.hp = hp

    def collide(self) -> None:
        """React to touching another object."""

    def take_damage(self, damage: int) -> None:
        """React to being hit for the given damage."""

    def explode(self) -> None:
        """React to an explosion."""

    def stop_eating(self) -> None:
        """React to no longer touching a plant."""

    def set_pole_vaulting_time(self, time: int) -> None:
        """Start a vault lasting the given number of frames."""