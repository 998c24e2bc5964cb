"""Projectiles and blasts that damage zombies."""

from __future__ import annotations

from .constants import (
    LAWN_GRID_HEIGHT,
    LAWN_GRID_WIDTH,
    WINDOW_WIDTH,
    AnimId,
    Category,
    ImageId,
    Layer,
)
from .gameobject import GameObject

PEA_DAMAGE = 20
PEA_SPEED = 8
EXPLOSION_DAMAGE = 2000
EXPLOSION_FRAMES = 3


class FlyingObject(GameObject):
    """Something that damages the zombies it overlaps."""

    category = Category.FLYING_OBJECT

    def __init__(self, image_id, x, y, layer, width, height, anim_id, damage):
        super().__init__(image_id, x, y, layer, width, height, anim_id)
        self.damage = damage

    def on_click(self) -> None:
        pass


class Explosion(FlyingObject):
    """A short-lived blast covering three by three lawn cells."""

    def __init__(self, x, y, world):
        super().__init__(
            ImageId.EXPLOSION,
            x,
            y,
            Layer.PROJECTILES,
            3 * LAWN_GRID_WIDTH,
            3 * LAWN_GRID_HEIGHT,
            AnimId.NO_ANIMATION,
            EXPLOSION_DAMAGE,
        )
        self.world = world
        self.bomb_time = EXPLOSION_FRAMES

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.bomb_time == 0:
            self.hp = 0
        else:
            self.bomb_time -= 1

    def collide(self) -> None:
        """A blast is not used up by what it hits."""


class Pea(FlyingObject):
    """A pea flying right until it hits a zombie or leaves the window."""

    def __init__(self, x, y, world):
        super().__init__(
            ImageId.PEA, x, y, Layer.PROJECTILES, 28, 28, AnimId.NO_ANIMATION, PEA_DAMAGE
        )
        self.world = world

    def update(self) -> None:
        if self.hp == 0:
            return
        self.move_to(self.x + PEA_SPEED, self.y)
        if self.x >= WINDOW_WIDTH:
            self.hp = 0

    def collide(self) -> None:
        self.hp = 0