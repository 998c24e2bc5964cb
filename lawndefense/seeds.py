"""Seed packets, the shovel and the cooldown masks drawn over packets."""

from __future__ import annotations

from .constants import WINDOW_HEIGHT, AnimId, Category, Hand, ImageId, Layer
from .gameobject import GameObject

SEED_ROW_Y = WINDOW_HEIGHT - 44


class CooldownMask(GameObject):
    """Covers a seed packet, blocking clicks, until its cooldown runs out."""

    category = Category.SEED

    def __init__(self, x, y, cooldown):
        super().__init__(
            ImageId.COOLDOWN_MASK, x, y, Layer.COOLDOWN_MASK, 50, 70, AnimId.NO_ANIMATION, cooldown
        )

    def update(self) -> None:
        self.hp -= 1

    def on_click(self) -> None:
        pass


class Seed(GameObject):
    """A packet that, when bought, puts its plant in the player's hand."""

    category = Category.SEED
    hand: Hand = Hand.NOTHING

    def __init__(self, image_id, x, y, width, height, price, cooldown, world):
        super().__init__(image_id, x, y, Layer.UI, width, height, AnimId.NO_ANIMATION)
        self.price = price
        self.cooldown = cooldown
        self.world = world

    def update(self) -> None:
        pass

    def on_click(self) -> None:
        if self.world.hand != Hand.NOTHING:
            return
        if self.world.sun < self.price:
            return
        self.world.sun -= self.price
        self.select()
        self.world.add_cooldown_mask(self.x, self.y, self.cooldown)

    def select(self) -> None:
        """Put this packet's item in the player's hand."""
        self.world.hand = self.hand


class SunflowerSeed(Seed):
    hand = Hand.SUNFLOWER

    def __init__(self, world):
        super().__init__(ImageId.SEED_SUNFLOWER, 130, SEED_ROW_Y, 50, 70, 50, 240, world)


class PeashooterSeed(Seed):
    hand = Hand.PEASHOOTER

    def __init__(self, world):
        super().__init__(ImageId.SEED_PEASHOOTER, 190, SEED_ROW_Y, 50, 70, 100, 240, world)


class WallnutSeed(Seed):
    hand = Hand.WALLNUT

    def __init__(self, world):
        super().__init__(ImageId.SEED_WALLNUT, 250, SEED_ROW_Y, 50, 70, 50, 900, world)


class CherryBombSeed(Seed):
    hand = Hand.CHERRY_BOMB

    def __init__(self, world):
        super().__init__(ImageId.SEED_CHERRY_BOMB, 310, SEED_ROW_Y, 50, 70, 150, 1200, world)


class RepeaterSeed(Seed):
    hand = Hand.REPEATER

    def __init__(self, world):
        super().__init__(ImageId.SEED_REPEATER, 370, SEED_ROW_Y, 50, 70, 200, 240, world)


class Shovel(Seed):
    """Picks up or puts down the shovel; it costs nothing."""

    hand = Hand.SHOVEL

    def __init__(self, world):
        super().__init__(ImageId.SHOVEL, 600, WINDOW_HEIGHT - 40, 50, 50, 0, 0, world)

    def on_click(self) -> None:
        if self.world.hand == Hand.SHOVEL:
            self.world.hand = Hand.NOTHING
        elif self.world.hand == Hand.NOTHING:
            self.select()