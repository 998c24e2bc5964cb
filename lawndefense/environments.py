"""Scenery: the lawn background, planting spots and collectable sun."""

from __future__ import annotations

from .constants import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AnimId,
    Category,
    Hand,
    ImageId,
    Layer,
    rand_int,
)
from .gameobject import GameObject

SUN_VALUE = 25
SKY_FALL_RANGE = (63, 263)
PRODUCED_SUN_FLIGHT = 12
SUN_LIFETIME = 300


class Background(GameObject):
    """The lawn picture filling the whole window."""

    category = Category.ENVIRONMENT

    def __init__(self):
        super().__init__(
            ImageId.BACKGROUND,
            WINDOW_WIDTH // 2,
            WINDOW_HEIGHT // 2,
            Layer.BACKGROUND,
            WINDOW_WIDTH,
            WINDOW_HEIGHT,
            AnimId.NO_ANIMATION,
        )

    def update(self) -> None:
        pass

    def on_click(self) -> None:
        pass


class PlantingSpot(GameObject):
    """An invisible lawn cell that plants whatever seed the player holds."""

    category = Category.ENVIRONMENT

    def __init__(self, x, y, world):
        super().__init__(ImageId.NONE, x, y, Layer.UI, 60, 80, AnimId.NO_ANIMATION)
        self.world = world

    def update(self) -> None:
        pass

    def on_click(self) -> None:
        # Imported here because plants produce sun from this module.
        from .plants import CherryBomb, Peashooter, Repeater, Sunflower, Wallnut

        plant_for_hand = {
            Hand.SUNFLOWER: Sunflower,
            Hand.PEASHOOTER: Peashooter,
            Hand.WALLNUT: Wallnut,
            Hand.CHERRY_BOMB: CherryBomb,
            Hand.REPEATER: Repeater,
        }
        plant_cls = plant_for_hand.get(self.world.hand)
        if plant_cls is None:
            return
        self.world.add_object(plant_cls(self.x, self.y, self.world))
        self.world.hand = Hand.NOTHING


class Sun(GameObject):
    """Sun that falls from the sky or pops out of a sunflower."""

    category = Category.ENVIRONMENT

    def __init__(self, x, y, from_sky, world):
        super().__init__(ImageId.SUN, x, y, Layer.SUN, 80, 80, AnimId.IDLE)
        self.from_sky = bool(from_sky)
        self.world = world
        self.fall_time = rand_int(*SKY_FALL_RANGE) if self.from_sky else PRODUCED_SUN_FLIGHT

    def on_click(self) -> None:
        self.world.sun += SUN_VALUE
        self.hp = 0

    def update(self) -> None:
        if self.fall_time > 0:
            if self.from_sky:
                self.move_to(self.x, self.y - 2)
            else:
                self.move_to(self.x - 1, self.y + 4 - (PRODUCED_SUN_FLIGHT - self.fall_time))
        if self.fall_time < -SUN_LIFETIME:
            self.hp = 0
        self.fall_time -= 1