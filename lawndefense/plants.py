"""Plants the player places on the lawn."""

from __future__ import annotations

from .constants import AnimId, Category, Hand, ImageId, Layer, rand_int
from .environments import Sun
from .flying import Explosion, Pea
from .gameobject import GameObject

SUNFLOWER_PERIOD = 600
PEASHOOTER_RELOAD = 30
REPEATER_RELOAD = 25
REPEATER_GAP = 4
CHERRY_BOMB_FUSE = 15
WALLNUT_HP = 4000
EAT_DAMAGE = 3


class Plant(GameObject):
    """A lawn plant that zombies eat and the shovel removes."""

    category = Category.PLANT

    def __init__(self, image_id, x, y, hp, world):
        super().__init__(image_id, x, y, Layer.PLANTS, 60, 80, AnimId.IDLE, hp)
        self.world = world

    def on_click(self) -> None:
        if self.world.hand == Hand.SHOVEL:
            self.hp = 0
            self.world.hand = Hand.NOTHING

    def collide(self) -> None:
        """Lose hit points to a zombie eating it."""
        self.hp -= EAT_DAMAGE

    def _shoot(self) -> None:
        self.world.add_object(Pea(self.x + 30, self.y + 20, self.world))


class Sunflower(Plant):
    """Produces sun at a regular interval."""

    def __init__(self, x, y, world):
        super().__init__(ImageId.SUNFLOWER, x, y, 300, world)
        self.sun_timer = rand_int(30, SUNFLOWER_PERIOD)

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.sun_timer == 0:
            self.world.add_object(Sun(self.x, self.y, False, self.world))
            self.sun_timer = SUNFLOWER_PERIOD
        self.sun_timer -= 1


class Peashooter(Plant):
    """Shoots a pea whenever a zombie is to its right in its row."""

    def __init__(self, x, y, world):
        super().__init__(ImageId.PEASHOOTER, x, y, 300, world)
        self.shoot_time = 0

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.shoot_time == 0:
            if self.world.no_zombie_on_the_right(self):
                return
            self._shoot()
            self.shoot_time = PEASHOOTER_RELOAD
        else:
            self.shoot_time -= 1


class Wallnut(Plant):
    """A sturdy blocker that looks cracked once badly damaged."""

    def __init__(self, x, y, world):
        super().__init__(ImageId.WALLNUT, x, y, WALLNUT_HP, world)

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.hp < WALLNUT_HP // 3:
            self.change_image(ImageId.WALLNUT_CRACKED)


class CherryBomb(Plant):
    """Explodes shortly after being planted."""

    def __init__(self, x, y, world):
        super().__init__(ImageId.CHERRY_BOMB, x, y, 4000, world)
        self.bomb_time = CHERRY_BOMB_FUSE

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.bomb_time == 0:
            self.world.add_object(Explosion(self.x, self.y, self.world))
            self.hp = 0
        else:
            self.bomb_time -= 1

    def on_click(self) -> None:
        """A cherry bomb cannot be shovelled."""


class Repeater(Plant):
    """Shoots two peas in quick succession when a zombie is to its right."""

    def __init__(self, x, y, world):
        super().__init__(ImageId.REPEATER, x, y, 300, world)
        self.shoot_time = 0
        self.double_shoot = -1

    def update(self) -> None:
        if self.hp == 0:
            return
        if self.shoot_time != 0:
            self.shoot_time -= 1
            return
        if self.world.no_zombie_on_the_right(self):
            return
        if self.double_shoot == -1:
            self._shoot()
            self.double_shoot = REPEATER_GAP
        elif self.double_shoot > 0:
            self.double_shoot -= 1
        else:
            self._shoot()
            self.shoot_time = REPEATER_RELOAD
            self.double_shoot = -1