"""The zombies that walk across the lawn."""

from __future__ import annotations

from .constants import AnimId, Category, ImageId, Layer
from .gameobject import GameObject

BUCKET_LOSS_HP = 200
VAULT_LOOKAHEAD = 40
VAULT_DISTANCE = 150


class Zombie(GameObject):
    """Walks left, stopping to eat any plant it touches."""

    category = Category.ZOMBIE

    def __init__(self, x, y, world, anim_id, hp):
        super().__init__(ImageId.REGULAR_ZOMBIE, x, y, Layer.ZOMBIES, 20, 80, anim_id, hp)
        self.world = world
        self.eating = False

    def on_click(self) -> None:
        pass

    def _switch_eating_animation(self) -> None:
        if self.eating and self.anim_id == AnimId.WALK:
            self.play_animation(AnimId.EAT)
        if not self.eating and self.anim_id == AnimId.EAT:
            self.play_animation(AnimId.WALK)

    def update(self) -> None:
        if self.hp == 0:
            return
        self._switch_eating_animation()
        if self.anim_id == AnimId.WALK:
            self.move_to(self.x - 1, self.y)

    def take_damage(self, damage: int) -> None:
        self.hp -= damage

    def collide(self) -> None:
        """Start eating the plant it touches."""
        self.eating = True

    def stop_eating(self) -> None:
        self.eating = False

    def explode(self) -> None:
        self.hp = 0


class RegularZombie(Zombie):
    def __init__(self, x, y, world):
        super().__init__(x, y, world, AnimId.WALK, 200)


class BucketHeadZombie(Zombie):
    """A tough zombie that loses its bucket when badly hurt."""

    def __init__(self, x, y, world):
        super().__init__(x, y, world, AnimId.WALK, 1300)
        self.change_image(ImageId.BUCKET_HEAD_ZOMBIE)

    def update(self) -> None:
        if self.hp == 0:
            return
        super().update()
        if self.hp <= BUCKET_LOSS_HP:
            self.change_image(ImageId.REGULAR_ZOMBIE)


class PoleVaultingZombie(Zombie):
    """Runs until it meets a plant, vaults over it once, then walks."""

    def __init__(self, x, y, world):
        super().__init__(x, y, world, AnimId.RUN, 340)
        self.change_image(ImageId.POLE_VAULTING_ZOMBIE)
        self.pole_vaulting_time = -1

    def update(self) -> None:
        if self.hp == 0:
            return
        self._switch_eating_animation()
        if self.pole_vaulting_time == -1:
            # Look a little ahead for a plant to vault over.
            self.move_to(self.x - VAULT_LOOKAHEAD, self.y)
            self.world.check_pole_vault(self)
            self.move_to(self.x + VAULT_LOOKAHEAD, self.y)
        elif self.pole_vaulting_time > 0:
            self.pole_vaulting_time -= 1
        elif self.pole_vaulting_time == 0:
            self.move_to(self.x - VAULT_DISTANCE, self.y)
            self.play_animation(AnimId.WALK)
            self.pole_vaulting_time = -2
        if self.anim_id == AnimId.RUN:
            self.move_to(self.x - 2, self.y)
        elif self.anim_id == AnimId.WALK:
            self.move_to(self.x - 1, self.y)

    def set_pole_vaulting_time(self, time: int) -> None:
        self.pole_vaulting_time = time