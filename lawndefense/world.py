"""The lawn level: spawning, collisions and the losing condition."""

from __future__ import annotations

from typing import Iterator

from .constants import (
    FIRST_COL_CENTER,
    FIRST_ROW_CENTER,
    GAME_COLS,
    GAME_ROWS,
    LAWN_GRID_HEIGHT,
    LAWN_GRID_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AnimId,
    Category,
    Hand,
    LevelStatus,
    rand_int,
)
from .environments import Background, PlantingSpot, Sun
from .gameobject import GameObject
from .seeds import (
    CherryBombSeed,
    CooldownMask,
    PeashooterSeed,
    RepeaterSeed,
    Shovel,
    SunflowerSeed,
    WallnutSeed,
)
from .worldbase import WorldBase
from .zombies import BucketHeadZombie, PoleVaultingZombie, RegularZombie

FIRST_SKY_SUN = 180
SKY_SUN_PERIOD = 300
FIRST_WAVE_DELAY = 1200
POLE_VAULT_FRAMES = 42


def overlaps(a: GameObject, b: GameObject) -> bool:
    """Whether the bounding boxes of two objects strictly overlap."""
    a_right, a_left = a.x + a.width // 2, a.x - a.width // 2
    a_top, a_bottom = a.y + a.height // 2, a.y - a.height // 2
    b_right, b_left = b.x + b.width // 2, b.x - b.width // 2
    b_top, b_bottom = b.y + b.height // 2, b.y - b.height // 2
    return a_right > b_left and a_left < b_right and a_top > b_bottom and a_bottom < b_top


class GameWorld(WorldBase):
    """Holds every game object and advances the level one frame at a time."""

    def __init__(self):
        super().__init__()
        self.objects: list[GameObject] = []
        self.hand = Hand.NOTHING
        self._time = 0
        self._next_wave = FIRST_WAVE_DELAY
        self._zombies_to_spawn = 0

    def _of(self, category: Category) -> Iterator[GameObject]:
        return (obj for obj in self.objects if obj.category == category)

    def init(self) -> None:
        self.wave = 0
        self.sun = 50
        for row in range(GAME_ROWS):
            for col in range(GAME_COLS):
                self.add_object(
                    PlantingSpot(
                        FIRST_COL_CENTER + col * LAWN_GRID_WIDTH,
                        FIRST_ROW_CENTER + row * LAWN_GRID_HEIGHT,
                        self,
                    )
                )
        self.add_object(Background())
        for seed_cls in (SunflowerSeed, PeashooterSeed, WallnutSeed, CherryBombSeed, RepeaterSeed, Shovel):
            self.add_object(seed_cls(self))

    def add_object(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def add_cooldown_mask(self, x: int, y: int, cooldown: int) -> None:
        self.add_object(CooldownMask(x, y, cooldown))

    def update_objects(self) -> None:
        """Update every object, including ones added while updating."""
        for obj in self.objects:
            obj.update()

    def clear_dead_objects(self) -> None:
        """Remove and unregister every object that has run out of hit points."""
        alive = []
        for obj in self.objects:
            if obj.hp <= 0:
                obj.destroy()
            else:
                alive.append(obj)
        self.objects = alive

    def _spawn_sky_sun(self) -> None:
        self._time += 1
        if (self._time - FIRST_SKY_SUN) % SKY_SUN_PERIOD == 0:
            x = rand_int(75, WINDOW_WIDTH - 75)
            self.add_object(Sun(x, WINDOW_HEIGHT - 1, True, self))

    def _advance_wave(self) -> None:
        if self._next_wave == 0:
            self.wave += 1
            self._zombies_to_spawn = (15 + self.wave) // 10
            self._next_wave = max(150, 600 - 20 * self.wave)
        else:
            self._next_wave -= 1

    def _spawn_zombies(self) -> None:
        regular = 20
        vaulting = 2 * max(self.wave - 8, 0)
        bucket = 3 * max(self.wave - 15, 0)
        total = regular + vaulting + bucket
        while self._zombies_to_spawn > 0:
            roll = rand_int(0, total)
            row = rand_int(0, GAME_ROWS - 1)
            x = rand_int(WINDOW_WIDTH - 40, WINDOW_WIDTH - 1)
            y = FIRST_ROW_CENTER + row * LAWN_GRID_HEIGHT
            if roll <= regular:
                zombie_cls = RegularZombie
            elif roll <= regular + vaulting:
                zombie_cls = PoleVaultingZombie
            else:
                zombie_cls = BucketHeadZombie
            self.add_object(zombie_cls(x, y, self))
            self._zombies_to_spawn -= 1

    def _resolve_collisions(self) -> None:
        for zombie in list(self._of(Category.ZOMBIE)):
            for projectile in list(self._of(Category.FLYING_OBJECT)):
                if overlaps(projectile, zombie):
                    projectile.collide()
                    zombie.take_damage(projectile.damage)
            for plant in self._of(Category.PLANT):
                if overlaps(plant, zombie):
                    plant.collide()
                    zombie.collide()
                    break

    def update(self) -> LevelStatus:
        self._spawn_sky_sun()
        self._advance_wave()
        self._spawn_zombies()
        self.update_objects()
        self._resolve_collisions()
        self.clear_dead_objects()
        plants = list(self._of(Category.PLANT))
        for zombie in self._of(Category.ZOMBIE):
            if zombie.x < 0:
                return LevelStatus.LOSING
            if zombie.anim_id == AnimId.EAT and not any(overlaps(p, zombie) for p in plants):
                zombie.stop_eating()
        return LevelStatus.ONGOING

    def clean_up(self) -> None:
        for obj in self.objects:
            obj.destroy()
        self.objects.clear()
        self.hand = Hand.NOTHING
        self._time = 0
        self._next_wave = FIRST_WAVE_DELAY
        self._zombies_to_spawn = 0

    def check_pole_vault(self, zombie: GameObject) -> None:
        """Start a vault if the zombie touches any plant."""
        for plant in self._of(Category.PLANT):
            if overlaps(plant, zombie):
                zombie.play_animation(AnimId.JUMP)
                zombie.set_pole_vaulting_time(POLE_VAULT_FRAMES)
                return

    def no_zombie_on_the_right(self, shooter: GameObject) -> bool:
        """Whether no zombie stands in the shooter's row to its right."""
        return not any(
            zombie.y == shooter.y and zombie.x > shooter.x
            for zombie in self._of(Category.ZOMBIE)
        )