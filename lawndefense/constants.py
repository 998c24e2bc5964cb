"""Game-wide constants, identifiers and the shared random helper."""

from __future__ import annotations

import random
from enum import Enum, IntEnum


class LevelStatus(Enum):
    """Outcome of advancing the world by one frame."""

    ONGOING = "ongoing"
    LOSING = "losing"


class KeyCode(Enum):
    """Keys the game reacts to."""

    NONE = 0
    ENTER = 1
    QUIT = 2


class ImageId(IntEnum):
    """Identifiers of every image the game can draw."""

    NONE = -1
    BACKGROUND = 0
    SUN = 1
    SHOVEL = 2
    COOLDOWN_MASK = 3
    SUNFLOWER = 10
    PEASHOOTER = 11
    WALLNUT = 12
    CHERRY_BOMB = 13
    REPEATER = 14
    WALLNUT_CRACKED = 15
    SEED_SUNFLOWER = 20
    SEED_PEASHOOTER = 21
    SEED_WALLNUT = 22
    SEED_CHERRY_BOMB = 23
    SEED_REPEATER = 24
    REGULAR_ZOMBIE = 30
    BUCKET_HEAD_ZOMBIE = 31
    POLE_VAULTING_ZOMBIE = 32
    PEA = 40
    EXPLOSION = 41
    ZOMBIES_WON = 99


class AnimId(IntEnum):
    """Identifiers of the animations a sprite can play."""

    NO_ANIMATION = -1
    IDLE = 0
    WALK = 1
    EAT = 2
    RUN = 3
    JUMP = 4


class Layer(IntEnum):
    """Drawing layers; lower values are drawn on top and clicked first."""

    SUN = 0
    ZOMBIES = 1
    PROJECTILES = 2
    PLANTS = 3
    COOLDOWN_MASK = 4
    UI = 5
    BACKGROUND = 6


class Hand(IntEnum):
    """What the player is currently holding."""

    SHOVEL = -1
    NOTHING = 0
    SUNFLOWER = 1
    PEASHOOTER = 2
    WALLNUT = 3
    CHERRY_BOMB = 4
    REPEATER = 5


class Category(IntEnum):
    """Broad kinds of game objects, used for collision handling."""

    ENVIRONMENT = -2
    SEED = -1
    PLANT = 0
    ZOMBIE = 1
    FLYING_OBJECT = 2


MAX_LAYERS = len(Layer)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

LAWN_GRID_WIDTH = 80
LAWN_GRID_HEIGHT = 100

FIRST_ROW_CENTER = 75
FIRST_COL_CENTER = 75
GAME_ROWS = 5
GAME_COLS = 9

MS_PER_FRAME = 33


def rand_int(low: int, high: int) -> int:
    """Return a random integer in the inclusive range between the two bounds."""
    if high < low:
        low, high = high, low
    return random.randint(low, high)