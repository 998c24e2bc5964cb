"""Sprite-sheet descriptions and image loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pygame

from .constants import AnimId, ImageId

_SPRITE_TABLE = (
    (ImageId.BACKGROUND, AnimId.NO_ANIMATION, "background.png", 800, 600, 800, 600, 1, 1),
    (ImageId.SUN, AnimId.IDLE, "sun_spritesheet.png", 512, 512, 80, 80, 6, 12),
    (ImageId.SHOVEL, AnimId.NO_ANIMATION, "shovel.png", 80, 80, 80, 80, 1, 1),
    (ImageId.COOLDOWN_MASK, AnimId.NO_ANIMATION, "seedpacket_cooldown.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SEED_SUNFLOWER, AnimId.NO_ANIMATION, "seedpacket_sunflower.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SEED_PEASHOOTER, AnimId.NO_ANIMATION, "seedpacket_peashooter.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SEED_WALLNUT, AnimId.NO_ANIMATION, "seedpacket_wallnut.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SEED_CHERRY_BOMB, AnimId.NO_ANIMATION, "seedpacket_cherry_bomb.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SEED_REPEATER, AnimId.NO_ANIMATION, "seedpacket_repeater.png", 50, 70, 50, 70, 1, 1),
    (ImageId.SUNFLOWER, AnimId.IDLE, "sunflower_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageId.PEASHOOTER, AnimId.IDLE, "peashooter_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageId.WALLNUT, AnimId.IDLE, "wallnut_spritesheet.png", 512, 512, 80, 80, 6, 32),
    (ImageId.CHERRY_BOMB, AnimId.IDLE, "cherry_bomb_spritesheet.png", 512, 512, 120, 120, 4, 14),
    (ImageId.REPEATER, AnimId.IDLE, "repeater_spritesheet.png", 512, 512, 80, 80, 6, 24),
    (ImageId.WALLNUT_CRACKED, AnimId.IDLE, "wallnut_cracked_spritesheet.png", 512, 512, 80, 80, 6, 32),
    (ImageId.REGULAR_ZOMBIE, AnimId.WALK, "zombie_walk_spritesheet.png", 1024, 1024, 100, 139, 10, 46),
    (ImageId.REGULAR_ZOMBIE, AnimId.EAT, "zombie_eat_spritesheet.png", 1024, 1024, 100, 139, 10, 39),
    (ImageId.BUCKET_HEAD_ZOMBIE, AnimId.WALK, "bucket_head_walk_spritesheet.png", 1024, 1024, 100, 139, 10, 46),
    (ImageId.BUCKET_HEAD_ZOMBIE, AnimId.EAT, "bucket_head_eat_spritesheet.png", 1024, 1024, 100, 139, 10, 39),
    (ImageId.POLE_VAULTING_ZOMBIE, AnimId.WALK, "pole_vaulter_walk_spritesheet.png", 1024, 1024, 100, 180, 10, 44),
    (ImageId.POLE_VAULTING_ZOMBIE, AnimId.EAT, "pole_vaulter_eat_spritesheet.png", 1024, 1024, 100, 180, 10, 27),
    (ImageId.POLE_VAULTING_ZOMBIE, AnimId.RUN, "pole_vaulter_run_spritesheet.png", 2048, 2048, 300, 180, 6, 36),
    (ImageId.POLE_VAULTING_ZOMBIE, AnimId.JUMP, "pole_vaulter_jump_spritesheet.png", 2048, 2048, 500, 180, 4, 42),
    (ImageId.PEA, AnimId.NO_ANIMATION, "pea.png", 28, 28, 28, 28, 1, 1),
    (ImageId.EXPLOSION, AnimId.NO_ANIMATION, "explosion.png", 240, 227, 240, 227, 1, 1),
    (ImageId.ZOMBIES_WON, AnimId.NO_ANIMATION, "ZombiesWon.jpg", 564, 468, 564, 468, 1, 1),
)


def encode_anim(image_id: int, anim_id: int) -> int:
    """Combine an image and an animation into one lookup key."""
    return image_id * 1000 + anim_id


def default_asset_dir() -> Path:
    """The ``assets`` directory beside the current working directory."""
    return Path.cwd().parent / "assets"


@dataclass
class SpriteInfo:
    """Layout of one sprite sheet and, once loaded, its image."""

    filename: Path
    total_width: int
    total_height: int
    sprite_width: int
    sprite_height: int
    cols: int = 1
    frames: int = 1
    surface: Optional[Any] = field(default=None, compare=False, repr=False)

    def frame_rect(self, frame: int) -> tuple[int, int, int, int]:
        """Pixel rectangle (x, y, width, height) of a frame within the sheet."""
        row, col = divmod(frame, self.cols)
        return (
            col * self.sprite_width,
            row * self.sprite_height,
            self.sprite_width,
            self.sprite_height,
        )


class SpriteManager:
    """Looks up sprite sheets by image and animation, and loads their images."""

    def __init__(self, asset_dir=None):
        self.asset_dir = Path(asset_dir) if asset_dir is not None else default_asset_dir()
        self._infos: dict[int, SpriteInfo] = {
            encode_anim(image_id, anim_id): SpriteInfo(self.asset_dir / name, *layout)
            for image_id, anim_id, name, *layout in _SPRITE_TABLE
        }

    def get_sprite_info(self, image_id: int, anim_id: int) -> Optional[SpriteInfo]:
        """Return the sheet for the pair, or None if there is none."""
        return self._infos.get(encode_anim(image_id, anim_id))

    def load(self) -> list[Path]:
        """Load every sheet's image and return the files that failed to load."""
        failed = []
        for info in self._infos.values():
            try:
                image = pygame.image.load(str(info.filename))
            except (pygame.error, OSError) as exc:
                print(f"Error loading {info.filename}\n-- loading error : {exc}")
                info.surface = None
                failed.append(info.filename)
                continue
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            info.surface = image
        return failed