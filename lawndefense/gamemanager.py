"""Window, input handling and the title, play and game-over screens."""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

import pygame

from .constants import (
    MS_PER_FRAME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AnimId,
    ImageId,
    KeyCode,
    LevelStatus,
)
from .objectbase import click_at, display_all_objects
from .sprites import SpriteManager

WINDOW_TITLE = "PvZ"

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_PALE_YELLOW = (255, 255, 128)

_KEY_CODES = {"\x1b": KeyCode.QUIT, "\r": KeyCode.ENTER}


class GameState(Enum):
    TITLE = "title"
    ANIMATING = "animating"
    PROMPTING = "prompting"
    GAMEOVER = "gameover"


def to_key_code(key: Union[str, int]) -> KeyCode:
    """Map a character or key number to the key the game cares about."""
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return KeyCode.NONE
        key = chr(key)
    return _KEY_CODES.get(key, KeyCode.NONE)


def normalize_coord(pixels: float, total: float) -> float:
    """Map a pixel coordinate onto the range -1 to 1."""
    return 2.0 * pixels / total - 1.0


def denormalize_coord(normalized: float, total: float) -> int:
    """Map a coordinate in -1 to 1 back to whole pixels, rounding half away from zero."""
    value = (normalized + 1.0) / 2.0 * total
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rotate(x: float, y: float, degrees: float) -> tuple[float, float]:
    """Rotate a point clockwise about the origin."""
    theta = math.radians(degrees)
    return (
        x * math.cos(theta) + y * math.sin(theta),
        y * math.cos(theta) - x * math.sin(theta),
    )


class GameManager:
    """Runs the window, feeds input to the world and draws it.

    Game coordinates have their origin at the bottom left of the window.
    Without a screen surface nothing is drawn, but the game still advances.
    """

    def __init__(self, world):
        self.world = world
        self.state = GameState.TITLE
        self.paused = False
        self.running = True
        self.sprites = SpriteManager()
        self.screen = None
        self._pressed: dict[KeyCode, bool] = {}
        self._fonts: dict[str, pygame.font.Font] = {}

    def play(self) -> None:
        """Open the window and run the game until the player quits."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            self.sprites.load()
            self._fonts = {
                "large": pygame.font.Font(None, 24),
                "small": pygame.font.Font(None, 18),
            }
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                self._handle_events()
                if not self.running:
                    break
                self.update()
                pygame.display.flip()
                clock.tick(round(1000 / MS_PER_FRAME))
        finally:
            self.screen = None
            self._fonts = {}
            pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.key_down(event.key)
            elif event.type == pygame.KEYUP:
                self.key_up(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = event.pos
                self.mouse_down(x, WINDOW_HEIGHT - y)

    def update(self) -> None:
        """Advance the current screen by one frame."""
        if self.paused:
            return
        if self.get_key(KeyCode.QUIT):
            self.running = False
            return
        if self.state == GameState.TITLE:
            self._prompt(WINDOW_TITLE, "Press Enter to start")
            if self.get_key(KeyCode.ENTER):
                self._start()
        elif self.state == GameState.ANIMATING:
            status = self.world.update()
            self.display()
            if status == LevelStatus.LOSING:
                self.world.clean_up()
                self._show_zombies_won()
                self.state = GameState.PROMPTING
        elif self.state == GameState.PROMPTING:
            if self.get_key(KeyCode.ENTER):
                self._start()
        elif self.state == GameState.GAMEOVER:
            if self.get_key(KeyCode.ENTER):
                self.running = False

    def _start(self) -> None:
        self.world.init()
        self.state = GameState.ANIMATING
        self.display()

    def key_down(self, key) -> None:
        code = to_key_code(key)
        if code != KeyCode.NONE and code not in self._pressed:
            self._pressed[code] = True

    def key_up(self, key) -> None:
        code = to_key_code(key)
        if code != KeyCode.NONE:
            self._pressed.pop(code, None)

    def mouse_down(self, x: int, y: int) -> None:
        """Click at a point given in game coordinates."""
        click_at(x, y)

    def get_key(self, key: KeyCode) -> bool:
        """Whether the key is held down."""
        return key in self._pressed

    def get_key_down(self, key: KeyCode) -> bool:
        """Whether the key was pressed since the last time this was asked."""
        if self._pressed.get(key):
            self._pressed[key] = False
            return True
        return False

    def display(self) -> None:
        """Draw every object and the sun and wave counters."""
        if self.screen is None:
            return
        self.screen.fill(_BLACK)
        display_all_objects(self.draw_object)
        self._text(str(self.world.sun), 60, WINDOW_HEIGHT - 78, "large", _BLACK, centered=True)
        self._text(f"Wave {self.world.wave}", WINDOW_WIDTH - 160, 8, "large", _BLACK, centered=False)

    def draw_object(self, image_id, anim_id, x, y, frame) -> int:
        """Draw one frame of a sprite centred on a point and return the next frame."""
        info = self.sprites.get_sprite_info(image_id, anim_id)
        if info is None or info.surface is None:
            return 0
        if self.screen is not None:
            if image_id == ImageId.POLE_VAULTING_ZOMBIE:
                # The pole vaulter's sheets are drawn a little low.
                y += 20
            image = self._frame_image(info, frame)
            if image is not None:
                self.screen.blit(image, image.get_rect(center=(x, WINDOW_HEIGHT - y)))
        return (frame + 1) % info.frames

    @staticmethod
    def _frame_image(info, frame):
        sheet = info.surface
        scale_x = sheet.get_width() / info.total_width
        scale_y = sheet.get_height() / info.total_height
        left, top, width, height = info.frame_rect(frame)
        area = pygame.Rect(
            round(left * scale_x), round(top * scale_y), round(width * scale_x), round(height * scale_y)
        ).clip(sheet.get_rect())
        if area.width == 0 or area.height == 0:
            return None
        image = sheet.subsurface(area)
        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        return image

    def _text(self, text, x, y, size, color, centered) -> None:
        font = self._fonts.get(size)
        if self.screen is None or font is None:
            return
        rendered = font.render(text, True, color)
        rect = rendered.get_rect()
        anchor = (round(x), WINDOW_HEIGHT - round(y))
        if centered:
            rect.midbottom = anchor
        else:
            rect.bottomleft = anchor
        self.screen.blit(rendered, rect)

    def _prompt(self, title: str, subtitle: str) -> None:
        if self.screen is None:
            return
        self.screen.fill(_BLACK)
        center_x = denormalize_coord(0, WINDOW_WIDTH)
        self._text(title, center_x, denormalize_coord(0.25, WINDOW_HEIGHT), "large", _PALE_YELLOW, True)
        self._text(subtitle, center_x, denormalize_coord(-0.2, WINDOW_HEIGHT), "small", _WHITE, True)

    def _show_zombies_won(self) -> None:
        if self.screen is None:
            return
        self.screen.fill(_BLACK)
        self.draw_object(
            ImageId.ZOMBIES_WON, AnimId.NO_ANIMATION, WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + 50, 0
        )
        message = f"You survived {self.world.wave} waves! Press Enter to restart."
        self._text(message, WINDOW_WIDTH // 2, 50, "large", _WHITE, True)