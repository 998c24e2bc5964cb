import math

import pygame
import pytest

from lawndefense.constants import AnimId, ImageId, KeyCode, LevelStatus
from lawndefense.environments import Sun
from lawndefense.gamemanager import (
    GameManager,
    GameState,
    denormalize_coord,
    normalize_coord,
    rotate,
    to_key_code,
)
from lawndefense.objectbase import clear_all_objects
from lawndefense.world import GameWorld
from lawndefense.worldbase import WorldBase


class StubWorld(WorldBase):
    def __init__(self, status=LevelStatus.ONGOING):
        super().__init__()
        self.status = status
        self.calls = []

    def init(self):
        self.calls.append("init")

    def update(self):
        self.calls.append("update")
        return self.status

    def clean_up(self):
        self.calls.append("clean_up")


@pytest.fixture(autouse=True)
def _clean_layers():
    clear_all_objects()
    yield
    clear_all_objects()


@pytest.mark.parametrize(
    "key, expected",
    [
        ("\r", KeyCode.ENTER),
        ("\x1b", KeyCode.QUIT),
        (pygame.K_RETURN, KeyCode.ENTER),
        (pygame.K_ESCAPE, KeyCode.QUIT),
        ("a", KeyCode.NONE),
        (pygame.K_UP, KeyCode.NONE),
    ],
)
def test_to_key_code(key, expected):
    assert to_key_code(key) == expected


def test_normalize_coord_ends_and_middle():
    assert normalize_coord(0, 800) == -1.0
    assert normalize_coord(800, 800) == 1.0
    assert normalize_coord(400, 800) == 0.0


@pytest.mark.parametrize("pixels", [0, 1, 60, 299, 522, 600])
def test_denormalize_round_trip(pixels):
    assert denormalize_coord(normalize_coord(pixels, 600), 600) == pixels


def test_rotate_preserves_length_and_full_turn():
    x, y = rotate(3.0, 4.0, 37.0)
    assert math.hypot(x, y) == pytest.approx(5.0)
    assert rotate(3.0, 4.0, 360.0) == pytest.approx((3.0, 4.0))


def test_key_state_tracking():
    manager = GameManager(StubWorld())
    manager.key_down("\r")
    assert manager.get_key(KeyCode.ENTER)
    assert manager.get_key_down(KeyCode.ENTER)
    assert not manager.get_key_down(KeyCode.ENTER)
    assert manager.get_key(KeyCode.ENTER)
    manager.key_up("\r")
    assert not manager.get_key(KeyCode.ENTER)


def test_unknown_keys_are_ignored():
    manager = GameManager(StubWorld())
    manager.key_down("x")
    assert not manager.get_key(KeyCode.NONE)


def test_title_waits_for_enter():
    world = StubWorld()
    manager = GameManager(world)
    manager.update()
    assert manager.state == GameState.TITLE
    assert world.calls == []
    manager.key_down("\r")
    manager.update()
    assert manager.state == GameState.ANIMATING
    assert world.calls == ["init"]


def test_losing_moves_to_prompt_and_restart():
    world = StubWorld(LevelStatus.LOSING)
    manager = GameManager(world)
    manager.state = GameState.ANIMATING
    manager.update()
    assert manager.state == GameState.PROMPTING
    assert world.calls == ["update", "clean_up"]
    manager.key_down(pygame.K_RETURN)
    manager.update()
    assert manager.state == GameState.ANIMATING
    assert world.calls[-1] == "init"


def test_quit_key_stops_the_game():
    manager = GameManager(StubWorld())
    manager.key_down("\x1b")
    manager.update()
    assert not manager.running


def test_paused_does_nothing():
    world = StubWorld()
    manager = GameManager(world)
    manager.state = GameState.ANIMATING
    manager.paused = True
    manager.update()
    assert world.calls == []


def test_mouse_down_collects_sun():
    world = GameWorld()
    sun = Sun(100, 100, True, world)
    world.add_object(sun)
    manager = GameManager(world)
    manager.mouse_down(100, 100)
    assert world.sun == 75
    assert sun.hp == 0


def test_draw_object_missing_image_returns_zero():
    manager = GameManager(StubWorld())
    assert manager.draw_object(ImageId.SUN, AnimId.IDLE, 100, 100, 5) == 0
    assert manager.draw_object(ImageId.NONE, AnimId.NO_ANIMATION, 100, 100, 5) == 0


def test_draw_object_advances_and_wraps_frames():
    manager = GameManager(StubWorld())
    info = manager.sprites.get_sprite_info(ImageId.SUN, AnimId.IDLE)
    info.surface = pygame.Surface((info.total_width, info.total_height))
    assert manager.draw_object(ImageId.SUN, AnimId.IDLE, 100, 100, 3) == 4
    assert manager.draw_object(ImageId.SUN, AnimId.IDLE, 100, 100, info.frames - 1) == 0


def test_draw_object_blits_centered_on_point():
    manager = GameManager(StubWorld())
    manager.screen = pygame.Surface((800, 600))
    manager.screen.fill((0, 0, 0))
    info = manager.sprites.get_sprite_info(ImageId.PEA, AnimId.NO_ANIMATION)
    info.surface = pygame.Surface((info.total_width, info.total_height))
    info.surface.fill((255, 0, 0))
    assert manager.draw_object(ImageId.PEA, AnimId.NO_ANIMATION, 400, 300, 0) == 0
    assert tuple(manager.screen.get_at((400, 300)))[:3] == (255, 0, 0)
    assert tuple(manager.screen.get_at((10, 10)))[:3] == (0, 0, 0)