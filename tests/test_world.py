import pytest

from lawndefense.constants import (
    GAME_COLS,
    GAME_ROWS,
    AnimId,
    Hand,
    Layer,
    LevelStatus,
)
from lawndefense.environments import PlantingSpot, Sun
from lawndefense.flying import Explosion, Pea
from lawndefense.objectbase import clear_all_objects, objects_in_layer
from lawndefense.plants import Sunflower, Wallnut
from lawndefense.seeds import CooldownMask, Seed
from lawndefense.world import GameWorld, overlaps
from lawndefense.zombies import PoleVaultingZombie, RegularZombie


@pytest.fixture(autouse=True)
def _clean_layers():
    clear_all_objects()
    yield
    clear_all_objects()


@pytest.fixture
def world():
    return GameWorld()


def test_overlaps_same_position(world):
    zombie = RegularZombie(100, 75, world)
    pea = Pea(100, 75, world)
    assert overlaps(pea, zombie)
    assert overlaps(zombie, pea)


def test_overlaps_touching_edges_do_not_count(world):
    zombie = RegularZombie(100, 75, world)
    pea = Pea(124, 75, world)
    assert not overlaps(pea, zombie)


def test_overlaps_different_rows(world):
    zombie = RegularZombie(100, 75, world)
    pea = Pea(100, 275, world)
    assert not overlaps(pea, zombie)


def test_init_builds_lawn_and_packets(world):
    world.sun = 999
    world.init()
    spots = [o for o in world.objects if isinstance(o, PlantingSpot)]
    seeds = [o for o in world.objects if isinstance(o, Seed)]
    assert len(spots) == GAME_ROWS * GAME_COLS
    assert len(seeds) == 6
    assert world.sun == 50
    assert world.wave == 0


def test_clear_dead_objects_unregisters(world):
    dead = Pea(100, 100, world)
    alive = Pea(200, 100, world)
    world.add_object(dead)
    world.add_object(alive)
    dead.hp = 0
    world.clear_dead_objects()
    assert world.objects == [alive]
    assert objects_in_layer(Layer.PROJECTILES) == [alive]


def test_no_zombie_on_the_right(world):
    shooter = Wallnut(300, 75, world)
    world.add_object(shooter)
    assert world.no_zombie_on_the_right(shooter)
    world.add_object(RegularZombie(200, 75, world))
    world.add_object(RegularZombie(500, 175, world))
    assert world.no_zombie_on_the_right(shooter)
    world.add_object(RegularZombie(500, 75, world))
    assert not world.no_zombie_on_the_right(shooter)


def test_check_pole_vault_starts_jump(world):
    world.add_object(Wallnut(300, 75, world))
    zombie = PoleVaultingZombie(300, 75, world)
    world.check_pole_vault(zombie)
    assert zombie.anim_id == AnimId.JUMP
    assert zombie.pole_vaulting_time == 42


def test_check_pole_vault_without_plant(world):
    zombie = PoleVaultingZombie(300, 75, world)
    world.check_pole_vault(zombie)
    assert zombie.anim_id == AnimId.RUN
    assert zombie.pole_vaulting_time == -1


def test_zombie_past_the_house_loses(world):
    world.add_object(RegularZombie(0, 75, world))
    assert world.update() == LevelStatus.LOSING


def test_quiet_frame_is_ongoing(world):
    assert world.update() == LevelStatus.ONGOING


def test_first_sky_sun_arrives_on_schedule(world):
    for _ in range(179):
        world.update()
    assert not any(isinstance(o, Sun) for o in world.objects)
    world.update()
    assert sum(isinstance(o, Sun) for o in world.objects) == 1


def test_first_wave_spawns_one_regular_zombie(world):
    for _ in range(1200):
        world.update()
    assert world.wave == 0
    world.update()
    assert world.wave == 1
    zombies = [o for o in world.objects if isinstance(o, RegularZombie)]
    assert len(zombies) == 1
    assert (zombies[0].y - 75) % 100 == 0


def test_pea_hits_zombie(world):
    zombie = RegularZombie(300, 75, world)
    pea = Pea(290, 75, world)
    world.add_object(zombie)
    world.add_object(pea)
    world.update()
    assert zombie.hp == 200 - pea.damage
    assert pea not in world.objects


def test_explosion_kills_zombie(world):
    zombie = RegularZombie(300, 75, world)
    world.add_object(zombie)
    world.add_object(Explosion(300, 75, world))
    world.update()
    assert zombie not in world.objects
    assert objects_in_layer(Layer.ZOMBIES) == []


def test_zombie_eats_plant_and_stops_when_it_is_gone(world):
    wallnut = Wallnut(300, 75, world)
    zombie = RegularZombie(301, 75, world)
    world.add_object(wallnut)
    world.add_object(zombie)
    world.update()
    assert zombie.eating
    assert wallnut.hp == 4000 - 3
    world.update()
    assert zombie.anim_id == AnimId.EAT
    wallnut.hp = 0
    world.update()
    assert not zombie.eating


def test_objects_added_during_update_are_updated(world):
    sunflower = Sunflower(200, 175, world)
    sunflower.sun_timer = 0
    world.add_object(sunflower)
    world.update_objects()
    suns = [o for o in world.objects if isinstance(o, Sun)]
    assert len(suns) == 1
    assert suns[0].x == sunflower.x - 1


def test_add_cooldown_mask(world):
    world.add_cooldown_mask(130, 556, 240)
    (mask,) = world.objects
    assert isinstance(mask, CooldownMask)
    assert mask.hp == 240
    assert (mask.x, mask.y) == (130, 556)


def test_clean_up_empties_everything(world):
    world.init()
    world.hand = Hand.SHOVEL
    world.clean_up()
    assert world.objects == []
    assert world.hand == Hand.NOTHING
    assert all(objects_in_layer(layer) == [] for layer in Layer)