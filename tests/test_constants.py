import pytest

from lawndefense.constants import (
    MAX_LAYERS,
    AnimId,
    Category,
    Hand,
    ImageId,
    KeyCode,
    Layer,
    LevelStatus,
    rand_int,
)


def test_image_ids_match_source_values():
    assert ImageId(-1) is ImageId.NONE
    assert ImageId(1) is ImageId.SUN
    assert ImageId(30) is ImageId.REGULAR_ZOMBIE
    assert ImageId(99) is ImageId.ZOMBIES_WON


def test_layer_count_and_order():
    assert MAX_LAYERS == 7
    assert Layer(0) is Layer.SUN
    assert Layer.SUN < Layer.ZOMBIES < Layer.BACKGROUND
    assert Layer(MAX_LAYERS - 1) is Layer.BACKGROUND


def test_hand_values():
    assert Hand(-1) is Hand.SHOVEL
    assert Hand(0) is Hand.NOTHING
    assert Hand(5) is Hand.REPEATER
    assert not Hand(0)


def test_category_values():
    assert Category(-1) is Category.SEED
    assert Category(-2) is Category.ENVIRONMENT
    assert Category(2) is Category.FLYING_OBJECT


def test_anim_and_enums_are_distinct():
    assert AnimId(-1) is AnimId.NO_ANIMATION
    assert AnimId(4) is AnimId.JUMP
    assert LevelStatus(LevelStatus.ONGOING.value) is LevelStatus.ONGOING
    assert LevelStatus(LevelStatus.LOSING.value) is LevelStatus.LOSING
    assert KeyCode(KeyCode.ENTER.value) is KeyCode.ENTER
    assert KeyCode(KeyCode.QUIT.value) is KeyCode.QUIT
    assert KeyCode.ENTER.value != KeyCode.QUIT.value


@pytest.mark.parametrize("low,high", [(0, 4), (760, 799), (30, 600)])
def test_rand_int_within_bounds(low, high):
    for _ in range(200):
        value = rand_int(low, high)
        assert low <= value <= high


def test_rand_int_swaps_reversed_bounds():
    values = {rand_int(5, 2) for _ in range(300)}
    assert values <= {2, 3, 4, 5}
    assert min(values) >= 2


def test_rand_int_equal_bounds():
    assert rand_int(7, 7) == 7