# lawndefense

A lane-based defence game: place plants on a 5 × 9 lawn, collect falling sun,
and hold back ever-larger waves of zombies for as long as you can.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
lawndefense
lawndefense --assets path/to/assets
```

Sprite sheets are loaded from the directory given with `--assets`. Without
it they come from an `assets` directory that sits beside the directory you
start the game from (`default_asset_dir()` in `lawndefense.sprites`). If an
image cannot be loaded, an error message is printed and objects using it are
simply not drawn.

- **Enter** starts the game from the title screen, and restarts it after
  the zombies win.
- **Esc**, or closing the window, quits.
- **Left click** does everything else:
  - Click a seed packet at the top to pick up that plant, if your hand is
    empty, you have enough sun and the packet is not cooling down. Its price
    is taken right away.
  - Click an empty lawn square to plant what you are holding.
  - Click the shovel, then a plant, to dig it up. Clicking the shovel again
    puts it back. A cherry bomb cannot be dug up.
  - Click sun to collect 25.

| Plant       | Price | Cooldown (frames) | What it does                          |
|-------------|------:|------------------:|---------------------------------------|
| Sunflower   |    50 |               240 | Makes a sun every 600 frames          |
| Peashooter  |   100 |               240 | Shoots peas at zombies in its row     |
| Wall-nut    |    50 |               900 | Soaks up a lot of bites               |
| Cherry Bomb |   150 |              1200 | Explodes, clearing a 3 × 3 area       |
| Repeater    |   200 |               240 | Shoots peas in pairs                  |

You start with 50 sun, and more falls from the sky every 300 frames. Regular
zombies come first; pole-vaulting zombies, which leap over the first plant
they meet, can appear after wave 8, and bucket-head zombies after wave 15.
The game is lost when a zombie reaches the left edge of the lawn. The screen
then shows how many waves you held out against.

The game runs at about 30 frames per second (33 ms per frame).

## Using the simulation directly

The rules run without a window, which is handy for experiments and tests:

```python
from lawndefense.world import GameWorld
from lawndefense.constants import LevelStatus

world = GameWorld()
world.init()
while world.update() is LevelStatus.ONGOING:
    pass
print("survived", world.wave, "waves")
world.clean_up()
```

`lawndefense.gamemanager.GameManager` wraps a world with the title screen,
the game-over prompt, keyboard and mouse handling and drawing. Its `update`,
`key_down`, `key_up` and `mouse_down` methods can be driven by hand as well
as by `play`; without an open window nothing is drawn but the game still
advances.

## What it does not do

There is no sound, no way to pause from the keyboard, and no saving of
progress or high scores: each game starts again from wave 0.

## Running the tests

```
pip install .[test]
pytest
```