"""Command-line entry point."""

from __future__ import annotations

import argparse
from pathlib import Path

from .gamemanager import GameManager
from .sprites import SpriteManager
from .world import GameWorld


def main(argv=None) -> int:
    """Start the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="lawndefense", description="Defend the lawn from waves of zombies."
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="directory holding the sprite images (default: ../assets)",
    )
    args = parser.parse_args(argv)

    manager = GameManager(GameWorld())
    if args.assets is not None:
        manager.sprites = SpriteManager(args.assets)
    manager.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())