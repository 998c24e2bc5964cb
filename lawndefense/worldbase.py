"""Abstract world holding the wave counter and sun total."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import LevelStatus


class WorldBase(ABC):
    """A level that can be started, advanced frame by frame and cleared."""

    def __init__(self):
        self.wave = 0
        self.sun = 50

    @abstractmethod
    def init(self) -> None:
        """Set the level up for a new game."""

    @abstractmethod
    def update(self) -> LevelStatus:
        """Advance the level by one frame and report its status."""

    @abstractmethod
    def clean_up(self) -> None:
        """Remove everything the level created."""