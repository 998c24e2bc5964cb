"""A lane-based lawn defence game against waves of zombies."""

__version__ = "0.1.0"