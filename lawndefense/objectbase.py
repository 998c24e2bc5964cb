"""Drawable, clickable objects kept in per-layer registries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .constants import MAX_LAYERS

DrawFunc = Callable[[int, int, int, int, int], int]

_layers: list[dict["ObjectBase", None]] = [{} for _ in range(MAX_LAYERS)]


def _bucket(layer: int) -> dict["ObjectBase", None]:
    if layer < 0:
        raise ValueError(f"layer must not be negative, got {layer}")
    return _layers[layer] if layer < MAX_LAYERS else _layers[0]


class ObjectBase(ABC):
    """An object registered for drawing and clicking until destroyed."""

    def __init__(self, image_id, x, y, layer, width, height, anim_id):
        bucket = _bucket(layer)
        self.image_id = image_id
        self.x = x
        self.y = y
        self._layer = layer
        self.width = width
        self.height = height
        self.anim_id = anim_id
        self.frame = 0
        bucket[self] = None

    @property
    def layer(self) -> int:
        return self._layer

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def change_image(self, image_id: int) -> None:
        self.image_id = image_id

    def play_animation(self, anim_id: int) -> None:
        """Switch animation and restart it from its first frame."""
        self.anim_id = anim_id
        self.frame = 0

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def on_click(self) -> None:
        """React to a mouse click on the object."""

    def destroy(self) -> None:
        """Remove the object from its layer; calling it twice is harmless."""
        _bucket(self._layer).pop(self, None)


def objects_in_layer(layer: int) -> list[ObjectBase]:
    """Return the objects currently registered in a layer."""
    return list(_bucket(layer))


def display_all_objects(draw: DrawFunc) -> None:
    """Draw every object, back layer first, storing the next frame each returns."""
    for layer in reversed(range(MAX_LAYERS)):
        for obj in list(_layers[layer]):
            obj.frame = draw(obj.image_id, obj.anim_id, obj.x, obj.y, obj.frame)


def click_at(x: int, y: int) -> Optional[ObjectBase]:
    """Click the first object under the point, front layer first, and return it."""
    for layer in range(MAX_LAYERS):
        for obj in list(_layers[layer]):
            if abs(x - obj.x) <= obj.width // 2 and abs(y - obj.y) <= obj.height // 2:
                obj.on_click()
                return obj
    return None


def clear_all_objects() -> None:
    """Unregister every object from every layer."""
    for bucket in _layers:
        bucket.clear()