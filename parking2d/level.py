"""A level: its background, where the player starts, its objects and its boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .geometry import Rect, Vec2
from .objects import GameObject


@dataclass
class PlayerSpawn:
    """Where and how the player's vehicle enters the level."""

    position: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    direction: Vec2 = field(default_factory=Vec2)


class Level:
    """Owns the objects and boundary rectangles of one level."""

    def __init__(self, name: str, background_texture: str, player_spawn: PlayerSpawn) -> None:
        self.name = name
        self.background_texture = background_texture
        self.player_spawn = player_spawn
        self._objects: list[GameObject] = []
        self._boundaries: list[Rect] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    @property
    def boundaries(self) -> tuple[Rect, ...]:
        return tuple(self._boundaries)

    def add_object(self, obj: GameObject) -> None:
        self._objects.append(obj)

    def clear_objects(self) -> None:
        self._objects.clear()

    def add_boundary(self, boundary: Rect) -> None:
        self._boundaries.append(boundary)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self._objects)