"""Outcome of a collision between two game objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CollisionType(Enum):
    NONE = auto()
    MINOR_DAMAGE = auto()
    MODERATE_DAMAGE = auto()
    HEAVY_DAMAGE = auto()
    FATAL_CRASH = auto()
    BONUS_COLLECTED = auto()
    GOAL_REACHED = auto()
    TRAFFIC_VIOLATION = auto()
    EVASION_SUCCESS = auto()


class EffectType(Enum):
    NONE = auto()
    EXPLOSION = auto()
    SPARKS = auto()
    HONK = auto()
    COLLECT_SOUND = auto()
    SCREECH = auto()
    CRASH = auto()


@dataclass(frozen=True)
class CollisionResult:
    """What a collision does to score, health and game flow."""

    type: CollisionType = CollisionType.NONE
    score_change: int = 0
    damage: int = 0
    should_restart: bool = False
    effect_type: EffectType = EffectType.NONE
    message: str = ""

    def has_collision(self) -> bool:
        """Return True unless this is the "no collision" result."""
        return self.type is not CollisionType.NONE

    def is_fatal(self) -> bool:
        """Return True for a fatal crash or any result that restarts the level."""
        return self.type is CollisionType.FATAL_CRASH or self.should_restart

    @classmethod
    def no_collision(cls) -> CollisionResult:
        """Return the result meaning nothing happened."""
        return cls()