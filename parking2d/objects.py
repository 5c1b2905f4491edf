"""Level objects: traffic cones, parked cars, parking spots and moving traffic."""

from __future__ import annotations

import itertools
import logging
import math
import time
from abc import ABC, abstractmethod
from typing import Callable, ClassVar

from .collision import CollisionResult, CollisionType, EffectType
from .constants import WINDOW_HEIGHT, WINDOW_WIDTH, Physics
from .geometry import Rect, Vec2
from .sound import SoundManager

_log = logging.getLogger(__name__)

_WINDOW_RECT = Rect(0.0, 0.0, float(WINDOW_WIDTH), float(WINDOW_HEIGHT))


class GameObject(ABC):
    """Something placed in a level that can be updated and collided with.

    Collisions use double dispatch: ``a.accept_collision(b)`` calls the
    ``collide_with_*`` method of ``b`` that matches the kind of ``a``.
    """

    _ids: ClassVar[itertools.count] = itertools.count()

    is_vehicle: ClassVar[bool] = False
    is_parking_spot: ClassVar[bool] = False
    is_player_vehicle: ClassVar[bool] = False

    def __init__(self, size: Vec2, texture_id: str = "") -> None:
        self.id = next(GameObject._ids)
        self.size = size
        self.texture_id = texture_id
        self.rotation = 0.0
        self._position = Vec2()

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        self._position = value

    @abstractmethod
    def accept_collision(self, other: GameObject) -> CollisionResult:
        """Let ``other`` decide the outcome of colliding with this object."""

    @abstractmethod
    def collide_with_car(self, car: GameObject) -> CollisionResult: ...

    @abstractmethod
    def collide_with_vehicle(self, vehicle: GameObject) -> CollisionResult: ...

    @abstractmethod
    def collide_with_static_obstacle(self, obstacle: GameObject) -> CollisionResult: ...

    @abstractmethod
    def collide_with_dynamic_obstacle(self, obstacle: GameObject) -> CollisionResult: ...

    @abstractmethod
    def collide_with_parking_spot(self, parking_spot: GameObject) -> CollisionResult: ...

    @abstractmethod
    def collide_with_parked_car(self, parked_car: GameObject) -> CollisionResult: ...

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the object by ``delta_time`` seconds."""

    def bounds(self) -> Rect:
        """Return the axis-aligned box around the object, rotated about its position."""
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        corners = [(0.0, 0.0), (self.size.x, 0.0), (0.0, self.size.y), (self.size.x, self.size.y)]
        xs = [self._bounds_origin().x + cx * cos_a - cy * sin_a for cx, cy in corners]
        ys = [self._bounds_origin().y + cx * sin_a + cy * cos_a for cx, cy in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def _bounds_origin(self) -> Vec2:
        return self.position

    def is_colliding(self, other: GameObject) -> bool:
        """Return True if the bounds of the two objects overlap."""
        return self.bounds().intersects(other.bounds())


class StaticObstacle(GameObject):
    """A fixed obstacle such as a traffic cone."""

    def __init__(self, position: Vec2, texture_id: str = "traffic_cone") -> None:
        super().__init__(Vec2(30.0, 30.0), texture_id)
        self.obstacle_type = "TrafficCone"
        self.position = position

    can_be_moved: ClassVar[bool] = True

    def accept_collision(self, other: GameObject) -> CollisionResult:
        return other.collide_with_static_obstacle(self)

    def collide_with_car(self, car: GameObject) -> CollisionResult:
        return CollisionResult(
            CollisionType.MINOR_DAMAGE, -10, 10, False, EffectType.SPARKS, "Car hit traffic cone"
        )

    def collide_with_vehicle(self, vehicle: GameObject) -> CollisionResult:
        return CollisionResult(
            CollisionType.MINOR_DAMAGE, -8, 8, False, EffectType.SPARKS, "Vehicle hit static obstacle"
        )

    def collide_with_static_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_dynamic_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parking_spot(self, parking_spot: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parked_car(self, parked_car: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def update(self, delta_time: float) -> None:
        """Static obstacles never move."""


class ParkedCar(StaticObstacle):
    """A parked car; driving into it is a crash that restarts the level."""

    is_vehicle: ClassVar[bool] = True

    def __init__(self, position: Vec2, texture_id: str) -> None:
        super().__init__(position, texture_id)
        self.car_width = 50.0
        self.car_height = 100.0

    def accept_collision(self, other: GameObject) -> CollisionResult:
        return other.collide_with_parked_car(self)

    def collide_with_car(self, car: GameObject) -> CollisionResult:
        return CollisionResult(
            CollisionType.HEAVY_DAMAGE,
            -200,
            75,
            True,
            EffectType.CRASH,
            "Player car crashed into parked car!",
        )

    def collide_with_vehicle(self, vehicle: GameObject) -> CollisionResult:
        return CollisionResult(
            CollisionType.HEAVY_DAMAGE,
            -150,
            60,
            True,
            EffectType.CRASH,
            "Vehicle crashed into parked car!",
        )

    def update(self, delta_time: float) -> None:
        """Parked cars stay where they are."""


class ParkingSpot(GameObject):
    """The target spot; a vehicle fully inside it completes the level."""

    is_parking_spot: ClassVar[bool] = True
    TOLERANCE: ClassVar[float] = 10.0

    def __init__(self, position: Vec2, texture_id: str = "parking_spot") -> None:
        super().__init__(Vec2(180.0, 100.0), texture_id)
        self.spot_width = 180.0
        self.spot_height = 100.0
        self.occupied = False
        self.position = position

    def accept_collision(self, other: GameObject) -> CollisionResult:
        return other.collide_with_parking_spot(self)

    def is_fully_contained(self, vehicle_bounds: Rect) -> bool:
        """Return True if ``vehicle_bounds`` lies within the spot, give or take the tolerance."""
        spot = self.bounds()
        tol = self.TOLERANCE
        return (
            vehicle_bounds.left >= spot.left - tol
            and vehicle_bounds.right <= spot.right + tol
            and vehicle_bounds.top >= spot.top - tol
            and vehicle_bounds.bottom <= spot.bottom + tol
        )

    def _parked(self, vehicle: GameObject | None, score: int, message: str) -> CollisionResult:
        if vehicle is None or not self.is_fully_contained(vehicle.bounds()):
            return CollisionResult.no_collision()
        _log.info("Parking success")
        return CollisionResult(
            CollisionType.GOAL_REACHED, score, 0, True, EffectType.COLLECT_SOUND, message
        )

    def collide_with_car(self, car: GameObject | None) -> CollisionResult:
        return self._parked(car, 500, "Perfect parking! Next Level!")

    def collide_with_vehicle(self, vehicle: GameObject | None) -> CollisionResult:
        return self._parked(vehicle, 400, "Vehicle parked! Next Level!")

    def collide_with_static_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_dynamic_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parking_spot(self, parking_spot: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parked_car(self, parked_car: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def update(self, delta_time: float) -> None:
        """Parking spots never change."""


class DynamicObstacle(GameObject):
    """An obstacle that travels in a straight line and reappears at its start."""

    is_vehicle: ClassVar[bool] = True

    def __init__(
        self,
        start_position: Vec2,
        direction: Vec2,
        speed: float,
        respawn_delay: float,
        size: Vec2,
        texture_id: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(size, texture_id)
        self.start_position = start_position
        self.direction = direction
        self.speed = speed
        self.respawn_delay = respawn_delay
        self.active = True
        self._clock = clock
        self._respawn_started = clock()
        self.position = start_position

    def accept_collision(self, other: GameObject) -> CollisionResult:
        return other.collide_with_dynamic_obstacle(self)

    @abstractmethod
    def collide_with_car(self, car: GameObject) -> CollisionResult: ...

    def collide_with_vehicle(self, vehicle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_static_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_dynamic_obstacle(self, obstacle: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parking_spot(self, parking_spot: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parked_car(self, parked_car: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def _respawn_elapsed(self) -> float:
        return self._clock() - self._respawn_started

    def _restart_respawn_timer(self) -> None:
        self._respawn_started = self._clock()

    def update(self, delta_time: float) -> None:
        """Move along the direction; once off screen, wait and then respawn."""
        if not self.active:
            if self._respawn_elapsed() >= self.respawn_delay:
                self.respawn()
            return
        self.position = self.position + self.direction * (self.speed * delta_time)
        if self.is_off_screen():
            self.active = False
            self._restart_respawn_timer()

    def respawn(self) -> None:
        """Put the obstacle back at its start position and reactivate it."""
        self.position = self.start_position
        self.active = True

    def is_off_screen(self) -> bool:
        """Return True once the obstacle no longer overlaps the window."""
        return not self.bounds().intersects(_WINDOW_RECT)


class MovingCar(DynamicObstacle):
    """Traffic that drives across the level, with its engine sound."""

    def __init__(
        self,
        start_position: Vec2,
        direction: Vec2,
        speed: float,
        respawn_delay: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(
            start_position,
            direction,
            speed,
            respawn_delay,
            Vec2(Physics.PLAYER_WIDTH, Physics.PLAYER_HEIGHT),
            "moving_car",
            clock,
        )

    def collide_with_car(self, car: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def collide_with_parked_car(self, parked_car: GameObject) -> CollisionResult:
        return CollisionResult.no_collision()

    def update(self, delta_time: float) -> None:
        if not self.active:
            if self._respawn_elapsed() >= self.respawn_delay:
                self.respawn()
            return
        self.position = self.position + self.direction * (self.speed * delta_time)
        if self.is_off_screen():
            sounds = SoundManager.get_instance()
            sounds.stop_sound("moving_car")
            sounds.set_sound_volume("drive", 80.0)
            self.active = False
            self._restart_respawn_timer()

    def respawn(self) -> None:
        super().respawn()
        sounds = SoundManager.get_instance()
        sounds.set_sound_volume("drive", 40.0)
        sounds.play_sound("moving_car")