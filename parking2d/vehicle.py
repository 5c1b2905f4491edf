"""Player-drivable vehicles and the small rigid-body world that moves them."""

from __future__ import annotations

import math
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from .collision import CollisionResult
from .constants import Physics, get_start_position
from .geometry import Vec2
from .objects import GameObject
from .sound import SoundManager


def _rotate(vec: Vec2, angle: float) -> Vec2:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec2(vec.x * cos_a - vec.y * sin_a, vec.x * sin_a + vec.y * cos_a)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass(eq=False)
class Body:
    """A dynamic box-shaped rigid body, in metres and radians."""

    position: Vec2
    angle: float
    half_width: float
    half_height: float
    density: float = 1.0
    friction: float = 0.2
    restitution: float = 0.0
    linear_damping: float = 0.0
    angular_damping: float = 0.0
    linear_velocity: Vec2 = field(default_factory=Vec2)
    angular_velocity: float = 0.0
    awake: bool = True
    _force: Vec2 = field(default_factory=Vec2, repr=False)
    _torque: float = field(default=0.0, repr=False)

    @property
    def mass(self) -> float:
        return 4.0 * self.half_width * self.half_height * self.density

    @property
    def inertia(self) -> float:
        return self.mass * (self.half_width**2 + self.half_height**2) / 3.0

    def apply_force_to_center(self, force: Vec2) -> None:
        """Accumulate a force acting on the centre of mass until the next step."""
        self._force = self._force + force
        self.awake = True

    def apply_force(self, force: Vec2, point: Vec2) -> None:
        """Accumulate a force acting at a world point, adding the torque it causes."""
        arm = point - self.position
        self._force = self._force + force
        self._torque += arm.x * force.y - arm.y * force.x
        self.awake = True

    def apply_torque(self, torque: float) -> None:
        self._torque += torque
        self.awake = True

    def world_vector(self, local: Vec2) -> Vec2:
        """Rotate a body-local direction into world space."""
        return _rotate(local, self.angle)

    def world_point(self, local: Vec2) -> Vec2:
        """Transform a body-local point into world space."""
        return self.position + _rotate(local, self.angle)

    def _integrate(self, delta_time: float) -> None:
        mass, inertia = self.mass, self.inertia
        velocity = self.linear_velocity
        spin = self.angular_velocity
        if mass > 0.0:
            velocity = velocity + self._force * (delta_time / mass)
        if inertia > 0.0:
            spin += delta_time * self._torque / inertia
        velocity = velocity * (1.0 / (1.0 + delta_time * self.linear_damping))
        spin *= 1.0 / (1.0 + delta_time * self.angular_damping)
        self.linear_velocity = velocity
        self.angular_velocity = spin
        self.position = self.position + velocity * delta_time
        self.angle += spin * delta_time
        self._force = Vec2()
        self._torque = 0.0


class PhysicsWorld:
    """Holds bodies and advances them in time."""

    def __init__(self) -> None:
        self._bodies: list[Body] = []

    @property
    def bodies(self) -> tuple[Body, ...]:
        return tuple(self._bodies)

    def create_body(self, position: Vec2, angle: float, half_width: float, half_height: float) -> Body:
        """Add a box body centred at ``position`` (metres) with ``angle`` (radians)."""
        body = Body(position, angle, half_width, half_height)
        self._bodies.append(body)
        return body

    def destroy_body(self, body: Body) -> None:
        """Remove a body; raises ValueError if it is not in this world."""
        self._bodies.remove(body)

    def step(self, delta_time: float) -> None:
        """Apply the accumulated forces and move every body by ``delta_time`` seconds."""
        for body in self._bodies:
            body._integrate(delta_time)


class Vehicle(GameObject):
    """A steerable vehicle driven by forces on a physics body."""

    is_vehicle: ClassVar[bool] = True

    MOVEMENT_THRESHOLD: ClassVar[float] = 1.0
    ANGLE_THRESHOLD: ClassVar[float] = 0.8
    PIXELS_PER_METER: ClassVar[float] = 16.0

    def __init__(
        self,
        position: Vec2,
        texture_id: str,
        max_speed: float = 60.0,
        max_force: float = 50.0,
        max_torque: float = 30.0,
        initial_angle: float = 180.0,
    ) -> None:
        super().__init__(Vec2(Physics.PLAYER_WIDTH, Physics.PLAYER_HEIGHT), texture_id)
        self._body: Body | None = None
        self._world: PhysicsWorld | None = None
        self._max_speed = max_speed
        self._max_force = max_force
        self._max_torque = max_torque
        self._thrust = 0.0
        self._steering = 0.0
        self.rotation = initial_angle

    # --- unit conversion -------------------------------------------------

    def _to_world(self, vec: Vec2) -> Vec2:
        return vec * (1.0 / self.PIXELS_PER_METER)

    def _to_pixels(self, vec: Vec2) -> Vec2:
        return vec * self.PIXELS_PER_METER

    # --- properties ------------------------------------------------------

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def max_force(self) -> float:
        return self._max_force

    @property
    def max_torque(self) -> float:
        return self._max_torque

    @property
    def current_thrust(self) -> float:
        return self._thrust

    @property
    def current_steering(self) -> float:
        return self._steering

    @property
    def body(self) -> Body | None:
        return self._body

    @property
    def position(self) -> Vec2:
        if self._body is not None:
            return self._to_pixels(self._body.position)
        return self._position

    @position.setter
    def position(self, value: Vec2) -> None:
        if self._body is not None:
            self._body.position = self._to_world(value)
        self._position = value

    @property
    def velocity(self) -> Vec2:
        """Linear velocity of the body in metres per second."""
        if self._body is None:
            return Vec2()
        return self._body.linear_velocity

    # --- collisions ------------------------------------------------------

    def accept_collision(self, other: GameObject | None) -> CollisionResult:
        if other is None:
            return CollisionResult.no_collision()
        return other.collide_with_vehicle(self)

    # --- physics body ----------------------------------------------------

    def create_physics_body(self, world: PhysicsWorld, position: Vec2, angle: float = 180.0) -> None:
        """Create this vehicle's body in ``world`` at a pixel position and angle in degrees."""
        if self._body is not None:
            self.destroy_physics_body()
        self._world = world
        half_width = (Physics.PLAYER_WIDTH / 2.0) / self.PIXELS_PER_METER
        half_height = (Physics.PLAYER_HEIGHT / 2.0) / self.PIXELS_PER_METER
        body = world.create_body(self._to_world(position), math.radians(angle), half_width, half_height)
        body.density = 1.0
        body.friction = 0.8
        body.restitution = 0.2
        body.linear_damping = 2.0
        body.angular_damping = 3.0
        self._body = body

    def destroy_physics_body(self) -> None:
        if self._body is not None and self._world is not None:
            self._world.destroy_body(self._body)
            self._body = None
            self._world = None

    def has_physics_body(self) -> bool:
        return self._body is not None

    # --- motion queries --------------------------------------------------

    def current_speed(self) -> float:
        """Return the speed in pixels per second."""
        if self._body is None:
            return 0.0
        return self._body.linear_velocity.length() * self.PIXELS_PER_METER

    def rotation_angle(self) -> float:
        """Return the body angle in degrees, or the initial rotation without a body."""
        if self._body is None:
            return Physics.PLAYER_INIT_ROTATION
        return math.degrees(self._body.angle)

    def is_moving(self) -> bool:
        return self.current_speed() > self.MOVEMENT_THRESHOLD

    def is_moving_forward(self) -> bool:
        if self._body is None:
            return False
        velocity = self._body.linear_velocity
        forward = self._body.world_vector(Vec2(1.0, 0.0))
        dot = velocity.x * forward.x + velocity.y * forward.y
        return dot > self.MOVEMENT_THRESHOLD / self.PIXELS_PER_METER

    def is_moving_backward(self) -> bool:
        if self._body is None:
            return False
        velocity = self._body.linear_velocity
        forward = self._body.world_vector(Vec2(0.0, -1.0))
        dot = velocity.x * forward.x + velocity.y * forward.y
        return dot < -self.MOVEMENT_THRESHOLD / self.PIXELS_PER_METER

    def is_turning(self) -> bool:
        if self._body is None:
            return False
        return abs(self._body.angular_velocity) > self.ANGLE_THRESHOLD

    # --- controls --------------------------------------------------------

    def set_thrust(self, thrust: float) -> None:
        """Push along the vehicle's forward axis, clamped to the maximum force."""
        self._thrust = _clamp(thrust, -self._max_force, self._max_force)
        if self._body is not None:
            forward = self._body.world_vector(Vec2(1.0, 0.0))
            self._body.apply_force_to_center(forward * self._thrust)
        if abs(thrust) > 0.1 and self.current_speed() > self.MOVEMENT_THRESHOLD:
            SoundManager.get_instance().switch_background_loop("drive")

    def set_steering(self, steering: float) -> None:
        """Steer by pushing on the front axle; has no effect while standing still."""
        self._steering = _clamp(steering, -self._max_torque, self._max_torque)
        if self._body is not None and self.current_speed() > self.MOVEMENT_THRESHOLD:
            right = self._body.world_vector(Vec2(1.0, 0.0))
            force = right * (self._steering * 0.5)
            half_height = (Physics.PLAYER_HEIGHT / 2.0) / self.PIXELS_PER_METER
            front_axle = self._body.world_point(Vec2(0.0, -half_height * 0.6))
            self._body.apply_force(force, front_axle)

    def apply_force(self, force: Vec2) -> None:
        """Apply a force given in pixel units to the centre of the body."""
        if self._body is not None:
            self._body.apply_force_to_center(self._to_world(self._to_world(force)))

    def apply_torque(self, torque: float) -> None:
        if self._body is not None:
            self._body.apply_torque(torque)

    def stop(self) -> None:
        """Halt all motion and release the controls."""
        if self._body is not None:
            self._body.linear_velocity = Vec2()
            self._body.angular_velocity = 0.0
        self._thrust = 0.0
        self._steering = 0.0

    def reset(self) -> None:
        """Stop and move the body back to the default start position and rotation."""
        self.stop()
        if self._body is not None:
            self._body.position = self._to_world(get_start_position())
            self._body.angle = math.radians(Physics.PLAYER_INIT_ROTATION)

    # --- helpers for subclasses -----------------------------------------

    def _apply_physics_constraints(self) -> None:
        """Cap the body's speed at the vehicle's maximum speed."""
        if self._body is None:
            return
        velocity = self._body.linear_velocity
        speed = velocity.length()
        limit = self._max_speed / self.PIXELS_PER_METER
        if speed > limit:
            self._body.linear_velocity = velocity * (limit / speed)

    def _sync_sprite_with_body(self) -> None:
        if self._body is not None:
            self._position = self.position
            self.rotation = self.rotation_angle()

    def _reset_physics_to_position(self, position: Vec2) -> None:
        if self._body is not None:
            self._body.position = self._to_world(position)
            self._body.angle = 0.0
            self._body.awake = True

    def _stop_physics_motion(self) -> None:
        if self._body is not None:
            self._body.linear_velocity = Vec2()
            self._body.angular_velocity = 0.0

    # --- interface of concrete vehicles ---------------------------------

    @abstractmethod
    def handle_input(self, delta_time: float) -> None: ...

    @abstractmethod
    def make_sound(self) -> None: ...

    @property
    @abstractmethod
    def health(self) -> int: ...

    @abstractmethod
    def take_damage(self, damage: int) -> None: ...

    @abstractmethod
    def is_destroyed(self) -> bool: ...

    @abstractmethod
    def repair(self) -> None: ...

    @abstractmethod
    def reset_to_start_position(self) -> None: ...

    @abstractmethod
    def apply_speed_boost(self, multiplier: float, duration: float) -> None: ...

    @abstractmethod
    def remove_speed_boost(self) -> None: ...

    @abstractmethod
    def apply_shield(self, protection_level: int) -> None: ...

    @abstractmethod
    def remove_shield(self) -> None: ...

    @abstractmethod
    def has_shield(self) -> bool: ...

    @abstractmethod
    def apply_time_bonus(self, bonus_time: int) -> None: ...