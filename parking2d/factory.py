"""Build level objects, boundaries and spawn points from string key/value data."""

from __future__ import annotations

import math
import re
from typing import Mapping

from .exceptions import GameException, ObjectCreationException
from .geometry import Rect, Vec2
from .level import PlayerSpawn
from .objects import GameObject, MovingCar, ParkedCar, ParkingSpot, StaticObstacle

DataMap = Mapping[str, str]

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_PI = 3.14159


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``; raise ValueError if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group().strip())


def _extract_float(data: DataMap, key: str, default: float = 0.0) -> float:
    if key not in data:
        return default
    value = data[key]
    try:
        return _parse_float(value)
    except ValueError:
        raise ObjectCreationException(
            "FloatConversion", f"Failed to convert {key} to float: {value}"
        ) from None


def _extract_position(data: DataMap) -> Vec2:
    try:
        return Vec2(_extract_float(data, "x"), _extract_float(data, "y"))
    except Exception as exc:
        raise ObjectCreationException("Position", f"Failed to extract position: {exc}") from exc


def _first_nonzero(data: DataMap, *keys: str) -> float:
    value = 0.0
    for key in keys:
        value = _extract_float(data, key)
        if value != 0.0:
            break
    return value


def _extract_direction(data: DataMap) -> Vec2:
    try:
        return Vec2(
            _first_nonzero(data, "direction_x", "directionX"),
            _first_nonzero(data, "direction_y", "directionY"),
        )
    except Exception as exc:
        raise ObjectCreationException("Direction", f"Failed to extract direction: {exc}") from exc


def _extract_texture(data: DataMap, default: str) -> str:
    return data.get("texture", default)


def _create_basic_object(cls: type[GameObject], data: DataMap, default_texture: str) -> GameObject:
    try:
        obj = cls(_extract_position(data), _extract_texture(data, default_texture))
        direction = _extract_direction(data)
        if direction.x != 0.0 or direction.y != 0.0:
            obj.rotation = math.atan2(direction.y, direction.x) * 180.0 / _PI
        return obj
    except Exception as exc:
        raise ObjectCreationException("BasicObject", f"Failed to create basic object: {exc}") from exc


def _create_moving_object(
    cls: type[MovingCar], data: DataMap, default_speed: float, default_respawn: float
) -> GameObject:
    try:
        start_x = _first_nonzero(data, "start_x", "startX", "x")
        start_y = _first_nonzero(data, "start_y", "startY", "y")
        direction = _extract_direction(data)
        if direction.x == 0.0 and direction.y == 0.0:
            direction = Vec2(1.0, 0.0)
        speed = _extract_float(data, "speed", default_speed)
        respawn = _extract_float(data, "respawn_delay", default_respawn)
        if respawn == 0.0:
            respawn = _extract_float(data, "respawnDelay", default_respawn)
        return cls(Vec2(start_x, start_y), direction, speed, respawn)
    except Exception as exc:
        raise ObjectCreationException("MovingObject", f"Failed to create moving object: {exc}") from exc


def create_boundary(data: DataMap) -> Rect:
    """Return the boundary rectangle described by ``data``."""
    return Rect(
        _extract_float(data, "x", 0.0),
        _extract_float(data, "y", 0.0),
        _extract_float(data, "width", 1.0),
        _extract_float(data, "height", 1.0),
    )


def create_player_spawn(data: DataMap) -> PlayerSpawn:
    """Return the player spawn described by ``data``."""
    return PlayerSpawn(
        position=Vec2(_extract_float(data, "x", 670.0), _extract_float(data, "y", 210.0)),
        angle=_extract_float(data, "angle", 90.0),
        direction=_extract_direction(data),
    )


def create(type_name: str, x: float, y: float, texture: str = "") -> GameObject:
    """Create an object of ``type_name`` at pixel position (x, y)."""
    if not type_name:
        raise ObjectCreationException(type_name, "Empty object type provided")
    try:
        data = {"x": f"{x:f}", "y": f"{y:f}"}
        if texture:
            data["texture"] = texture
        return create_from_json_data(type_name, data)
    except GameException:
        raise
    except Exception as exc:
        raise ObjectCreationException(type_name, f"Failed to create object: {exc}") from exc


def create_moving(
    type_name: str,
    start_x: float,
    start_y: float,
    dir_x: float,
    dir_y: float,
    speed: float,
    respawn_delay: float,
    texture: str = "",
) -> GameObject:
    """Create a moving object that starts at (start_x, start_y) and travels along (dir_x, dir_y)."""
    if not type_name:
        raise ObjectCreationException(type_name, "Empty moving object type provided")
    try:
        data = {
            "startX": f"{start_x:f}",
            "startY": f"{start_y:f}",
            "directionX": f"{dir_x:f}",
            "directionY": f"{dir_y:f}",
            "speed": f"{speed:f}",
            "respawnDelay": f"{respawn_delay:f}",
        }
        if texture:
            data["texture"] = texture
        return create_from_json_data(type_name, data)
    except GameException:
        raise
    except Exception as exc:
        raise ObjectCreationException(type_name, f"Failed to create moving object: {exc}") from exc


def create_from_json_data(type_name: str, data: DataMap) -> GameObject:
    """Create an object of ``type_name`` from its level-file key/value data."""
    if not type_name:
        raise ObjectCreationException(type_name, "Empty object type in JSON data")
    if not data:
        raise ObjectCreationException(type_name, "Empty JSON data provided")
    try:
        if type_name in ("StaticObstacle", "obstacle"):
            obj = _create_basic_object(StaticObstacle, data, "traffic_cone")
        elif type_name in ("ParkedCar", "parkingcar"):
            obj = _create_basic_object(ParkedCar, data, "parked_car_red")
        elif type_name == "parking_spot":
            obj = _create_basic_object(ParkingSpot, data, "parking_spot")
        elif type_name in ("MovingCar", "movingcar"):
            obj = _create_moving_object(MovingCar, data, 80.0, 3.0)
        else:
            raise ObjectCreationException(type_name, f"Unknown object type: {type_name}")

        angle = _extract_float(data, "angle", 0.0)
        if angle != 0.0:
            obj.rotation = angle
        return obj
    except GameException:
        raise
    except Exception as exc:
        raise ObjectCreationException(type_name, f"Failed to create object from JSON: {exc}") from exc