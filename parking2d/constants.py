"""Game-wide constants: window, assets, physics, map, colours and object defaults."""

from __future__ import annotations

from .geometry import Vec2

FPS = 60
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 608
WINDOW_SIZE = (WINDOW_WIDTH, WINDOW_HEIGHT)
WINDOW_TITLE = "Parking 2D"

_TILE_SIZE = 32.0


class Assets:
    """File names of images, sounds and fonts."""

    BASIC_CAR = "basic-car.png"
    F1_CAR = "f1-car.png"
    POLICE_CAR = "rpolice-car.png"
    SPORTS_CAR = "sports-car.png"
    YOU_WIN = "youwin.png"
    MENU = "menu_background.png"

    LEVEL1_BACKGROUND = "level_0.png"
    LEVEL2_BACKGROUND = "level_1.png"
    LEVEL3_BACKGROUND = "level_2.png"

    CAR_HORN = "car-horn.mp3"
    RETRO_FONT = "retroFont.ttf"


class Physics:
    """Tuning values for vehicle movement."""

    START_X = 10.0
    START_Y = 10.0
    PIXEL_ALIGNMENT = 32.0
    MAX_STEERING_ANGLE = 120.0
    MAX_ACCELERATION = 300.0
    MAX_VELOCITY = 200.0
    DECELERATION = 2.0
    REVERSE_ACCELERATION = 40.0
    VEHICLE_LENGTH = 4.0
    STEERING_RATE = 150.0

    PLAYER_WIDTH = 50.0
    PLAYER_HEIGHT = 100.0
    PLAYER_INIT_ROTATION = 180.0

    PIXELS_PER_METER = 32.0
    MOVEMENT_THRESHOLD = 1.0
    LINEAR_DAMPING = 0.8
    ANGULAR_DAMPING = 1.5


class Map:
    """Tile map values."""

    BLOCK_SIZE = 16
    GOAL_TILE = "brown.png"
    GOAL_L1_WIDTH = 6
    GOAL_L1_HEIGHT = 12
    LEVEL1_REWARD = 100


class Colors:
    """RGBA colours."""

    GOLD = (255, 185, 15, 255)
    RED = (255, 0, 0, 255)
    BLACK = (0, 0, 0, 255)
    WHITE = (255, 255, 255, 255)
    GREEN = (0, 255, 0, 255)
    BOUNDARY_FILL = (100, 100, 100, 150)
    BOUNDARY_OUTLINE = (50, 50, 50, 255)


class ObjectDefaults:
    """Default sizes, speeds and respawn delays of level objects."""

    STATIC_OBSTACLE_SIZE = 16.0
    ROAD_BOUNDARY_OUTLINE = 2.0
    MOVING_CAR_SPEED = 120.0
    MOVING_CAR_RESPAWN = 4.0
    PEDESTRIAN_SPEED = 75.0
    PEDESTRIAN_RESPAWN = 6.0


def tiles_to_pixels(tile_coord: float) -> float:
    """Convert a tile coordinate to pixels."""
    return tile_coord * _TILE_SIZE


def get_start_position() -> Vec2:
    """Return the player's default start position in pixels."""
    return Vec2(tiles_to_pixels(Physics.START_X), tiles_to_pixels(Physics.START_Y))