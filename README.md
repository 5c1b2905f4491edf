# parking2d

This package holds the game logic for a top-down 2D parking game. It covers the level objects and their collision rules, a small rigid-body model for vehicles, scoring and a countdown, sound and texture bookkeeping, and the state of the main menu. It has no window and draws nothing. A front end uses these pieces to run the game.

## Installation

```
pip install .
```

To install and run the tests:

```
pip install .[test]
pytest
```

## Modules

- `parking2d.constants`
  - Window size and title, FPS, and asset file names.
  - Physics, map, colour and object-default constants.
  - `tiles_to_pixels()` turns tiles into pixels at 32 pixels per tile.
  - `get_start_position()` returns the default start position as a `Vec2`.
- `parking2d.geometry`
  - `Vec2`: an immutable vector with `+`, `-`, scalar `*` and `length()`.
  - `Rect`: an axis-aligned rectangle with `right`, `bottom` and `intersects()`. An overlap counts only when its area is positive.
- `parking2d.exceptions`
  - `GameException`, with a `message`, a `context` and `full_message()`.
  - Its subclasses: `ResourceNotFoundException`, `InvalidLevelException`, `CollisionDetectionException`, `GameStateException`, `EffectProcessingException`, `ManagerInitializationException`, `LevelOperationException` and `ObjectCreationException`.
- `parking2d.collision`
  - `CollisionType` and `EffectType`.
  - `CollisionResult`, a frozen record with these fields: type, score change, damage, restart flag, effect and message.
  - `CollisionResult` also has `has_collision()`, `is_fatal()` and `no_collision()`.
- `parking2d.score_time`
  - `ScoreTimeManager` keeps the score, the level number and a countdown.
  - Its methods: `start_level`, `complete_level`, `reset_level`, `update`, `add_score`, `reset_score`, `is_time_up`, `time_remaining_string`, `score_string`, `level_string` and `ui_string`.
  - `complete_level` adds 1000 points, plus 10 points for each second left.
  - You can pass in a clock function, which makes testing easier.
- `parking2d.sound`
  - `SoundManager` is a singleton, reached through `get_instance()` and closed with `shutdown()`.
  - It loads audio files under ids and tracks their state: playing, stopped, looping, volume, mute, the current background loop and the background music.
  - `load_all_game_sounds()` loads the game's sounds from the working directory. It logs a warning for each missing file and skips it.
- `parking2d.objects`
  - `GameObject` is an abstract base. Two objects settle a collision by double dispatch: `a.accept_collision(b)` calls the `collide_with_*` method of `b` that matches `a`.
  - `StaticObstacle` is a traffic cone, which causes minor damage.
  - `ParkedCar` causes heavy damage and restarts the level.
  - `ParkingSpot` reaches the goal when a vehicle lies fully inside it, within a 10-pixel tolerance.
  - `DynamicObstacle` moves in a straight line and respawns at its start some time after it leaves the window.
  - `MovingCar` is a `DynamicObstacle` that also starts and stops the `"moving_car"` sound.
- `parking2d.vehicle`
  - `PhysicsWorld` and `Body`: box bodies that gather forces and torques, then integrate them with damping in `step()`.
  - `Vehicle` is an abstract base that drives a body.
    - Controls: `set_thrust` and `set_steering`, both clamped to the vehicle's limits; `apply_force` and `apply_torque`.
    - Motion: `stop` and `reset`.
    - Motion queries: `current_speed`, `rotation_angle`, `is_moving`, `is_moving_forward`, `is_moving_backward` and `is_turning`.
- `parking2d.level`
  - `PlayerSpawn`.
  - `Level`, which holds objects and boundary rectangles. It supports `len()` and iteration.
- `parking2d.factory`
  - Builders for objects from string key/value data: `create`, `create_moving` and `create_from_json_data`.
  - `create_from_json_data` accepts these type names: `"obstacle"`/`"StaticObstacle"`, `"parkingcar"`/`"ParkedCar"`, `"parking_spot"` and `"movingcar"`/`"MovingCar"`.
  - `create_boundary` and `create_player_spawn`.
  - Bad input raises `ObjectCreationException`.
- `parking2d.textures`
  - `TextureManager` is a singleton that keeps Pillow RGBA images under ids.
  - `load_texture_with_transparency` turns near-white pixels transparent.
  - `get_texture` raises `ResourceNotFoundException` for an unknown id.
- `parking2d.menu`
  - `Button` and `ButtonState`.
  - The events `MouseClick` and `KeyPress`.
  - `MenuManager`, which lays out three buttons: Start Game, Instructions and Exit. It maps input events to a `MenuOption`.
    - Space also starts the game.
    - The instructions text comes from `instructions.txt`, with a built-in text as the fallback.

## Example

```python
from parking2d.factory import create
from parking2d.score_time import ScoreTimeManager

cone = create("obstacle", 100.0, 200.0)
spot = create("parking_spot", 400.0, 300.0)

scores = ScoreTimeManager()
scores.start_level(1, 120.0)
scores.add_score(500)
print(scores.ui_string())   # Score: 500    Time: 02:00    Level: 1
```

## What this package does not do

- It has no game loop, no window, no rendering and no command to start a game.
- `SoundManager` reads audio files and tracks playback state only. It produces no audio output.
- `TextureManager` loads images but does not draw them.
- There is no concrete player vehicle. `Vehicle` is abstract, so a subclass must supply input handling, health, sound and power-up behaviour.
- `PhysicsWorld` does not resolve contacts between bodies.
- The package cannot read a level file from disk. Levels are built from key/value data through `parking2d.factory`.