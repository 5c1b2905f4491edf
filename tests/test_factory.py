import pytest

from parking2d import factory
from parking2d.exceptions import ObjectCreationException
from parking2d.geometry import Rect, Vec2
from parking2d.objects import MovingCar, ParkedCar, ParkingSpot, StaticObstacle


def test_create_obstacle_defaults():
    obj = factory.create("obstacle", 10.0, 20.0)
    assert type(obj) is StaticObstacle
    assert obj.position == Vec2(10.0, 20.0)
    assert obj.texture_id == "traffic_cone"
    assert obj.rotation == 0.0


def test_create_static_obstacle_alias():
    obj = factory.create("StaticObstacle", 1.0, 2.0)
    assert type(obj) is StaticObstacle
    assert obj.position == Vec2(1.0, 2.0)
    assert obj.texture_id == "traffic_cone"


def test_create_parked_car_textures():
    default = factory.create("ParkedCar", 5.0, 6.0)
    chosen = factory.create("parkingcar", 5.0, 6.0, "parked_car_blue")
    assert type(default) is ParkedCar
    assert default.texture_id == "parked_car_red"
    assert chosen.texture_id == "parked_car_blue"


def test_create_parking_spot():
    obj = factory.create("parking_spot", 7.0, 8.0)
    assert type(obj) is ParkingSpot
    assert obj.texture_id == "parking_spot"
    assert obj.position == Vec2(7.0, 8.0)


def test_create_empty_type_raises():
    with pytest.raises(ObjectCreationException, match="Empty object type provided"):
        factory.create("", 1.0, 1.0)


def test_create_moving_empty_type_raises():
    with pytest.raises(ObjectCreationException, match="Empty moving object type provided"):
        factory.create_moving("", 0.0, 0.0, 1.0, 0.0, 1.0, 1.0)


def test_unknown_type_raises():
    with pytest.raises(ObjectCreationException, match="Unknown object type: tank") as info:
        factory.create("tank", 1.0, 1.0)
    assert info.value.object_type == "tank"


def test_empty_data_raises():
    with pytest.raises(ObjectCreationException, match="Empty JSON data provided"):
        factory.create_from_json_data("obstacle", {})


def test_empty_type_in_json_raises():
    with pytest.raises(ObjectCreationException, match="Empty object type in JSON data"):
        factory.create_from_json_data("", {"x": "1"})


def test_bad_number_raises():
    with pytest.raises(ObjectCreationException) as info:
        factory.create_from_json_data("obstacle", {"x": "abc", "y": "1"})
    assert info.value.object_type == "BasicObject"
    assert "Failed to convert x to float: abc" in info.value.message


def test_bad_angle_raises():
    with pytest.raises(ObjectCreationException) as info:
        factory.create_from_json_data("obstacle", {"x": "1", "y": "1", "angle": "wide"})
    assert info.value.object_type == "FloatConversion"


def test_leading_number_is_used():
    obj = factory.create_from_json_data("obstacle", {"x": "12px", "y": "3"})
    assert obj.position == Vec2(12.0, 3.0)


def test_direction_sets_rotation():
    obj = factory.create_from_json_data(
        "obstacle", {"x": "0", "y": "0", "direction_x": "0", "direction_y": "1"}
    )
    assert obj.rotation == pytest.approx(90.0, rel=1e-4)


def test_angle_overrides_direction():
    obj = factory.create_from_json_data(
        "ParkedCar", {"x": "1", "y": "1", "directionX": "1", "directionY": "1", "angle": "45"}
    )
    assert obj.rotation == 45.0


def test_create_moving_car():
    obj = factory.create_moving("MovingCar", 5.0, 6.0, 0.0, 0.0, 100.0, 2.0)
    assert type(obj) is MovingCar
    assert obj.start_position == Vec2(5.0, 6.0)
    assert obj.position == Vec2(5.0, 6.0)
    assert obj.direction == Vec2(1.0, 0.0)
    assert obj.speed == 100.0
    assert obj.respawn_delay == 2.0


def test_create_moving_car_keeps_direction():
    obj = factory.create_moving("movingcar", 1.0, 1.0, 0.0, -1.0, 50.0, 1.0)
    assert obj.direction == Vec2(0.0, -1.0)


def test_moving_car_defaults_from_json():
    obj = factory.create_from_json_data("movingcar", {"x": "3", "y": "4"})
    assert obj.start_position == Vec2(3.0, 4.0)
    assert obj.speed == 80.0
    assert obj.respawn_delay == 3.0


def test_zero_respawn_falls_back_to_other_key():
    obj = factory.create_from_json_data(
        "MovingCar", {"x": "3", "y": "4", "respawn_delay": "0", "respawnDelay": "7"}
    )
    assert obj.respawn_delay == 7.0


def test_create_boundary_defaults_and_values():
    assert factory.create_boundary({}) == Rect(0.0, 0.0, 1.0, 1.0)
    rect = factory.create_boundary({"x": "2", "y": "3", "width": "40", "height": "50"})
    assert rect == Rect(2.0, 3.0, 40.0, 50.0)


def test_create_player_spawn_defaults():
    spawn = factory.create_player_spawn({})
    assert spawn.position == Vec2(670.0, 210.0)
    assert spawn.angle == 90.0
    assert spawn.direction == Vec2(0.0, 0.0)


def test_create_player_spawn_values():
    spawn = factory.create_player_spawn(
        {"x": "100", "y": "200", "angle": "180", "direction_x": "-1", "directionY": "1"}
    )
    assert spawn.position == Vec2(100.0, 200.0)
    assert spawn.angle == 180.0
    assert spawn.direction == Vec2(-1.0, 1.0)