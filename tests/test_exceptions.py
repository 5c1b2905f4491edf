import pytest

from parking2d.exceptions import (
    CollisionDetectionException,
    EffectProcessingException,
    GameException,
    GameStateException,
    InvalidLevelException,
    LevelOperationException,
    ManagerInitializationException,
    ObjectCreationException,
    ResourceNotFoundException,
)


def test_base_message_and_context():
    err = GameException("boom", "Here")
    assert str(err) == "boom"
    assert err.context == "Here"
    assert "boom" in err.full_message()
    assert "Here" in err.full_message()


def test_base_without_context_full_message_is_message():
    err = GameException("only message")
    assert err.context == ""
    assert err.full_message() == "only message"


def test_resource_not_found_keeps_name_and_path():
    err = ResourceNotFoundException("crash", "crash_sound.mp3")
    assert isinstance(err, GameException)
    assert err.resource_name == "crash"
    assert err.path == "crash_sound.mp3"
    assert "crash_sound.mp3" in err.full_message()
    assert "crash" in str(err)


def test_invalid_level_keeps_name_and_reason():
    err = InvalidLevelException("level_1", "missing spawn")
    assert err.level_name == "level_1"
    assert "missing spawn" in err.full_message()


@pytest.mark.parametrize(
    "cls,default_context",
    [
        (CollisionDetectionException, "CollisionDetector"),
        (EffectProcessingException, "EffectManager"),
    ],
)
def test_default_contexts(cls, default_context):
    err = cls("failed")
    assert err.context == default_context
    assert default_context in err.full_message()
    assert "failed" in err.full_message()


def test_game_state_exception():
    err = GameStateException("PAUSED", "cannot pause twice")
    assert err.state_name == "PAUSED"
    assert err.context == "GameStateManager"
    assert "PAUSED" in err.full_message()
    assert "cannot pause twice" in err.full_message()


def test_manager_initialization_exception():
    err = ManagerInitializationException("SoundManager", "no device")
    assert err.manager_name == "SoundManager"
    assert "no device" in err.full_message()


def test_level_operation_exception():
    err = LevelOperationException("restart", "no level")
    assert err.operation == "restart"
    assert "restart" in err.full_message()


def test_object_creation_exception_catchable_as_base():
    err = ObjectCreationException("MovingCar", "bad speed")
    assert isinstance(err, GameException)
    assert err.object_type == "MovingCar"
    assert "bad speed" in err.full_message()