import pytest

from parking2d.score_time import ScoreTimeManager


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    return ScoreTimeManager(clock=clock)


def test_initial_state(manager):
    assert manager.current_score == 0
    assert manager.current_level == 1
    assert manager.time_remaining == 300.0
    assert not manager.level_active
    assert not manager.is_time_up()


def test_update_counts_down(manager, clock):
    manager.start_level(2, 120.0)
    clock.now = 30.0
    manager.update()
    assert manager.time_remaining == pytest.approx(120.0 - 30.0)
    assert manager.current_level == 2


def test_update_clamps_at_zero_and_time_up(manager, clock):
    manager.start_level(1, 10.0)
    clock.now = 50.0
    manager.update()
    assert manager.time_remaining == 0.0
    assert manager.is_time_up()


def test_update_inactive_does_nothing(manager, clock):
    clock.now = 100.0
    manager.update()
    assert manager.time_remaining == 300.0


def test_complete_level_with_no_time_awards_base_score(manager, clock):
    manager.start_level(1, 10.0)
    clock.now = 20.0
    manager.update()
    manager.complete_level()
    assert manager.current_score == 1000
    assert not manager.level_active


def test_complete_level_twice_awards_once(manager, clock):
    manager.start_level(1, 5.0)
    clock.now = 5.0
    manager.update()
    manager.complete_level()
    first = manager.current_score
    manager.complete_level()
    assert manager.current_score == first


def test_complete_level_time_bonus_grows_with_time_left(clock):
    fast = ScoreTimeManager(clock=clock)
    slow = ScoreTimeManager(clock=clock)
    fast.start_level(1, 100.0)
    slow.start_level(1, 100.0)
    clock.now = 10.0
    fast.update()
    clock.now = 80.0
    slow.update()
    fast.complete_level()
    slow.complete_level()
    assert fast.current_score > slow.current_score > 1000


def test_reset_level_restores_time(manager, clock):
    manager.start_level(3, 60.0)
    clock.now = 40.0
    manager.update()
    manager.reset_level()
    assert manager.time_remaining == 60.0
    assert manager.level_active
    clock.now = 41.0
    manager.update()
    assert manager.time_remaining == pytest.approx(59.0)


def test_add_and_reset_score(manager):
    manager.add_score(250)
    manager.add_score(-50)
    assert manager.current_score == 200
    manager.reset_score()
    assert manager.current_score == 0


def test_time_string_format(manager):
    assert manager.time_remaining_string() == "05:00"


def test_ui_string(manager):
    manager.add_score(42)
    assert manager.ui_string() == (
        manager.score_string() + "    Time: " + manager.time_remaining_string() + "    " + manager.level_string()
    )
    assert manager.score_string() == "Score: 42"
    assert manager.level_string() == "Level: 1"