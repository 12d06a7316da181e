import json
import random

import pygame
import pytest

from stepsort.app import App, AppStatus
from stepsort.config import MAX_BARS, MIN_BARS, Settings
from stepsort.events import Event


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FakeTones:
    def __init__(self):
        self.calls = []

    def trigger(self, value, max_value):
        self.calls.append((value, max_value))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(tmp_path, clock):
    settings = Settings(str(tmp_path / "settings.json"))
    return App(settings=settings, rng=random.Random(1), clock=clock)


def test_initial_state(app):
    assert app.app_status == AppStatus.PAUSED
    assert sorted(app.bars) == list(range(1, 51))
    assert app.speed == 100
    assert app.get_current_algorithm().name() == "Bubble Sort"
    assert app.get_current_algorithm().get_data() == app.bars


def test_tick_waits_for_running_and_interval(app, clock):
    before = app.get_current_algorithm().get_data()
    clock.now = 10.0
    app.tick()
    assert app.get_current_algorithm().stats()["steps"] == 0

    app.handle_key(pygame.K_SPACE)
    assert app.app_status == AppStatus.RUNNING
    app.tick(now=10.05)
    assert app.get_current_algorithm().stats()["steps"] == 0

    app.tick(now=10.5)
    assert app.get_current_algorithm().stats()["steps"] == 1
    app.tick(now=10.55)
    assert app.get_current_algorithm().stats()["steps"] == 1
    assert sorted(app.get_current_algorithm().get_data()) == sorted(before)


def test_run_until_completed(app, clock):
    app.select_algorithm(1)
    app.speed = 1
    app.toggle_running()
    for _ in range(20_000):
        clock.now += 0.01
        app.tick()
        if app.app_status == AppStatus.COMPLETED:
            break
    assert app.app_status == AppStatus.COMPLETED
    assert app.get_current_algorithm().get_data() == sorted(app.bars)


def test_toggle_from_completed_reshuffles(app):
    app.app_status = AppStatus.COMPLETED
    app.handle_key(pygame.K_SPACE)
    assert app.app_status == AppStatus.PAUSED
    assert app.get_current_algorithm().stats()["steps"] == 0


def test_reset_restores_bars(app, clock):
    app.toggle_running()
    for k in range(1, 6):
        app.tick(now=k)
    app.handle_key(pygame.K_r)
    assert app.app_status == AppStatus.PAUSED
    assert app.get_current_algorithm().get_data() == app.bars


@pytest.mark.parametrize("start,expected", [(100, 80), (40, 20), (20, 1), (1, 1), (10, 1)])
def test_increase_speed(app, start, expected):
    app.speed = start
    app.handle_key(pygame.K_UP)
    assert app.speed == expected


@pytest.mark.parametrize("start,expected", [(100, 120), (1, 20), (990, 1000), (1000, 1000)])
def test_decrease_speed(app, start, expected):
    app.speed = start
    app.handle_key(pygame.K_DOWN)
    assert app.speed == expected


def test_length_bounds(app):
    for _ in range(MAX_BARS):
        app.handle_key(pygame.K_RIGHT)
    assert len(app.bars) == MAX_BARS
    assert sorted(app.bars) == list(range(1, MAX_BARS + 1))

    for _ in range(MAX_BARS):
        app.handle_key(pygame.K_LEFT)
    assert len(app.bars) == MIN_BARS
    assert sorted(app.bars) == list(range(1, MIN_BARS + 1))
    assert app.get_current_algorithm().get_data() == app.bars


def test_select_algorithm(app):
    app.handle_key(pygame.K_2)
    assert app.current_algorithm == 1
    assert app.get_current_algorithm().name() == "Quick Sort"
    assert app.get_current_algorithm().get_data() == app.bars

    app.handle_key(pygame.K_9)
    assert app.current_algorithm == 1


@pytest.mark.parametrize("key,mod", [
    (pygame.K_q, 0),
    (pygame.K_ESCAPE, 0),
    (pygame.K_c, pygame.KMOD_LCTRL),
])
def test_quit_keys(app, key, mod):
    app.handle_event(Event("key", key=key, mod=mod))
    assert app.running is False


def test_plain_c_does_not_quit(app):
    app.handle_key(pygame.K_c)
    assert app.running is True


def test_quit_event(app):
    app.handle_event(Event("quit"))
    assert app.running is False


def test_tones_follow_compared_bars(tmp_path, clock):
    tones = FakeTones()
    app = App(settings=Settings(str(tmp_path / "s.json")),
              rng=random.Random(3), clock=clock, sound=tones)
    app.toggle_running()
    app.tick(now=1.0)
    data = app.get_current_algorithm().get_data()
    (a, _), = app.get_current_algorithm().get_comparisons()
    assert tones.calls == [(data[a], max(data))]

    app.handle_key(pygame.K_m)
    app.tick(now=2.0)
    assert len(tones.calls) == 1


def test_settings_applied_and_stored(tmp_path, clock):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"size": 20, "speed_ms": 60, "algorithm": 1, "sound": False}))
    app = App(settings=Settings.load(str(path)), rng=random.Random(0), clock=clock)
    assert len(app.bars) == 20
    assert app.speed == 60
    assert app.current_algorithm == 1
    assert app.sound_on is False

    app.handle_key(pygame.K_RIGHT)
    app.handle_key(pygame.K_1)
    app.store_settings()
    assert json.loads(path.read_text()) == {
        "size": 21, "speed_ms": 60, "algorithm": 0, "sound": False,
    }
