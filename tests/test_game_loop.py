import threading
import time

import pytest

from game_loop import GAME_OVER_MESSAGE, GameLoop
from snake_game import DOWN, RIGHT, UP


class FakeDisplay:
    def __init__(self):
        self.frames = []
        self.messages = []

    def render(self, text):
        self.frames.append(text)

    def game_over(self, message):
        self.messages.append(message)


@pytest.fixture
def display():
    return FakeDisplay()


def make_loop(display, height=10, width=10):
    return GameLoop(height, width, display, tick_interval=0, game_over_delay=0)


def test_tick_renders_the_stepped_grid(display):
    loop = make_loop(display)
    assert loop.tick() is True
    assert len(display.frames) == 1
    rows = display.frames[0].split("\n")
    assert len(rows) == 10
    assert rows[5] == "    ***   "
    assert all(row == " " * 10 for i, row in enumerate(rows) if i != 5)


def test_keypress_slot_keeps_last_directional_key(display):
    loop = make_loop(display)
    assert loop.keypress is None
    loop.on_keypress("w")
    loop.on_keypress("x")
    loop.on_keypress(None)
    loop.on_keypress(["s"])
    loop.on_keypress({"d": 1})
    assert loop.keypress == "w"
    loop.on_keypress("s")
    assert loop.keypress == "s"


def test_last_key_before_tick_wins(display):
    loop = make_loop(display)
    loop.on_keypress("w")
    loop.on_keypress("s")
    loop.tick()
    assert loop.game.direction == DOWN
    assert loop.game.snake[0] == (5, 6)


def test_key_is_not_consumed_between_ticks(display):
    loop = make_loop(display)
    loop.on_keypress("w")
    loop.tick()
    # the player turns the snake again directly, the stored key reapplies
    loop.game.set_direction("d")
    loop.tick()
    assert loop.game.direction == UP
    assert loop.keypress == "w"


def test_no_keypress_keeps_initial_direction(display):
    loop = make_loop(display)
    loop.tick()
    assert loop.game.direction == RIGHT


def test_failed_tick_shows_game_over_and_stops(display):
    loop = make_loop(display)
    loop.on_keypress("a")
    assert loop.tick() is False
    assert display.messages == [GAME_OVER_MESSAGE]
    assert display.frames == []
    assert loop.ended
    assert loop.tick() is False
    assert display.messages == [GAME_OVER_MESSAGE]


def test_run_ticks_until_the_wall(display):
    loop = make_loop(display)
    assert loop.run() is False
    # head goes from x=5 to x=9, then hits the wall
    assert len(display.frames) == 4
    assert display.messages == [GAME_OVER_MESSAGE]


def test_quit_stops_without_rendering(display):
    loop = make_loop(display)
    loop.quit()
    assert loop.ended
    assert loop.run() is True
    assert display.frames == []
    assert display.messages == []
    assert loop.tick() is False


def test_quit_interrupts_a_running_loop(display):
    loop = GameLoop(10, 10, display, tick_interval=60, game_over_delay=60)
    result = []
    worker = threading.Thread(target=lambda: result.append(loop.run()))
    worker.start()
    loop.quit()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert result == [True]
    assert display.frames == []


def test_quit_cuts_the_game_over_delay_short(display):
    loop = GameLoop(10, 10, display, tick_interval=0, game_over_delay=60)
    loop.on_keypress("a")
    result = []
    worker = threading.Thread(target=lambda: result.append(loop.run()))
    worker.start()
    deadline = time.monotonic() + 5
    while not loop.ended and time.monotonic() < deadline:
        time.sleep(0.01)
    assert loop.ended
    loop.quit()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert display.messages == [GAME_OVER_MESSAGE]


def test_invalid_board_is_rejected(display):
    with pytest.raises(ValueError):
        GameLoop(10, 2, display)
