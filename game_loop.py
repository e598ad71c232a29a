import threading

from matrix_utils import grid_to_str
from snake_game import KEYS, GameState

# Seconds
TICK_INTERVAL = 0.5
GAME_OVER_DELAY = 5.0

GAME_OVER_MESSAGE = "Game over!"


class GameLoop:
    """
    Drives a GameState at a fixed tick and bridges it to the input and
    display collaborators.

    The display needs render(text) and game_over(message). Input calls
    on_keypress(key) from any thread and quit() to end the session.
    """

    def __init__(
        self,
        height,
        width,
        display,
        tick_interval=TICK_INTERVAL,
        game_over_delay=GAME_OVER_DELAY,
    ):
        self.game = GameState(height, width)
        self.display = display
        self.tick_interval = tick_interval
        self.game_over_delay = game_over_delay

        self._keypress = None
        self._key_lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._stop = threading.Event()
        self._game_over = False

    @property
    def keypress(self):
        with self._key_lock:
            return self._keypress

    @property
    def ended(self):
        return self._game_over or self._stop.is_set()

    def on_keypress(self, key):
        # Last key wins; nothing is queued
        if not isinstance(key, str) or key not in KEYS:
            return
        with self._key_lock:
            self._keypress = key

    def quit(self):
        self._stop.set()

    def tick(self):
        """Run one tick. Returns False once the snake has crashed."""
        with self._tick_lock:
            if self.ended:
                return False
            self.game.set_direction(self.keypress)

            if not self.game.step():
                self._game_over = True
                self.display.game_over(GAME_OVER_MESSAGE)
                return False

            self.display.render(grid_to_str(self.game.grid()))
            return True

    def run(self):
        """
        Tick until the snake crashes or quit() is called.
        Returns True when quit ended the session, False on game over.
        """
        while not self._stop.wait(self.tick_interval):
            if not self.tick():
                break
        if self._stop.is_set():
            return True
        # keep the message up; quit() cuts this short
        self._stop.wait(self.game_over_delay)
        return False
