from contextlib import contextmanager

import blessed

from matrix_utils import frame_lines


class TerminalDisplay:
    """Draws the board inside a bordered box at the top-left of the terminal."""

    def __init__(self, width, height, term=None):
        self.width = width
        self.height = height
        self.term = term if term is not None else blessed.Terminal()

    @contextmanager
    def session(self):
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            self._write(self.term.home + self.term.clear)
            yield self

    def render(self, text):
        lines = frame_lines(text, self.width, self.height)
        self._write(
            self.term.home
            + "\n".join(self.term.move_xy(0, y) + line for y, line in enumerate(lines))
        )

    def game_over(self, message):
        # first line below the box
        self._write(self.term.move_xy(0, self.height + 2) + message + "\n")

    def _write(self, data):
        self.term.stream.write(data)
        self.term.stream.flush()
