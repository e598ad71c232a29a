import numpy as np

# Directions as (dx, dy); y grows downward like the terminal rows
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = [UP, DOWN, LEFT, RIGHT]
KEYS = {
    "w": UP,
    "up": UP,
    "s": DOWN,
    "down": DOWN,
    "a": LEFT,
    "left": LEFT,
    "d": RIGHT,
    "right": RIGHT,
}

# Cell characters
EMPTY = " "
MARKER = "*"

SNAKE_LENGTH = 3


def _is_int(value):
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


class GameState:
    """
    One Snake session on a fixed width x height board.
    The snake is a list of (x, y) tuples, head first.
    """

    def __init__(self, height, width):
        if not _is_int(height) or height < 1:
            raise ValueError(f"height must be a positive integer, got {height!r}")
        # the two body segments sit left of the head at width // 2
        if not _is_int(width) or width // 2 < SNAKE_LENGTH - 1:
            raise ValueError(
                f"width must be an integer of at least {2 * (SNAKE_LENGTH - 1)}, got {width!r}"
            )
        self.height = height
        self.width = width
        self.direction = RIGHT

        start_x, start_y = width // 2, height // 2
        self.snake = [(start_x - i, start_y) for i in range(SNAKE_LENGTH)]

    def set_direction(self, key):
        """Point the snake along the direction bound to key; anything else is ignored."""
        if not isinstance(key, str) or key not in KEYS:
            return
        self.direction = KEYS[key]

    def in_bounds(self, pos):
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def step(self):
        """
        Move the snake one cell along its direction.
        Returns False (and leaves the snake as it was) when the new head
        would leave the board or land on any segment, tail included.
        """
        head = self.snake[0]
        new_head = (head[0] + self.direction[0], head[1] + self.direction[1])

        if not self.in_bounds(new_head):
            return False
        if new_head in self.snake:
            return False

        self.snake = [new_head] + self.snake[:-1]
        return True

    def grid(self):
        board = np.full((self.height, self.width), EMPTY, dtype="<U1")
        for x, y in self.snake:
            board[y, x] = MARKER
        return board
