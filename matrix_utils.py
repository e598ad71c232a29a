import numpy as np

BORDER = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
}


def grid_to_str(grid):
    # Accept NumPy arrays as well as nested lists
    return "\n".join("".join(row) for row in np.asarray(grid).tolist())


def frame_lines(text, width, height):
    """
    Wrap text in a line border. The box is (width + 2) x (height + 2);
    rows are padded or clipped to fit the inside.
    """
    rows = text.split("\n") if text else []
    rows = (rows + [""] * height)[:height]
    lines = [BORDER["top_left"] + BORDER["horizontal"] * width + BORDER["top_right"]]
    for row in rows:
        lines.append(BORDER["vertical"] + row[:width].ljust(width) + BORDER["vertical"])
    lines.append(
        BORDER["bottom_left"] + BORDER["horizontal"] * width + BORDER["bottom_right"]
    )
    return lines


def print_game_matrix(grid):
    print(grid_to_str(grid))
