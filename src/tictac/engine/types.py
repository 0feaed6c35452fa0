from __future__ import annotations

from typing import Literal

Mark = Literal["X", "O"]
Cell = Mark | None
GameMode = Literal["single", "two-player"]
GameStatus = Literal["playing", "won", "draw"]
WinningLine = tuple[int, int, int]

BOARD_SIZE = 9
FIRST_MARK: Mark = "X"
CENTER = 4
CORNERS: tuple[int, ...] = (0, 2, 6, 8)

GAME_MODES: tuple[GameMode, ...] = ("single", "two-player")

# Check order matters: rows, then columns, then diagonals.
WINNING_LINES: tuple[WinningLine, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def other_mark(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"
