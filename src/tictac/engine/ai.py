from __future__ import annotations

import random
from typing import Sequence

from .game import GameEngine, MoveResult
from .types import BOARD_SIZE, CENTER, CORNERS, WINNING_LINES, Cell, Mark, other_mark

COMPUTER_MARK: Mark = "O"


def find_completing_cell(board: Sequence[Cell], mark: Mark) -> int | None:
    """Empty cell that would give `mark` three in a line, first line in table order."""
    for line in WINNING_LINES:
        cells = [board[i] for i in line]
        if cells.count(mark) == 2 and cells.count(None) == 1:
            return line[cells.index(None)]
    return None


def choose_move(
    board: Sequence[Cell],
    own_mark: Mark,
    opponent_mark: Mark,
    rng: random.Random | None = None,
) -> int:
    """Pick a cell for `own_mark` with a fixed priority cascade.

    Win now, else block, else center, else a random free corner, else any
    random free cell. Only the last two steps draw from `rng`. The board must
    have at least one empty cell.
    """
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}.")
    available = [i for i, cell in enumerate(board) if cell is None]
    if not available:
        raise ValueError("No move available: the board is full.")

    winning = find_completing_cell(board, own_mark)
    if winning is not None:
        return winning

    blocking = find_completing_cell(board, opponent_mark)
    if blocking is not None:
        return blocking

    if board[CENTER] is None:
        return CENTER

    rng = rng or random.Random()
    corners = [i for i in CORNERS if board[i] is None]
    if corners:
        return rng.choice(corners)
    return rng.choice(available)


def opponent_take_turn(
    engine: GameEngine,
    rng: random.Random | None = None,
    generation: int | None = None,
) -> MoveResult | None:
    """Play the computer's move if it is the computer's turn.

    Uses the engine RNG unless `rng` is given, so a seeded engine plays the
    same game for the same human moves.
    """
    if engine.mode != "single" or engine.is_over:
        return None
    if engine.current_turn != COMPUTER_MARK:
        return None
    index = choose_move(engine.board, COMPUTER_MARK, other_mark(COMPUTER_MARK), rng or engine.rng)
    return engine.apply_move(index, generation=generation)
