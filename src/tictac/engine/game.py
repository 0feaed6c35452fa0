from __future__ import annotations

import random
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .types import (
    BOARD_SIZE,
    FIRST_MARK,
    GAME_MODES,
    WINNING_LINES,
    Cell,
    GameMode,
    GameStatus,
    Mark,
    WinningLine,
    other_mark,
)

Event = dict[str, object]


@dataclass
class GameState:
    mode: GameMode
    board: list[Cell]
    current_turn: Mark = FIRST_MARK
    status: GameStatus = "playing"
    winner: Mark | None = None
    winning_line: WinningLine | None = None
    generation: int = 0
    move_log: list[int] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    status: GameStatus
    winner: Mark | None = None
    winning_line: WinningLine | None = None
    error: str | None = None
    events: tuple[Event, ...] = ()


def _reject(state: GameState, error: str) -> MoveResult:
    return MoveResult(
        accepted=False,
        status=state.status,
        winner=state.winner,
        winning_line=state.winning_line,
        error=error,
    )


def new_game(mode: GameMode, generation: int = 0) -> GameState:
    if mode not in GAME_MODES:
        raise ValueError(f"Unknown game mode: {mode!r}")
    return GameState(mode=mode, board=[None] * BOARD_SIZE, generation=generation)


def find_winning_line(board: Sequence[Cell]) -> tuple[Mark, WinningLine] | None:
    for line in WINNING_LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] and mark == board[c]:
            return mark, line
    return None


def empty_cells(board: Sequence[Cell]) -> list[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def is_board_full(board: Sequence[Cell]) -> bool:
    return all(cell is not None for cell in board)


def apply_move(state: GameState, index: int) -> MoveResult:
    """Place the current turn's mark at `index` and resolve the outcome.

    Illegal moves are declined through the result, never raised, and leave
    `state` untouched.
    """
    if state.status != "playing":
        return _reject(state, "Game already ended.")
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
        return _reject(state, f"Cell index out of range: {index!r}")
    if state.board[index] is not None:
        return _reject(state, f"Cell {index} is already taken.")

    before = len(state.event_log)
    mark = state.current_turn
    state.board[index] = mark
    state.move_log.append(index)
    state.event_log.append({"type": "MARK_PLACED", "mark": mark, "index": index})

    found = find_winning_line(state.board)
    if found is not None:
        winner, line = found
        state.status = "won"
        state.winner = winner
        state.winning_line = line
        state.event_log.append({"type": "GAME_WON", "winner": winner, "line": list(line)})
    elif is_board_full(state.board):
        state.status = "draw"
        state.event_log.append({"type": "GAME_DRAWN"})
    else:
        state.current_turn = other_mark(mark)
        state.event_log.append({"type": "TURN_CHANGED", "mark": state.current_turn})

    return MoveResult(
        accepted=True,
        status=state.status,
        winner=state.winner,
        winning_line=state.winning_line,
        events=tuple(state.event_log[before:]),
    )


def replay(mode: GameMode, moves: Iterable[int]) -> GameState:
    state = new_game(mode)
    for index in moves:
        apply_move(state, index)
        if state.status != "playing":
            break
    return state


class GameEngine:
    """Owns one game session at a time.

    Every start or reset replaces the state wholesale and bumps `generation`,
    so a move computed against an older session can be refused by passing its
    token to `apply_move`.
    """

    def __init__(self, mode: GameMode = "two-player", seed: int | None = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self._state = new_game(mode)

    # --- operations ---

    def start_session(self, mode: GameMode) -> None:
        self._state = new_game(mode, generation=self._state.generation + 1)

    def reset_session(self) -> None:
        self._state = new_game(self._state.mode, generation=self._state.generation + 1)

    def apply_move(self, index: int, generation: int | None = None) -> MoveResult:
        if generation is not None and generation != self._state.generation:
            return _reject(self._state, "Stale move from a previous session.")
        return apply_move(self._state, index)

    # --- read-only accessors ---

    @property
    def board(self) -> tuple[Cell, ...]:
        return tuple(self._state.board)

    @property
    def current_turn(self) -> Mark:
        return self._state.current_turn

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def winner(self) -> Mark | None:
        return self._state.winner

    @property
    def winning_line(self) -> WinningLine | None:
        return self._state.winning_line

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def is_over(self) -> bool:
        return self._state.status != "playing"

    @property
    def state(self) -> GameState:
        return deepcopy(self._state)

    def snapshot(self) -> dict[str, object]:
        from .serialize import snapshot

        return snapshot(self._state)
