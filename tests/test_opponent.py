from __future__ import annotations

import random

import pytest

from tictac.engine.ai import choose_move, find_completing_cell, opponent_take_turn
from tictac.engine.game import GameEngine

X, O = "X", "O"


def test_win_now_beats_block() -> None:
    board = [X, X, None, None, O, O, None, None, None]
    assert choose_move(board, own_mark=O, opponent_mark=X) == 3


def test_blocks_opponent_line() -> None:
    board = [X, X, None, None, O, None, None, None, None]
    assert choose_move(board, own_mark=O, opponent_mark=X) == 2


def test_first_line_in_table_order_wins() -> None:
    # O can finish the top row (index 2) or the left column (index 6); rows come first.
    board = [O, O, None, O, X, X, None, X, None]
    assert choose_move(board, own_mark=O, opponent_mark=X) == 2


def test_empty_board_takes_center() -> None:
    assert choose_move([None] * 9, own_mark=O, opponent_mark=X) == 4


def test_center_taken_picks_a_corner() -> None:
    board = [None, None, None, None, X, None, None, None, None]
    rng = random.Random(0)
    picks = {choose_move(board, O, X, rng=rng) for _ in range(200)}
    assert picks <= {0, 2, 6, 8}
    assert len(picks) > 1


def test_only_free_corners_are_candidates() -> None:
    board = [X, None, None, None, O, None, None, None, X]
    # X holds 0 and 8 with center taken by O; no line for either side is two-and-empty
    for seed in range(50):
        assert choose_move(board, O, X, rng=random.Random(seed)) in {2, 6}


def test_fallback_to_any_empty_cell() -> None:
    # X _ O / O X X / X _ O : corners and center taken, no two-in-a-line with an empty third
    board = [X, None, O, O, X, X, X, None, O]
    assert find_completing_cell(board, X) is None
    assert find_completing_cell(board, O) is None
    for seed in range(50):
        assert choose_move(board, X, O, rng=random.Random(seed)) in {1, 7}


def test_full_board_is_a_precondition_violation() -> None:
    board = [X, O, X, X, O, O, O, X, X]
    with pytest.raises(ValueError):
        choose_move(board, O, X)


def test_wrong_board_size_raises() -> None:
    with pytest.raises(ValueError):
        choose_move([None] * 8, O, X)


def test_choose_move_does_not_mutate_board() -> None:
    board = [X, None, None, None, None, None, None, None, None]
    copy = list(board)
    choose_move(board, O, X, rng=random.Random(1))
    assert board == copy


def test_seeded_rng_is_repeatable() -> None:
    board = [None, None, None, None, X, None, None, None, None]
    a = [choose_move(board, O, X, rng=random.Random(7)) for _ in range(5)]
    b = [choose_move(board, O, X, rng=random.Random(7)) for _ in range(5)]
    assert a == b


def test_opponent_moves_only_on_its_turn_in_single_mode() -> None:
    engine = GameEngine("single", seed=3)
    assert opponent_take_turn(engine) is None  # X to move
    engine.apply_move(0)
    res = opponent_take_turn(engine)
    assert res is not None and res.accepted
    assert engine.board[4] == O
    assert engine.current_turn == X


def test_opponent_idle_in_two_player_mode() -> None:
    engine = GameEngine("two-player")
    engine.apply_move(0)
    assert opponent_take_turn(engine) is None
    assert engine.board.count(None) == 8


def test_opponent_stale_generation_rejected() -> None:
    engine = GameEngine("single", seed=3)
    engine.apply_move(0)
    token = engine.generation
    engine.reset_session()
    engine.apply_move(2)
    res = opponent_take_turn(engine, generation=token)
    assert res is not None
    assert not res.accepted
    assert engine.board.count(None) == 8


def test_opponent_blocks_through_engine() -> None:
    engine = GameEngine("single", seed=11)
    engine.apply_move(0)  # X
    opponent_take_turn(engine)  # O takes center
    engine.apply_move(1)  # X threatens 0,1,2
    res = opponent_take_turn(engine)
    assert res is not None and res.accepted
    assert engine.board[2] == O
