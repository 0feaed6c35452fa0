from __future__ import annotations

from tictac.engine.ai import opponent_take_turn
from tictac.engine.game import GameEngine, replay
from tictac.engine.serialize import snapshot


def _play_against_computer(seed: int) -> GameEngine:
    """Human always takes the lowest free cell; the computer answers each move."""
    engine = GameEngine("single", seed=seed)
    while not engine.is_over:
        free = [i for i, c in enumerate(engine.board) if c is None]
        engine.apply_move(free[0])
        opponent_take_turn(engine)
    return engine


def test_seeded_games_are_identical() -> None:
    snap1 = _play_against_computer(424242).snapshot()
    snap2 = _play_against_computer(424242).snapshot()
    assert snap1 == snap2
    assert snap1["status"] in ("won", "draw")


def test_replay_reproduces_snapshot() -> None:
    engine = _play_against_computer(99)
    moves = engine.state.move_log
    replayed = replay("single", moves)
    snap = snapshot(replayed)
    original = engine.snapshot()
    assert snap["board"] == original["board"]
    assert snap["status"] == original["status"]
    assert snap["winner"] == original["winner"]
    assert snap["winning_line"] == original["winning_line"]


def test_replay_stops_at_game_end() -> None:
    state = replay("two-player", [0, 3, 1, 4, 2, 5, 8])
    assert state.status == "won"
    assert state.move_log == [0, 3, 1, 4, 2]
