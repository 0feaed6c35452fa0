from __future__ import annotations

from pathlib import Path

from tictac.client.pygame_app.play import PlaySession
from tictac.engine.game import GameEngine
from tictac.services.settings import GameSettings
from tictac.services.telemetry import TelemetryService


def _session(mode: str = "single") -> PlaySession:
    settings = GameSettings(opponent_delay_ms=500, win_result_delay_ms=800, draw_result_delay_ms=500)
    return PlaySession(engine=GameEngine(mode, seed=5), settings=settings)  # type: ignore[arg-type]


def test_computer_replies_after_delay() -> None:
    play = _session()
    assert play.human_move(0) is not None
    assert play.opponent_timer.active
    assert not play.human_can_move()
    assert play.update(0.25) is None
    assert play.engine.board.count(None) == 8
    res = play.update(0.25)
    assert res is not None and res.accepted
    assert play.engine.board[4] == "O"
    assert play.human_can_move()


def test_clicks_ignored_while_computer_is_pending() -> None:
    play = _session()
    play.human_move(0)
    assert play.human_move(1) is None
    assert play.engine.board[1] is None


def test_restart_cancels_pending_computer_move() -> None:
    play = _session()
    play.human_move(0)
    play.restart()
    assert not play.opponent_timer.active
    assert play.update(1.0) is None
    assert play.engine.board == (None,) * 9
    assert play.engine.current_turn == "X"
    assert play.human_can_move()


def test_pending_move_from_before_a_reset_never_lands() -> None:
    play = _session()
    play.human_move(0)
    assert play.opponent_timer.active
    # Engine reset without going through the session: the timer still fires,
    # but its token belongs to the previous game.
    play.engine.reset_session()
    assert play.update(1.0) is None
    assert play.engine.board == (None,) * 9


def test_result_overlay_shown_after_win_delay() -> None:
    play = _session("two-player")
    for i in [0, 3, 1, 4, 2]:
        play.human_move(i)
    assert play.engine.status == "won"
    assert not play.show_result
    play.update(0.5)
    assert not play.show_result
    play.update(0.5)
    assert play.show_result
    play.restart()
    assert not play.show_result
    assert play.engine.status == "playing"


def test_two_player_mode_never_schedules_computer() -> None:
    play = _session("two-player")
    play.human_move(0)
    assert not play.opponent_timer.active
    assert play.human_move(4) is not None
    assert play.engine.board[4] == "O"


def test_session_events_go_to_telemetry(tmp_path: Path) -> None:
    path = tmp_path / "telemetry.jsonl"
    play = _session("two-player")
    play.telemetry = TelemetryService(path)
    play.human_move(4)
    play.restart()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3  # mark_placed, turn_changed, session_reset
    assert '"session_reset"' in lines[-1]
