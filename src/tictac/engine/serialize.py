from __future__ import annotations

from .game import GameState, MoveResult


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "mode": state.mode,
        "board": list(state.board),
        "current_turn": state.current_turn,
        "status": state.status,
        "winner": state.winner,
        "winning_line": list(state.winning_line) if state.winning_line is not None else None,
        "generation": state.generation,
        "moves": list(state.move_log),
    }


def result_to_dict(result: MoveResult) -> dict[str, object]:
    return {
        "accepted": result.accepted,
        "status": result.status,
        "winner": result.winner,
        "winning_line": list(result.winning_line) if result.winning_line is not None else None,
        "error": result.error,
    }
