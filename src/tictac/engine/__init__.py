"""Headless rules engine and opponent heuristic for tictac.

IMPORTANT: This package must never import pygame.
"""

from .ai import COMPUTER_MARK, choose_move, opponent_take_turn
from .game import GameEngine, GameState, MoveResult, apply_move, new_game, replay
from .types import WINNING_LINES, GameMode, GameStatus, Mark

__all__ = [
    "COMPUTER_MARK",
    "GameEngine",
    "GameMode",
    "GameState",
    "GameStatus",
    "Mark",
    "MoveResult",
    "WINNING_LINES",
    "apply_move",
    "choose_move",
    "new_game",
    "opponent_take_turn",
    "replay",
]
