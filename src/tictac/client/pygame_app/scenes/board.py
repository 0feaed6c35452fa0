from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from tictac.engine.ai import COMPUTER_MARK
from tictac.engine.game import GameEngine
from tictac.engine.types import GameMode, Mark, WinningLine
from tictac.services.settings import GameSettings

from ..app import GameContext, SceneTransition
from ..play import PlaySession
from ..ui import Button, draw_text_centered, mark_color

BOARD_PX = 300
CELL_PX = BOARD_PX // 3

# Stroke endpoints in board-local pixels, one per winning line.
LINE_ENDPOINTS: dict[WinningLine, tuple[tuple[int, int], tuple[int, int]]] = {
    (0, 1, 2): ((25, 50), (275, 50)),
    (3, 4, 5): ((25, 150), (275, 150)),
    (6, 7, 8): ((25, 250), (275, 250)),
    (0, 3, 6): ((50, 25), (50, 275)),
    (1, 4, 7): ((150, 25), (150, 275)),
    (2, 5, 8): ((250, 25), (250, 275)),
    (0, 4, 8): ((25, 25), (275, 275)),
    (2, 4, 6): ((275, 25), (25, 275)),
}


class BoardScene:
    def __init__(self, ctx: GameContext, mode: GameMode) -> None:
        self.ctx = ctx
        self.engine = GameEngine(mode, seed=ctx.engine_seed())
        self.play = PlaySession(
            engine=self.engine,
            settings=ctx.settings or GameSettings(),
            telemetry=ctx.telemetry,
        )
        self._next: SceneTransition | None = None

        width = ctx.screen.get_width()
        self.origin = ((width - BOARD_PX) // 2, 140)

        bw, bh = 140, 44
        by = self.origin[1] + BOARD_PX + 30
        self.btn_restart = Button(
            rect=pygame.Rect(width // 2 - bw - 8, by, bw, bh), text="Restart", on_click=self.play.restart
        )
        self.btn_change_mode = Button(
            rect=pygame.Rect(width // 2 + 8, by, bw, bh), text="Change Mode", on_click=self._on_menu
        )
        self.btn_play_again = Button(
            rect=pygame.Rect(width // 2 - 110, 330, 220, 50), text="Play Again", on_click=self.play.restart
        )
        self.btn_back = Button(
            rect=pygame.Rect(width // 2 - 110, 394, 220, 50), text="Back to Menu", on_click=self._on_menu
        )

        self.ctx.telemetry.log("session_started", {"mode": mode, "generation": self.engine.generation})

    def _on_menu(self) -> None:
        from .mode_select import ModeSelectScene

        self.play.stop()
        self._next = SceneTransition(ModeSelectScene(self.ctx))

    def _cell_at(self, pos: tuple[int, int]) -> int | None:
        x = pos[0] - self.origin[0]
        y = pos[1] - self.origin[1]
        if not (0 <= x < BOARD_PX and 0 <= y < BOARD_PX):
            return None
        return (y // CELL_PX) * 3 + (x // CELL_PX)

    # --- scene protocol ---

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.play.show_result:
            self.btn_play_again.handle_event(event)
            self.btn_back.handle_event(event)
            return

        if self.btn_restart.handle_event(event) or self.btn_change_mode.handle_event(event):
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            index = self._cell_at(event.pos)
            if index is not None:
                self.play.human_move(index)

    def update(self, dt: float) -> SceneTransition | None:
        self.play.update(dt)
        return self._next

    # --- rendering ---

    def _player_name(self, mark: Mark) -> str:
        if self.engine.mode == "single" and mark == COMPUTER_MARK:
            return "Computer"
        return f"Player {mark}"

    def _status_text(self) -> str:
        if self.engine.status == "won" and self.engine.winner is not None:
            return f"{self._player_name(self.engine.winner)} Wins!"
        if self.engine.status == "draw":
            return "It's a Draw!"
        return f"{self._player_name(self.engine.current_turn)}'s Turn"

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((12, 12, 18))
        fonts = self.ctx.fonts
        cx = screen.get_width() // 2

        mode_label = "Single Player" if self.engine.mode == "single" else "Two Players"
        draw_text_centered(screen, fonts.small, mode_label, (cx, 40), color=(160, 160, 180))
        color = mark_color(self.engine.current_turn) if not self.engine.is_over else (240, 240, 240)
        draw_text_centered(screen, fonts.ui, self._status_text(), (cx, 90), color=color)

        self._draw_board(screen)
        self.btn_restart.draw(screen, fonts.ui)
        self.btn_change_mode.draw(screen, fonts.ui)

        if self.play.show_result:
            self._draw_result(screen)

    def _draw_board(self, screen: pygame.Surface) -> None:
        ox, oy = self.origin
        winning = self.engine.winning_line or ()
        for index, cell in enumerate(self.engine.board):
            rect = pygame.Rect(ox + (index % 3) * CELL_PX, oy + (index // 3) * CELL_PX, CELL_PX, CELL_PX)
            bg = (44, 60, 44) if index in winning else (24, 24, 32)
            pygame.draw.rect(screen, bg, rect)
            pygame.draw.rect(screen, (70, 70, 90), rect, width=2)
            if cell is not None:
                draw_text_centered(screen, self.ctx.fonts.mark, cell, rect.center, color=mark_color(cell))

        if self.engine.winning_line is not None:
            start, end = LINE_ENDPOINTS[self.engine.winning_line]
            pygame.draw.line(
                screen,
                (250, 230, 120),
                (ox + start[0], oy + start[1]),
                (ox + end[0], oy + end[1]),
                8,
            )

    def _draw_result(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        screen.blit(overlay, (0, 0))
        cx = screen.get_width() // 2
        draw_text_centered(screen, self.ctx.fonts.big, self._status_text(), (cx, 260))
        self.btn_play_again.draw(screen, self.ctx.fonts.ui)
        self.btn_back.draw(screen, self.ctx.fonts.ui)
