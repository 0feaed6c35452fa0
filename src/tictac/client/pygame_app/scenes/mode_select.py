from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from tictac.engine.types import GameMode

from ..app import GameContext, SceneTransition
from ..ui import Button, draw_text_centered


class ModeSelectScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._next: SceneTransition | None = None
        w, h, gap = 280, 56, 16
        x = (ctx.screen.get_width() - w) // 2
        y = 200
        self._buttons = [
            Button(
                rect=pygame.Rect(x, y, w, h),
                text="Single Player",
                on_click=lambda: self._start("single"),
            ),
            Button(
                rect=pygame.Rect(x, y + (h + gap), w, h),
                text="Two Players",
                on_click=lambda: self._start("two-player"),
            ),
            Button(
                rect=pygame.Rect(x, y + (h + gap) * 2, w, h),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            ),
        ]

    def _start(self, mode: GameMode) -> None:
        from .board import BoardScene

        self._next = SceneTransition(BoardScene(self.ctx, mode))

    def handle_event(self, event: pygame.event.Event) -> None:
        for b in self._buttons:
            if b.handle_event(event):
                return

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((12, 12, 18))
        fonts = self.ctx.fonts
        cx = screen.get_width() // 2
        draw_text_centered(screen, fonts.big, "Tic Tac Toe", (cx, 90))
        draw_text_centered(screen, fonts.ui, "Choose a game mode", (cx, 140), color=(180, 180, 200))
        for b in self._buttons:
            b.draw(screen, fonts.ui)
