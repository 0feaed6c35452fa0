from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from tictac.services.settings import SettingsError

from ..app import GameContext, SceneTransition
from ..ui import Button, draw_text
from .mode_select import ModeSelectScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.settings_service.validate_all()
            settings = self.ctx.settings_service.load_with_override(
                self.ctx.paths.userdata_dir / "settings.json"
            )
            seed = self.ctx.seed if self.ctx.seed is not None else settings.seed
            self.ctx.telemetry.log("boot", {"ok": True, "seed": seed})
        except (SettingsError, OSError) as e:
            self._error = str(e)
            try:
                self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            except OSError as log_err:
                self._error += f"\n\nTelemetry unavailable: {log_err}"
            self._quit_button = Button(
                rect=pygame.Rect(20, self.ctx.screen.get_height() - 64, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

        self.ctx.settings = settings
        size = settings.window_size(self.ctx.window_width, self.ctx.window_height)
        if size != self.ctx.screen.get_size():
            self.ctx.screen = pygame.display.set_mode(size)
        return SceneTransition(ModeSelectScene(self.ctx))

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 10, 10))
        fonts = self.ctx.fonts
        draw_text(screen, fonts.big, "Tic Tac Toe", (20, 20))
        if self._error is None:
            draw_text(screen, fonts.ui, "Loading settings...", (20, 80))
            return
        draw_text(screen, fonts.ui, "SETTINGS ERROR", (20, 80), color=(240, 80, 80))
        y = 120
        for line in self._error.splitlines()[:20]:
            draw_text(screen, fonts.small, line[:70], (20, y), color=(230, 230, 230))
            y += 18
        if self._quit_button is not None:
            self._quit_button.draw(screen, fonts.ui)
