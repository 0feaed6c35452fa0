from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import pygame  # type: ignore[import-not-found]

from tictac.paths import Paths
from tictac.services.settings import GameSettings, SettingsService
from tictac.services.telemetry import TelemetryService

from .ui import Fonts


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt: float) -> SceneTransition | None: ...
    def render(self, screen: pygame.Surface) -> None: ...


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    fonts: Fonts
    settings_service: SettingsService
    telemetry: TelemetryService
    seed: Optional[int] = None
    # Explicit --width/--height; a missing side comes from the settings.
    window_width: Optional[int] = None
    window_height: Optional[int] = None

    # Loaded at boot
    settings: Optional[GameSettings] = None

    def engine_seed(self) -> Optional[int]:
        if self.seed is not None:
            return self.seed
        return self.settings.seed if self.settings is not None else None


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)
            if not self.running:
                break

            tr = self.scene.update(dt)
            if tr is not None:
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        pygame.quit()
        return 0
