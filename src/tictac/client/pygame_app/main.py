from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from tictac.paths import get_paths
from tictac.services.settings import SettingsService
from tictac.services.telemetry import TelemetryService

from .app import App, GameContext
from .scenes.boot import BootScene
from .ui import load_fonts


def main() -> int:
    parser = argparse.ArgumentParser(prog="tictac")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None, help="seed the computer opponent")
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width or 480, args.height or 600))
    pygame.display.set_caption("Tic Tac Toe")

    paths = get_paths()
    ctx = GameContext(
        screen=screen,
        clock=pygame.time.Clock(),
        paths=paths,
        fonts=load_fonts(),
        settings_service=SettingsService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.userdata_dir / "telemetry.jsonl", enabled=not args.no_telemetry),
        seed=args.seed,
        window_width=args.width,
        window_height=args.height,
    )

    app = App(ctx, BootScene(ctx))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
