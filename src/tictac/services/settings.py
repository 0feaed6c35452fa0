from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator


class SettingsError(RuntimeError):
    pass


@dataclass(frozen=True)
class GameSettings:
    opponent_delay_ms: int = 500
    win_result_delay_ms: int = 800
    draw_result_delay_ms: int = 500
    seed: int | None = None
    window_width: int = 480
    window_height: int = 600

    @property
    def opponent_delay(self) -> float:
        return self.opponent_delay_ms / 1000.0

    def result_delay(self, won: bool) -> float:
        return (self.win_result_delay_ms if won else self.draw_result_delay_ms) / 1000.0

    def window_size(self, width: int | None = None, height: int | None = None) -> tuple[int, int]:
        return (width or self.window_width, height or self.window_height)


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SettingsError(f"Missing settings file: {path}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.absolute_path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path) or "(root)"
            lines.append(f"- {loc}: {err.message}")
        raise SettingsError("\n".join(lines))


def _parse_settings(raw: Mapping[str, object]) -> GameSettings:
    defaults = GameSettings()
    window = raw.get("window")
    width, height = defaults.window_width, defaults.window_height
    if isinstance(window, dict):
        width = int(window.get("width", width))
        height = int(window.get("height", height))
    seed = raw.get("seed")
    return GameSettings(
        opponent_delay_ms=int(raw["opponent_delay_ms"]),  # type: ignore[call-overload]
        win_result_delay_ms=int(raw["win_result_delay_ms"]),  # type: ignore[call-overload]
        draw_result_delay_ms=int(raw["draw_result_delay_ms"]),  # type: ignore[call-overload]
        seed=seed if isinstance(seed, int) else None,
        window_width=width,
        window_height=height,
    )


class SettingsService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    @property
    def default_path(self) -> Path:
        return self._data_dir / "settings.json"

    def load_settings(self, path: Path | None = None) -> GameSettings:
        """Load and validate a settings file (the shipped defaults if `path` is None)."""
        path = path or self.default_path
        raw = _load_json(path)
        schema = _load_json(self._schema_dir / "settings.schema.json")
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise SettingsError(f"{path.name} must be an object")
        return _parse_settings(raw)

    def load_with_override(self, override: Path) -> GameSettings:
        # A user file replaces the shipped defaults wholesale when it exists.
        if override.exists():
            return self.load_settings(override)
        return self.load_settings()

    def validate_all(self) -> None:
        _ = self.load_settings()
