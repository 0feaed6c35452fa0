from __future__ import annotations

from dataclasses import dataclass, field

from tictac.engine.ai import COMPUTER_MARK, opponent_take_turn
from tictac.engine.game import GameEngine, MoveResult
from tictac.engine.serialize import result_to_dict
from tictac.services.settings import GameSettings
from tictac.services.telemetry import TelemetryService

from .timers import Countdown


@dataclass
class PlaySession:
    """Turn pacing for one board: human clicks, the delayed computer reply,
    and the delayed result overlay.

    Free of pygame; the board scene forwards clicks and frame deltas here.
    Countdown tokens are engine generations, so anything scheduled before a
    restart can never land on the new game.
    """

    engine: GameEngine
    settings: GameSettings = field(default_factory=GameSettings)
    telemetry: TelemetryService | None = None
    opponent_timer: Countdown[int] = field(default_factory=Countdown)
    result_timer: Countdown[int] = field(default_factory=Countdown)
    show_result: bool = False

    def human_can_move(self) -> bool:
        if self.engine.is_over or self.opponent_timer.active:
            return False
        return not (self.engine.mode == "single" and self.engine.current_turn == COMPUTER_MARK)

    def human_move(self, index: int) -> MoveResult | None:
        if not self.human_can_move():
            return None
        result = self.engine.apply_move(index)
        self._after_move(result)
        return result

    def restart(self) -> None:
        self.stop()
        self.engine.reset_session()
        self._log("session_reset", {"mode": self.engine.mode, "generation": self.engine.generation})

    def stop(self) -> None:
        self.opponent_timer.cancel()
        self.result_timer.cancel()
        self.show_result = False

    def update(self, dt: float) -> MoveResult | None:
        """Advance timers; return the computer's move if one was played."""
        played = None
        fired = self.opponent_timer.tick(dt)
        if fired is not None:
            played = opponent_take_turn(self.engine, generation=fired)
            if played is not None:
                self._after_move(played)
        if self.result_timer.tick(dt) == self.engine.generation:
            self.show_result = True
        return played

    def _after_move(self, result: MoveResult) -> None:
        if not result.accepted:
            return
        generation = self.engine.generation
        if self.telemetry is not None:
            self.telemetry.log_events(result.events, generation)
        if result.status != "playing":
            self._log("game_ended", {**result_to_dict(result), "generation": generation})
            self.result_timer.schedule(self.settings.result_delay(result.status == "won"), generation)
            return
        if self.engine.mode == "single" and self.engine.current_turn == COMPUTER_MARK:
            self.opponent_timer.schedule(self.settings.opponent_delay, generation)

    def _log(self, event_type: str, payload: dict[str, object]) -> None:
        if self.telemetry is not None:
            self.telemetry.log(event_type, payload)
