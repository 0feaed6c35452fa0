from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Countdown(Generic[T]):
    """A one-shot, cancellable timer driven by frame deltas.

    Kept free of pygame so scenes can schedule delayed work (the opponent's
    move, the result overlay) and tests can drive it with plain floats.
    """

    remaining: float = 0.0
    token: T | None = None
    active: bool = False

    def schedule(self, delay: float, token: T) -> None:
        self.remaining = max(0.0, delay)
        self.token = token
        self.active = True

    def cancel(self) -> None:
        self.active = False
        self.token = None
        self.remaining = 0.0

    def tick(self, dt: float) -> T | None:
        """Advance by `dt` seconds; return the token once, when the timer fires."""
        if not self.active:
            return None
        self.remaining -= dt
        if self.remaining > 0:
            return None
        token = self.token
        self.cancel()
        return token
