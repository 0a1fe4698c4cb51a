"""Tick-driven software timer that counts elapsed intervals."""

from __future__ import annotations

from dataclasses import dataclass, field

_TICK_MASK = 0xFFFFFFFF


@dataclass
class Timer:
    """Counts how many whole intervals have passed between processed ticks.

    Ticks are 32-bit unsigned counters, so the elapsed time is computed
    modulo 2**32 and survives counter wrap-around.
    """

    interval: int
    last_tick: int = 0
    running: bool = True
    event_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be a positive number of ticks")

    def process(self, current_tick: int) -> None:
        """Add the intervals elapsed since the last event to ``event_count``."""
        if not self.running:
            return
        elapsed = (current_tick - self.last_tick) & _TICK_MASK
        if elapsed >= self.interval:
            self.event_count += elapsed // self.interval
            self.last_tick = current_tick