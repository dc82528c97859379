"""Tick-time sources for the scheduler.

The scheduler only calls ``now()`` and subtracts consecutive readings, so any
object with that method will do. ``WallClock`` is the real thing; the other
two give repeatable elapsed-time sequences.
"""
import time
from typing import Iterable, Iterator

from core.errors import ClockExhausted


class WallClock:
    """Monotonic wall time in milliseconds."""

    def now(self) -> float:
        return time.monotonic() * 1000


class StepClock:
    def __init__(self, step: float, start: float = 0):
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self.step = step
        self._next = start

    def now(self) -> float:
        reading = self._next
        self._next += self.step
        return reading


class ScriptedClock:
    def __init__(self, readings: Iterable[float]):
        self._readings: Iterator[float] = iter(readings)
        self.last = None

    @classmethod
    def from_deltas(cls, deltas: Iterable[float], start: float = 0) -> 'ScriptedClock':
        readings = [start]
        for d in deltas:
            readings.append(readings[-1] + d)
        return cls(readings)

    def now(self) -> float:
        try:
            self.last = next(self._readings)
        except StopIteration:
            raise ClockExhausted(f"no clock readings left after {self.last}") from None
        return self.last
