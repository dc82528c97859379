from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from core.constants import BurstKind, ProcessOutcome


@dataclass(frozen=True)
class Burst:
    kind: BurstKind
    length: float

    def __repr__(self):
        return f"Burst({self.kind.value} {self.length})"


def _merge_bursts(bursts: Iterable[Burst]) -> List[Burst]:
    merged: List[Burst] = []
    for b in bursts:
        if b.length <= 0:
            raise ValueError(f"burst length must be positive, got {b!r}")
        if merged and merged[-1].kind == b.kind:
            merged[-1] = Burst(b.kind, merged[-1].length + b.length)
        else:
            merged.append(b)
    return merged


class Process:
    """A synthetic process: an interleaved list of CPU and blocking bursts.

    The queues only talk to a process through ``execute`` and
    ``execute_blocking``; both consume at most the granted time and report
    what was used. A CPU burst that ends inside a grant uses its remaining
    time and then reports ``NEEDS_BLOCK`` when a blocking burst follows.
    """

    _pid_counter = 1

    def __init__(self, name: str, bursts: Iterable[Burst]):
        self.pid = Process._pid_counter
        Process._pid_counter += 1
        self.name = name
        self.bursts = _merge_bursts(bursts)
        self.pc = 0
        self.time_left = self.bursts[0].length if self.bursts else 0
        self.state = 'NEW'
        self.priority_level: Optional[int] = None
        self.cpu_time_executed = 0
        self.blocking_time_executed = 0

    @classmethod
    def cpu_bound(cls, name: str, cpu_time: float) -> 'Process':
        return cls(name, [Burst(BurstKind.CPU, cpu_time)])

    def current_burst(self) -> Optional[Burst]:
        if self.pc < len(self.bursts):
            return self.bursts[self.pc]
        return None

    def _advance(self) -> None:
        self.pc += 1
        burst = self.current_burst()
        self.time_left = burst.length if burst else 0

    def is_finished(self) -> bool:
        return self.pc >= len(self.bursts)

    def needs_blocking(self) -> bool:
        burst = self.current_burst()
        return burst is not None and burst.kind == BurstKind.BLOCK

    def cpu_time_needed(self) -> float:
        burst = self.current_burst()
        if burst is None or burst.kind != BurstKind.CPU:
            return 0
        return self.time_left

    def blocking_time_needed(self) -> float:
        return self.time_left if self.needs_blocking() else 0

    def execute(self, up_to: float) -> Tuple[float, ProcessOutcome]:
        if self.is_finished():
            return 0, ProcessOutcome.DONE
        if self.needs_blocking():
            return 0, ProcessOutcome.NEEDS_BLOCK

        consumed = min(max(0, up_to), self.time_left)
        self.time_left -= consumed
        self.cpu_time_executed += consumed
        if self.time_left > 0:
            return consumed, ProcessOutcome.NEEDS_CPU

        self._advance()
        if self.is_finished():
            return consumed, ProcessOutcome.DONE
        return consumed, ProcessOutcome.NEEDS_BLOCK

    def execute_blocking(self, up_to: float) -> Tuple[float, bool]:
        if not self.needs_blocking():
            return 0, True

        consumed = min(max(0, up_to), self.time_left)
        self.time_left -= consumed
        self.blocking_time_executed += consumed
        if self.time_left > 0:
            return consumed, False
        self._advance()
        return consumed, True

    def __repr__(self) -> str:
        return f"Process(pid={self.pid}, name={self.name}, state={self.state}, level={self.priority_level}, pc={self.pc}, left={self.time_left})"
