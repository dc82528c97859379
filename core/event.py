from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from core.constants import SchedulerInterrupt
from core.process import Process

if TYPE_CHECKING:
    from core.queue import Queue


@dataclass
class Slice:
    """One dispatch of a process by a queue.

    ``interrupt`` is ``None`` when the process finished during the slice;
    otherwise (queue, process, interrupt) is the request the scheduler routes.
    """
    queue: 'Queue'
    process: Process
    ran_for: float
    interrupt: Optional[SchedulerInterrupt] = None

    def __repr__(self):
        name = self.interrupt.name if self.interrupt else 'FINISHED'
        return f"Slice({self.queue.name}, pid={self.process.pid}, ran_for={self.ran_for}, {name})"


@dataclass(frozen=True)
class Transition:
    tick: int
    pid: int
    interrupt: Optional[SchedulerInterrupt]
    source: str
    target: Optional[str]
