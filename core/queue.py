import logging
from collections import deque
from typing import Deque, Optional, Tuple

from core.constants import ProcessOutcome, QueueType, SchedulerInterrupt
from core.errors import QueueEmptyError
from core.event import Slice
from core.process import Process

log = logging.getLogger(__name__)


class Queue:
    """FIFO of processes at one priority level, or the blocking queue.

    A queue never holds a reference to the scheduler. Each ``do_*_work`` call
    dispatches the head process once and hands back a ``Slice`` describing
    what happened; the scheduler decides where the process goes next.
    """

    def __init__(self, quantum: float, priority_level: int, queue_type: QueueType):
        if quantum <= 0:
            raise ValueError(f"quantum must be positive, got {quantum}")
        self._quantum = quantum
        self._priority_level = priority_level
        self._queue_type = queue_type
        self._processes: Deque[Process] = deque()

    @property
    def quantum(self) -> float:
        return self._quantum

    @property
    def name(self) -> str:
        if self._queue_type == QueueType.BLOCKING_QUEUE:
            return 'blocking'
        return f"cpu{self._priority_level}"

    def get_queue_type(self) -> QueueType:
        return self._queue_type

    def get_priority_level(self) -> int:
        return self._priority_level

    def is_blocking(self) -> bool:
        return self._queue_type == QueueType.BLOCKING_QUEUE

    def enqueue(self, process: Process) -> None:
        if self.is_blocking():
            process.state = 'BLOCKED'
            process.priority_level = None
        else:
            process.state = 'READY'
            process.priority_level = self._priority_level
        self._processes.append(process)

    def dequeue(self) -> Process:
        if not self._processes:
            raise QueueEmptyError(self.name)
        return self._processes.popleft()

    def is_empty(self) -> bool:
        return not self._processes

    def processes(self) -> Tuple[Process, ...]:
        return tuple(self._processes)

    def __len__(self):
        return len(self._processes)

    def __contains__(self, process):
        return process in self._processes

    def do_cpu_work(self, work_time: float) -> Optional[Slice]:
        if work_time <= 0:
            return None
        p = self.dequeue()
        p.state = 'RUNNING'
        grant = min(self._quantum, work_time)
        ran_for, outcome = p.execute(grant)
        log.debug("  %s: pid=%s ran %s of %s -> %s", self.name, p.pid, ran_for, grant, outcome.name)

        if outcome == ProcessOutcome.DONE:
            p.state = 'EXIT'
            return Slice(self, p, ran_for)
        if outcome == ProcessOutcome.NEEDS_BLOCK:
            return Slice(self, p, ran_for, SchedulerInterrupt.PROCESS_BLOCKED)
        return Slice(self, p, ran_for, SchedulerInterrupt.LOWER_PRIORITY)

    def do_blocking_work(self, work_time: float) -> Optional[Slice]:
        if work_time <= 0:
            return None
        p = self.dequeue()
        grant = min(self._quantum, work_time)
        ran_for, completed = p.execute_blocking(grant)
        log.debug("  %s: pid=%s blocked %s of %s, completed=%s", self.name, p.pid, ran_for, grant, completed)

        if completed:
            return Slice(self, p, ran_for, SchedulerInterrupt.PROCESS_READY)
        return Slice(self, p, ran_for, SchedulerInterrupt.LOWER_PRIORITY)

    def __repr__(self):
        return f"Queue({self.name}, quantum={self._quantum}, queued={len(self._processes)})"
