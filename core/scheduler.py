import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.clock import WallClock
from core.constants import QueueType, SchedulerConfig, SchedulerInterrupt
from core.errors import TickLimitExceeded
from core.event import Slice, Transition
from core.process import Process
from core.queue import Queue

log = logging.getLogger(__name__)


@dataclass
class Measurements:
    total_time: float
    cpu_busy_time: float
    ticks: int
    finished: List[Process] = field(default_factory=list)

    @property
    def cpu_utilisation(self) -> int:
        if self.total_time <= 0:
            return 0
        return int(self.cpu_busy_time * 100 / self.total_time)


class Scheduler:
    """Multilevel feedback queue scheduler.

    Holds one blocking queue and ``config.priority_levels`` CPU queues, level 0
    being the highest priority. Each tick services the blocking queue (when it
    has work) and then only the first non-empty CPU queue.
    """

    def __init__(self, config: Optional[SchedulerConfig] = None, clock=None):
        self.config = config or SchedulerConfig()
        self._clock_source = clock or WallClock()
        self.clock = self._clock_source.now()
        self.started_at = self.clock

        self.blocking_queue = Queue(self.config.blocking_quantum, 0, QueueType.BLOCKING_QUEUE)
        self.running_queues: List[Queue] = [
            Queue(self.config.quantum_for(level), level, QueueType.CPU_QUEUE)
            for level in range(self.config.priority_levels)
        ]

        # stats
        self.ticks = 0
        self.cpu_busy_time = 0
        self.finished: List[Process] = []
        self.history: List[Transition] = []

    def add_new_process(self, process: Process) -> None:
        self.running_queues[0].enqueue(process)
        self.history.append(Transition(self.ticks, process.pid, None, 'new', self.running_queues[0].name))
        log.debug("[t=%s] pid=%s (%s) -> %s", self.clock, process.pid, process.name, self.running_queues[0].name)

    def all_empty(self) -> bool:
        return self.blocking_queue.is_empty() and all(q.is_empty() for q in self.running_queues)

    def queued(self) -> int:
        return len(self.blocking_queue) + sum(len(q) for q in self.running_queues)

    def get_cpu_queue(self, priority_level: int) -> Queue:
        return self.running_queues[priority_level]

    def get_blocking_queue(self) -> Queue:
        return self.blocking_queue

    def tick(self) -> float:
        now = self._clock_source.now()
        work_time = now - self.clock
        self.clock = now
        self.ticks += 1

        if not self.blocking_queue.is_empty():
            self._account(self.blocking_queue.do_blocking_work(work_time))

        for queue in self.running_queues:
            if not queue.is_empty():
                self._account(queue.do_cpu_work(work_time))
                break
        return work_time

    def run(self, max_ticks: Optional[int] = None) -> Measurements:
        while not self.all_empty():
            if max_ticks is not None and self.ticks >= max_ticks:
                raise TickLimitExceeded(max_ticks, self.queued())
            self.tick()

        log.info("No processes in queue")
        return Measurements(
            total_time=self.clock - self.started_at,
            cpu_busy_time=self.cpu_busy_time,
            ticks=self.ticks,
            finished=list(self.finished),
        )

    def _account(self, work: Optional[Slice]) -> None:
        if work is None:
            return
        if work.queue.get_queue_type() == QueueType.CPU_QUEUE:
            self.cpu_busy_time += work.ran_for

        if work.interrupt is None:
            self.finished.append(work.process)
            self.history.append(Transition(self.ticks, work.process.pid, None, work.queue.name, None))
            log.debug("[t=%s] pid=%s finished", self.clock, work.process.pid)
            return

        target = self.handle_interrupt(work.queue, work.process, work.interrupt)
        self.history.append(Transition(
            self.ticks, work.process.pid, work.interrupt, work.queue.name, target.name if target else None,
        ))
        log.debug("[t=%s] %s pid=%s %s -> %s", self.clock, work.interrupt.name, work.process.pid,
                  work.queue.name, target.name if target else None)

    def handle_interrupt(self, queue: Queue, process: Process, interrupt) -> Optional[Queue]:
        if interrupt == SchedulerInterrupt.PROCESS_BLOCKED:
            target = self.blocking_queue
        elif interrupt == SchedulerInterrupt.PROCESS_READY:
            target = self.running_queues[0]
        elif interrupt == SchedulerInterrupt.LOWER_PRIORITY:
            if queue.get_queue_type() == QueueType.CPU_QUEUE:
                level = min(self.config.max_level, queue.get_priority_level() + 1)
                target = self.running_queues[level]
            else:
                target = self.blocking_queue
        else:
            log.warning("ignoring unknown interrupt %r for pid=%s", interrupt, process.pid)
            return None
        target.enqueue(process)
        return target
