class SchedulerError(Exception):
    """Base class for errors raised by the scheduling core."""


class QueueEmptyError(SchedulerError, IndexError):
    def __init__(self, queue_name: str):
        super().__init__(f"dequeue from empty {queue_name}")
        self.queue_name = queue_name


class TickLimitExceeded(SchedulerError):
    """The run loop went past its tick budget with work still queued."""

    def __init__(self, max_ticks: int, remaining: int):
        super().__init__(f"{remaining} processes still queued after {max_ticks} ticks")
        self.max_ticks = max_ticks
        self.remaining = remaining


class ClockExhausted(SchedulerError):
    pass
