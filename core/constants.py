from enum import Enum, auto
from dataclasses import dataclass


# ----------------------------- Constants -----------------------------
PRIORITY_LEVELS = 3
BASE_QUANTUM = 10      # quantum of priority level 0 (milliseconds)
QUANTUM_STEP = 20      # added per lower priority level
BLOCKING_QUANTUM = 50


class QueueType(Enum):
    CPU_QUEUE = auto()
    BLOCKING_QUEUE = auto()


class SchedulerInterrupt(Enum):
    PROCESS_BLOCKED = auto()
    PROCESS_READY = auto()
    LOWER_PRIORITY = auto()


class ProcessOutcome(Enum):
    DONE = auto()
    NEEDS_BLOCK = auto()
    NEEDS_CPU = auto()


class BurstKind(Enum):
    CPU = 'cpu'
    BLOCK = 'block'


@dataclass(frozen=True)
class SchedulerConfig:
    priority_levels: int = PRIORITY_LEVELS
    base_quantum: float = BASE_QUANTUM
    quantum_step: float = QUANTUM_STEP
    blocking_quantum: float = BLOCKING_QUANTUM

    def __post_init__(self):
        if self.priority_levels < 1:
            raise ValueError(f"priority_levels must be at least 1, got {self.priority_levels}")
        if self.base_quantum <= 0:
            raise ValueError(f"base_quantum must be positive, got {self.base_quantum}")
        if self.quantum_step < 0:
            raise ValueError(f"quantum_step must not be negative, got {self.quantum_step}")
        if self.blocking_quantum <= 0:
            raise ValueError(f"blocking_quantum must be positive, got {self.blocking_quantum}")

    @property
    def max_level(self) -> int:
        return self.priority_levels - 1

    def quantum_for(self, level: int) -> float:
        if not 0 <= level < self.priority_levels:
            raise ValueError(f"priority level {level} out of range 0..{self.max_level}")
        return self.base_quantum + level * self.quantum_step
