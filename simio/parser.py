# Config + workload file parser
import re
from typing import List

from core.constants import BurstKind, SchedulerConfig
from core.process import Burst, Process


_SYSCONFIG_KEYS = {
    'prioritylevels': 'priority_levels',
    'basequantum': 'base_quantum',
    'quantumstep': 'quantum_step',
    'blockingquantum': 'blocking_quantum',
}


def _parse_time(token: str, line: str) -> int:
    try:
        return int(token.rstrip('msec'))
    except ValueError:
        raise ValueError(f"bad time value {token!r} in line: {line}") from None


def parse_sysconfig(path: str) -> SchedulerConfig:
    values = {}
    with open(path, 'r') as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            parts = re.split(r'\s+', line)
            key = _SYSCONFIG_KEYS.get(parts[0])
            if key is None or len(parts) != 2:
                raise ValueError(f"unrecognised sysconfig line: {line}")
            if key == 'priority_levels':
                values[key] = int(parts[1])
            else:
                values[key] = _parse_time(parts[1], line)
    return SchedulerConfig(**values)


def parse_workload(path: str) -> List[Process]:
    processes = []
    current_name = None
    bursts: List[Burst] = []
    with open(path, 'r') as fh:
        for raw in fh:
            line = raw.rstrip('\n')
            if not line.strip() or line.strip().startswith('#'):
                continue
            if not line.startswith('\t') and not line.startswith(' '):
                # process header
                if current_name is not None:
                    processes.append(Process(current_name, bursts))
                current_name = line.strip()
                bursts = []
            else:
                # burst line: \tcpu 5msec  or  \tblock 20msec
                if current_name is None:
                    raise ValueError(f"burst line before any process header: {line.strip()}")
                parts = re.split(r'\s+', line.strip())
                if len(parts) != 2:
                    raise ValueError(f"bad burst line: {line.strip()}")
                try:
                    kind = BurstKind(parts[0])
                except ValueError:
                    raise ValueError(f"unknown burst kind in line: {line.strip()}") from None
                bursts.append(Burst(kind, _parse_time(parts[1], line.strip())))
    if current_name is not None:
        processes.append(Process(current_name, bursts))
    return processes
