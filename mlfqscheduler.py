"""
mlfqscheduler.py


Multilevel feedback queue scheduler simulation.


A set of synthetic processes, each an interleaving of CPU and blocking
bursts, is dispatched over a number of priority-ranked CPU queues and one
blocking queue. New processes and processes coming back from blocking start
at priority level 0; a process that uses up its time slice drops one level.
Elapsed wall time between loop iterations is the work budget of a tick,
unless --step asks for a fixed synthetic step.


Usage:
python mlfqscheduler.py sysconfig.txt workload.txt
"""


import argparse
import logging

from core.clock import StepClock, WallClock
from core.errors import TickLimitExceeded
from core.scheduler import Scheduler
from simio.parser import parse_sysconfig, parse_workload


def main(argv=None):
    parser = argparse.ArgumentParser(description='mlfqscheduler (multilevel feedback queue simulator)')
    parser.add_argument('sysconfig', help='Path to sysconfig file')
    parser.add_argument('workload', help='Path to workload file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging of dispatch events')
    parser.add_argument('--step', type=int, default=None, help='Use a synthetic clock advancing by STEP per tick')
    parser.add_argument('--max-ticks', type=int, default=None, help='Give up after this many ticks')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    config = parse_sysconfig(args.sysconfig)
    processes = parse_workload(args.workload)
    print(f"found {len(processes)} processes")
    for level in range(config.priority_levels):
        print(f"level {level} quantum is {config.quantum_for(level)}")
    print(f"blocking quantum is {config.blocking_quantum}")

    try:
        clock = StepClock(args.step) if args.step is not None else WallClock()
    except ValueError as exc:
        parser.error(str(exc))
    s = Scheduler(config, clock=clock)
    for p in processes:
        s.add_new_process(p)
    try:
        m = s.run(max_ticks=args.max_ticks)
    except TickLimitExceeded as exc:
        parser.exit(1, f"mlfqscheduler: {exc}\n")
    print(f"measurements {int(m.total_time)} {m.cpu_utilisation}")
    return 0


# ------------------------------- CLI ---------------------------------
if __name__ == '__main__':
    raise SystemExit(main())
