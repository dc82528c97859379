import os
import re
import subprocess
import sys
import pytest


def run_case(sysconfig, workload, *extra):
    repo_root = os.path.dirname(os.path.dirname(__file__))
    sysconfig_path = os.path.join(repo_root, sysconfig)
    workload_path = os.path.join(repo_root, workload)
    result = subprocess.run(
        [sys.executable, os.path.join(repo_root, 'mlfqscheduler.py'), sysconfig_path, workload_path, *extra],
        capture_output=True,
        text=True,
        cwd=repo_root,
        check=False,
    )
    return result


def measurements(result):
    assert result.returncode == 0, f"Return code {result.returncode}, stderr: {result.stderr}"
    lines = [ln.strip() for ln in result.stdout.splitlines() if ln.strip()]
    assert lines, 'No output'
    last = lines[-1]
    m = re.match(r"^measurements\s+(\d+)\s+(\d+)$", last)
    assert m, f"Malformed measurements line: {last}\nFull output:\n{result.stdout}"
    return int(m.group(1)), int(m.group(2))


# With a fixed step every tick grants the same budget, so the totals are exact
@pytest.mark.parametrize(
    'sysconfig,workload,step,expected_time,expected_cpu',
    [
        ('examples/sysconfig.txt', 'examples/workload.txt', '10', 50, 70),
        ('examples/sysconfig.txt', 'examples/workload_cpu_bound.txt', '10', 120, 100),
        ('examples/sysconfig.txt', 'examples/workload_cpu_bound.txt', '60', 240, 50),
        ('examples/sysconfig_flat.txt', 'examples/workload.txt', '10', 70, 50),
    ],
)
def test_step_scenarios(sysconfig, workload, step, expected_time, expected_cpu):
    time_ms, cpu = measurements(run_case(sysconfig, workload, '--step', step))
    assert time_ms == expected_time
    assert cpu == expected_cpu


def test_quantum_table_printed():
    result = run_case('examples/sysconfig.txt', 'examples/workload.txt', '--step', '10')
    assert 'level 0 quantum is 10' in result.stdout
    assert 'level 2 quantum is 50' in result.stdout
    assert 'blocking quantum is 50' in result.stdout


def test_tick_limit_fails_run():
    result = run_case('examples/sysconfig.txt', 'examples/workload_cpu_bound.txt', '--step', '1', '--max-ticks', '5')
    assert result.returncode == 1
    assert 'Traceback' not in result.stderr
    assert result.stderr.strip() == 'mlfqscheduler: 1 processes still queued after 5 ticks'


def test_zero_step_is_rejected():
    result = run_case('examples/sysconfig.txt', 'examples/workload.txt', '--step', '0')
    assert result.returncode == 2
    assert 'step must be positive' in result.stderr
    assert 'measurements' not in result.stdout
