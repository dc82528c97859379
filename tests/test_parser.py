import os

import pytest

from core.constants import BurstKind, SchedulerConfig
from simio.parser import parse_sysconfig, parse_workload

REPO_ROOT = os.path.dirname(os.path.dirname(__file__))


def test_reference_sysconfig():
    config = parse_sysconfig(os.path.join(REPO_ROOT, 'examples', 'sysconfig.txt'))
    assert config == SchedulerConfig(priority_levels=3, base_quantum=10, quantum_step=20, blocking_quantum=50)
    assert [config.quantum_for(i) for i in range(3)] == [10, 30, 50]


def test_partial_sysconfig_keeps_defaults(tmp_path):
    path = tmp_path / 'sysconfig.txt'
    path.write_text('# only levels\nprioritylevels 5\n')
    config = parse_sysconfig(str(path))
    assert config.priority_levels == 5
    assert config.blocking_quantum == SchedulerConfig().blocking_quantum


@pytest.mark.parametrize('text', [
    'timequantum 10usec\n',
    'basequantum\n',
    'basequantum tenmsec\n',
    'prioritylevels 0\n',
])
def test_bad_sysconfig(tmp_path, text):
    path = tmp_path / 'sysconfig.txt'
    path.write_text(text)
    with pytest.raises(ValueError):
        parse_sysconfig(str(path))


def test_quantum_for_out_of_range():
    with pytest.raises(ValueError):
        SchedulerConfig(priority_levels=2).quantum_for(2)


def test_workload_file():
    processes = parse_workload(os.path.join(REPO_ROOT, 'examples', 'workload.txt'))
    assert [p.name for p in processes] == ['cruncher', 'editor']
    editor = processes[1]
    assert [(b.kind, b.length) for b in editor.bursts] == [
        (BurstKind.CPU, 5), (BurstKind.BLOCK, 20), (BurstKind.CPU, 5),
    ]


def test_workload_rejects_unknown_burst(tmp_path):
    path = tmp_path / 'workload.txt'
    path.write_text('p\n\tsleep 5msec\n')
    with pytest.raises(ValueError):
        parse_workload(str(path))


def test_workload_rejects_orphan_burst(tmp_path):
    path = tmp_path / 'workload.txt'
    path.write_text('\tcpu 5msec\n')
    with pytest.raises(ValueError):
        parse_workload(str(path))


@pytest.mark.parametrize('text', ['p\n\tcpu\n', 'p\n\tcpu 5msec extra\n'])
def test_workload_rejects_missing_time(tmp_path, text):
    path = tmp_path / 'workload.txt'
    path.write_text(text)
    with pytest.raises(ValueError, match='bad burst line'):
        parse_workload(str(path))
