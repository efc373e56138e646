import threading

import pytest

from netaccess.bootstrap import BootstrapGate
from netaccess.core.exceptions import StorageError


def test_gate_runs_once(roles, store):
    gate = BootstrapGate()
    assert gate.run(roles) is True
    assert gate.run(roles) is False
    assert gate.done
    assert len(store.fetch_all(roles.table)) == 4


def test_gate_serialises_concurrent_callers(roles):
    calls = []
    original = roles.bootstrap_defaults

    def counting():
        calls.append(1)
        original()

    roles.bootstrap_defaults = counting
    gate = BootstrapGate()
    threads = [threading.Thread(target=gate.run, args=(roles,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1


def test_failed_bootstrap_can_be_retried(roles):
    gate = BootstrapGate()
    original = roles.bootstrap_defaults

    def failing():
        raise StorageError("down")

    roles.bootstrap_defaults = failing
    with pytest.raises(StorageError):
        gate.run(roles)
    assert not gate.done

    roles.bootstrap_defaults = original
    assert gate.run(roles) is True


def test_reset_reopens_gate(roles):
    gate = BootstrapGate()
    gate.run(roles)
    gate.reset()
    assert gate.run(roles) is True
