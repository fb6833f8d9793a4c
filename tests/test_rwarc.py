import gc
import threading

import pytest

from asaogea.rwarc import (
    LockPoisonedError,
    RwArc,
    RwArcReadOnly,
    RwSLock,
    RwWeak,
    RwWeakReadOnly,
)


def test_lock_read_and_write():
    lock = RwSLock([1])
    with lock.write() as guard:
        guard.value.append(2)
    with lock.read() as guard:
        assert guard.value == [1, 2]


def test_write_guard_replaces_value():
    lock = RwSLock("old")
    with lock.write() as guard:
        guard.value = "new"
    with lock.read() as guard:
        assert guard.value == "new"


def test_guard_value_outside_block_raises():
    lock = RwSLock(1)
    guard = lock.read()
    with pytest.raises(RuntimeError):
        guard.value
    with guard as entered:
        assert entered.value == 1


def test_nested_reads_allowed():
    lock = RwSLock("shared")
    with lock.read() as a, lock.read() as b:
        assert a.value == b.value == "shared"


def test_exception_in_write_poisons():
    lock = RwSLock(0)
    with pytest.raises(ValueError):
        with lock.write():
            raise ValueError("fail")
    with pytest.raises(LockPoisonedError):
        with lock.read():
            pass
    with pytest.raises(LockPoisonedError):
        with lock.write():
            pass


def test_exception_in_read_does_not_poison():
    lock = RwSLock(5)
    with pytest.raises(KeyError):
        with lock.read():
            raise KeyError("k")
    with lock.read() as guard:
        assert guard.value == 5


def test_concurrent_writers_are_exclusive():
    arc = RwArc({"n": 0})
    rounds = 200

    def work():
        for _ in range(rounds):
            with arc.write() as guard:
                current = guard.value["n"]
                guard.value["n"] = current + 1

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    with arc.read() as guard:
        assert guard.value["n"] == rounds * 4


def test_downgrade_upgrade_shares_data():
    arc = RwArc([])
    weak = arc.downgrade()
    other = weak.upgrade()
    assert other == arc
    with other.write() as guard:
        guard.value.append("x")
    with arc.read() as guard:
        assert guard.value == ["x"]


def test_read_only_upgrade():
    arc = RwArc("data")
    ro = arc.downgrade_read_only().upgrade()
    assert isinstance(ro, RwArcReadOnly)
    assert not hasattr(ro, "write")
    with ro.read() as guard:
        assert guard.value == "data"
    assert ro == arc


def test_upgrade_after_drop_raises():
    arc = RwArc(1)
    weak = arc.downgrade()
    weak_ro = arc.downgrade_read_only()
    del arc
    gc.collect()
    with pytest.raises(ReferenceError):
        weak.upgrade()
    with pytest.raises(ReferenceError):
        weak_ro.upgrade()


def test_default_weak_cannot_upgrade():
    with pytest.raises(ReferenceError):
        RwWeak().upgrade()
    with pytest.raises(ReferenceError):
        RwWeakReadOnly().upgrade()


def test_distinct_arcs_not_equal():
    assert (RwArc(1) == RwArc(1)) is False