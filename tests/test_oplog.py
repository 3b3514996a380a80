import pytest

from lemkit.oplog import OperationLog


def test_new_log_is_empty():
    log = OperationLog()
    assert len(log) == 0
    assert list(log) == []


def test_append_keeps_order():
    log = OperationLog()
    for line in ["3", "start 1 1", "end 2 2"]:
        log.append(line)
    assert list(log) == ["3", "start 1 1", "end 2 2"]
    assert len(log) == 3


def test_remove_last_returns_newest():
    log = OperationLog()
    log.append("a")
    log.append("b")
    assert log.remove_last() == "b"
    assert list(log) == ["a"]


def test_remove_from_empty_raises():
    with pytest.raises(IndexError):
        OperationLog().remove_last()


def test_clear():
    log = OperationLog()
    log.append("a")
    log.append("b")
    log.clear()
    assert len(log) == 0
    with pytest.raises(IndexError):
        log.remove_last()


def test_append_after_remove():
    log = OperationLog()
    log.append("a")
    log.remove_last()
    log.append("c")
    assert list(log) == ["c"]


def test_iteration_snapshot_is_stable():
    log = OperationLog()
    log.append("a")
    lines = iter(log)
    log.append("b")
    assert list(lines) == ["a"]