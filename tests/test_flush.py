from dataclasses import dataclass

import pytest

from rvperf.flush import (
    FlushCause,
    FlushingCriteria,
    FlushManager,
    determine_inclusive,
)


@dataclass
class FakeInst:
    unique_id: int


@pytest.mark.parametrize(
    "cause, expected",
    [
        (FlushCause.TRAP, True),
        (FlushCause.MISFETCH, True),
        (FlushCause.MISPREDICTION, False),
        (FlushCause.TARGET_MISPREDICTION, False),
        (FlushCause.POST_SYNC, False),
    ],
)
def test_determine_inclusive(cause, expected):
    assert determine_inclusive(cause) is expected


def test_unknown_cause_raises():
    with pytest.raises(ValueError, match="Unknown flush cause"):
        determine_inclusive(FlushCause.UNKNOWN)
    with pytest.raises(ValueError):
        FlushingCriteria(FlushCause.UNKNOWN, FakeInst(1))


def test_inclusive_flush_includes_self():
    crit = FlushingCriteria(FlushCause.TRAP, FakeInst(5))
    assert crit.included_in_flush(FakeInst(5)) is True
    assert crit.included_in_flush(FakeInst(6)) is True
    assert crit.included_in_flush(FakeInst(4)) is False


def test_exclusive_flush_excludes_self():
    crit = FlushingCriteria(FlushCause.MISPREDICTION, FakeInst(5))
    assert crit.included_in_flush(FakeInst(5)) is False
    assert crit.included_in_flush(FakeInst(6)) is True


def test_lower_pipe_flag():
    assert FlushingCriteria(FlushCause.MISFETCH, FakeInst(1)).is_lower_pipe_flush
    assert not FlushingCriteria(FlushCause.TRAP, FakeInst(1)).is_lower_pipe_flush


def test_target_misprediction_is_exclusive_upper_flush():
    crit = FlushingCriteria(FlushCause.TARGET_MISPREDICTION, FakeInst(1))
    assert determine_inclusive(FlushCause.TARGET_MISPREDICTION) is False
    assert not crit.is_lower_pipe_flush
    assert str(FlushCause.TARGET_MISPREDICTION) == "TARGET_MISPREDICTION"


def test_keeps_oldest_request():
    mgr = FlushManager()
    older = FlushingCriteria(FlushCause.MISPREDICTION, FakeInst(3))
    younger = FlushingCriteria(FlushCause.MISPREDICTION, FakeInst(8))
    mgr.receive_flush(older)
    mgr.receive_flush(younger)
    assert mgr.pending is older
    assert mgr.flush_scheduled is True


def test_older_request_replaces_younger():
    mgr = FlushManager()
    younger = FlushingCriteria(FlushCause.TRAP, FakeInst(8))
    older = FlushingCriteria(FlushCause.TRAP, FakeInst(3))
    mgr.receive_flush(younger)
    mgr.receive_flush(older)
    assert mgr.pending is older


def test_forward_routes_by_cause():
    mgr = FlushManager()
    lower, upper = [], []
    mgr.lower_listeners.append(lower.append)
    mgr.upper_listeners.append(upper.append)

    misfetch = FlushingCriteria(FlushCause.MISFETCH, FakeInst(1))
    mgr.receive_flush(misfetch)
    assert mgr.forward_flush() is misfetch
    assert lower == [misfetch] and upper == []
    assert mgr.pending is None

    mispredict = FlushingCriteria(FlushCause.MISPREDICTION, FakeInst(2))
    mgr.receive_flush(mispredict)
    mgr.forward_flush()
    assert upper == [mispredict]
    assert lower == [misfetch]


def test_forward_without_pending_raises():
    with pytest.raises(RuntimeError, match="no flush to forward"):
        FlushManager().forward_flush()