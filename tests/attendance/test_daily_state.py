import pytest

from apex_attendance.attendance.state import DailyCheckInState
from apex_attendance.core.enums import DayState
from apex_attendance.core.exceptions import DuplicateAttendanceError


def test_successful_write_confirms_checked_in():
    state = DailyCheckInState(has_checked_in=False)
    seen = []

    def write():
        seen.append((state.current, state.is_pending))
        return "record"

    assert state.submit(write) == "record"
    assert seen == [(DayState.CHECKED_IN, True)]
    assert state.current == DayState.CHECKED_IN
    assert state.confirmed == DayState.CHECKED_IN
    assert not state.is_pending


def test_duplicate_key_settles_as_checked_in():
    state = DailyCheckInState(has_checked_in=False)

    def write():
        raise DuplicateAttendanceError("dup")

    assert state.submit(write) is None
    assert state.is_checked_in
    assert state.confirmed == DayState.CHECKED_IN


def test_other_failures_roll_back():
    state = DailyCheckInState(has_checked_in=False)

    def write():
        raise RuntimeError("db down")

    with pytest.raises(RuntimeError):
        state.submit(write)
    assert state.current == DayState.NOT_CHECKED_IN
    assert not state.is_pending


def test_checked_in_is_terminal():
    state = DailyCheckInState(has_checked_in=True)
    calls = []
    assert state.submit(lambda: calls.append(1)) is None
    assert calls == []
    assert state.current == DayState.CHECKED_IN
