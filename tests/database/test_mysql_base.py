from datetime import time, timedelta

import pytest

from apex_attendance.common.datetime_utils import TimeOfDay
from apex_attendance.database.mysql_base import mysql_time_of_day, transaction


class _Cursor:
    closed = False

    def close(self):
        self.closed = True


class _Conn:
    def __init__(self):
        self.cur = _Cursor()
        self.events = []

    def cursor(self, dictionary=False):
        self.events.append(("cursor", dictionary))
        return self.cur

    def commit(self):
        self.events.append("commit")

    def rollback(self):
        self.events.append("rollback")

    def close(self):
        self.events.append("close")


class _Factory:
    def __init__(self):
        self.conn = _Conn()

    def connect(self):
        return self.conn


def test_mysql_time_of_day_from_timedelta_and_time():
    assert mysql_time_of_day(timedelta(hours=9, minutes=30, seconds=15)) == TimeOfDay.parse("09:30")
    assert mysql_time_of_day(time(18, 0)) == TimeOfDay.parse("18:00")


def test_transaction_commits_on_success():
    factory = _Factory()
    with transaction(factory) as cur:
        assert cur is factory.conn.cur
    assert factory.conn.events == [("cursor", True), "commit", "close"]
    assert factory.conn.cur.closed


def test_transaction_rolls_back_and_reraises():
    factory = _Factory()
    with pytest.raises(RuntimeError):
        with transaction(factory):
            raise RuntimeError("boom")
    assert factory.conn.events == [("cursor", True), "rollback", "close"]
