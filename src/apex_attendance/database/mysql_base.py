from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Iterator, Union

from ..common.datetime_utils import TimeOfDay
from .connection import DatabaseConnection


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator:
    """One connection per repository call; yields a dict cursor.

    Commits when the block exits cleanly, rolls back and re-raises otherwise.
    """
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def mysql_time_of_day(value: Union[time, timedelta]) -> TimeOfDay:
    # mysql-connector hands TIME columns back as timedelta since midnight.
    if isinstance(value, timedelta):
        return TimeOfDay((int(value.total_seconds()) // 60) % (24 * 60))
    return TimeOfDay.from_time(value)
