from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from ..common.optimistic import Tentative
from ..core.enums import DayState
from ..core.exceptions import DuplicateAttendanceError

logger = logging.getLogger(__name__)

R = TypeVar("R")


class DailyCheckInState:
    """Per worker, per site-local day: NOT_CHECKED_IN -> CHECKED_IN, nothing else.

    The state is held as a Tentative overlay on the last value the store
    confirmed, so a submission can be shown as checked-in while the write is
    in flight and rolled back if it fails.
    """

    def __init__(self, has_checked_in: bool):
        initial = DayState.CHECKED_IN if has_checked_in else DayState.NOT_CHECKED_IN
        self._state: Tentative[DayState] = Tentative(initial)

    @property
    def current(self) -> DayState:
        return self._state.value

    @property
    def confirmed(self) -> DayState:
        return self._state.confirmed

    @property
    def is_checked_in(self) -> bool:
        return self.current == DayState.CHECKED_IN

    @property
    def is_pending(self) -> bool:
        return self._state.is_pending

    def submit(self, write: Callable[[], R]) -> Optional[R]:
        """Run the insert and settle the state from its outcome.

        Returns the write's result, or None when the store reported the day
        as already recorded. Any other error rolls back and propagates.
        """
        if self.confirmed == DayState.CHECKED_IN:
            return None

        self._state.propose(DayState.CHECKED_IN)
        try:
            result = write()
        except DuplicateAttendanceError:
            # Lost the race to a concurrent submission; the day is recorded either way.
            logger.info("Concurrent check-in detected; treating as already checked in")
            self._state.resolve(DayState.CHECKED_IN)
            return None
        except Exception:
            self._state.discard()
            raise

        self._state.resolve(DayState.CHECKED_IN)
        return result
