from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()


@dataclass
class Tentative(Generic[T]):
    """A confirmed server value with an optional pending local overlay.

    ``propose`` records what we expect the server to return; ``resolve``
    replaces both with what it actually returned; ``discard`` drops the
    overlay after a failed write. ``value`` always reads the overlay first.
    """

    confirmed: T
    _pending: object = _UNSET

    @property
    def value(self) -> T:
        if self._pending is _UNSET:
            return self.confirmed
        return self._pending  # type: ignore[return-value]

    @property
    def is_pending(self) -> bool:
        return self._pending is not _UNSET

    def propose(self, value: T) -> None:
        self._pending = value

    def resolve(self, server_value: T) -> None:
        self.confirmed = server_value
        self._pending = _UNSET

    def discard(self) -> Optional[T]:
        if self._pending is _UNSET:
            return None
        dropped = self._pending
        self._pending = _UNSET
        return dropped  # type: ignore[return-value]
