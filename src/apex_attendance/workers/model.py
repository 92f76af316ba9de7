from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import WorkerStatus


@dataclass(frozen=True)
class Worker:
    """Domain entity: a staff member assigned to (at most) one site.

    Note: Plain data object, no database access.
    """

    worker_id: str
    name: str
    site_id: Optional[str]
    status: WorkerStatus = WorkerStatus.PENDING

    @property
    def can_attend(self) -> bool:
        return self.status == WorkerStatus.APPROVED and bool(self.site_id)
