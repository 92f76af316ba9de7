from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Site


class SiteRepository(Protocol):
    """Repository interface for Site.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, site_id: str) -> Optional[Site]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Site]:
        raise NotImplementedError

    def create(self, site: Site) -> None:
        raise NotImplementedError

    def update(self, site: Site) -> bool:
        raise NotImplementedError
