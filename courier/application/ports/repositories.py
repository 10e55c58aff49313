from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.item import Item
    from ...domain.entities.outcome import Lookup


@runtime_checkable
class LookupServicePort(Protocol):
    """Fallible read access to items by identifier.

    Implementations report a miss with ``NotFound`` rather than raising, and
    must be deterministic per identifier for caching to be meaningful.
    """

    def try_read(self, item_id: str) -> Lookup[Item]: ...
