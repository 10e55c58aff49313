from __future__ import annotations

from typing import TYPE_CHECKING

from ...domain.entities.outcome import Found
from ..logging.null_logger import NullLogger
from .cache_table import CacheTable

if TYPE_CHECKING:
    from ...application.ports.repositories import LookupServicePort
    from ...application.ports.services import LoggerPort
    from ...domain.entities.item import Item


class LookupCache:
    """Memoize successful reads from a lookup service.

    Only hits are stored. An identifier the service does not know is looked
    up again on every call, so an item that appears later is still found.
    """

    def __init__(
        self, service: LookupServicePort, logger: LoggerPort | None = None
    ) -> None:
        super().__init__()
        self._service = service
        self._table: CacheTable[Item] = CacheTable()
        self.logger = logger or NullLogger()

    def get(self, item_id: str) -> Item | None:
        if self._table.has(item_id):
            self.logger.log_cache_hit(item_id)
            return self._table.get(item_id)
        outcome = self._service.try_read(item_id)
        if isinstance(outcome, Found):
            self._table.set(item_id, outcome.value)
            self.logger.log_cache_miss(item_id, found=True)
            return outcome.value
        self.logger.log_cache_miss(item_id, found=False)
        return None

    def is_cached(self, item_id: str) -> bool:
        return self._table.has(item_id)

    def size(self) -> int:
        return self._table.size()

    def cached_ids(self) -> list[str]:
        return self._table.keys()
