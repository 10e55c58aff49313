class CacheTable[T]:
    """Grow-only in-memory table.

    Entries are never evicted or expired; the table lives exactly as long as
    its owner.
    """

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, T] = {}

    def get(self, key: str) -> T | None:
        return self._store.get(key)

    def set(self, key: str, value: T) -> None:
        self._store[key] = value

    def has(self, key: str) -> bool:
        return key in self._store

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[str]:
        return list(self._store.keys())
