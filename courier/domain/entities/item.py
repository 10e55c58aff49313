from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Item:
    """A value served by a lookup service.

    Equality is identity: a cached item compares equal only to itself.
    """

    item_id: str
    payload: object | None = None
