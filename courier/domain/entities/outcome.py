from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Found[T]:
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


NOT_FOUND = NotFound()

type Lookup[T] = Found[T] | NotFound
