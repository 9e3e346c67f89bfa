"""
Structural-equality set.

Members are compared with ``==`` only, so values that are equal but not
identical (or not hashable, such as other EqualitySets) collapse into a
single member. Every set in the scorekeeping model is built on this.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EqualitySet(Generic[T]):
    """
    An insertion-ordered collection of members that are distinct by equality.

    Invariant: no two members compare equal. Order is kept only so that
    rendered output is stable; it plays no part in set equality.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        """Add ``item`` unless an equal member is already present."""
        if item not in self:
            self._items.append(item)

    def delete(self, item: T) -> None:
        """Remove every member equal to ``item``. Absent items are ignored."""
        self._items = [x for x in self._items if x != item]

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def copy(self) -> EqualitySet[T]:
        return EqualitySet(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> EqualitySet[T]:
        """Return the members satisfying ``predicate``."""
        return EqualitySet(x for x in self._items if predicate(x))

    def union(self, other: Iterable[T]) -> EqualitySet[T]:
        result = self.copy()
        result.update(other)
        return result

    def intersection(self, other: Iterable[T]) -> EqualitySet[T]:
        others = other if isinstance(other, EqualitySet) else EqualitySet(other)
        return self.filter(lambda x: x in others)

    def difference(self, other: Iterable[T]) -> EqualitySet[T]:
        others = other if isinstance(other, EqualitySet) else EqualitySet(other)
        return self.filter(lambda x: x not in others)

    def issubset(self, other: Iterable[T]) -> bool:
        others = other if isinstance(other, EqualitySet) else EqualitySet(other)
        return all(x in others for x in self._items)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return any(x == item for x in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EqualitySet):
            return NotImplemented
        return len(self) == len(other) and self.issubset(other)

    def __or__(self, other: Iterable[T]) -> EqualitySet[T]:
        return self.union(other)

    def __and__(self, other: Iterable[T]) -> EqualitySet[T]:
        return self.intersection(other)

    def __sub__(self, other: Iterable[T]) -> EqualitySet[T]:
        return self.difference(other)

    def __le__(self, other: Iterable[T]) -> bool:
        return self.issubset(other)

    def __repr__(self) -> str:
        return f"EqualitySet({self._items!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(x) for x in self._items) + "}"
