"""Abstract read-only collection views."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_MISSING = object()


class List(ABC, Generic[T]):
    """A read-only view of a collection of values.

    Callers should not assume that the order of the values is consistent.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements in the view."""

    @abstractmethod
    def values(self) -> Iterator[T]:
        """Return an iterator over the values in the view."""

    def __iter__(self) -> Iterator[T]:
        return self.values()


class Bag(List[T]):
    """A read-only view of values that supports membership checks."""

    @abstractmethod
    def has(self, value: T) -> bool:
        """Return True if the view contains ``value``."""

    def __contains__(self, value: object) -> bool:
        return self.has(value)  # type: ignore[arg-type]


class Dict(List[V], Generic[K, V]):
    """A read-only view of key-value pairs.

    As a List, a Dict's values (and its iteration) are the mapped values.
    """

    @abstractmethod
    def keys(self) -> Iterator[K]:
        """Return an iterator over the keys in the view."""

    @abstractmethod
    def get(self, key: K, default=None):
        """Return the value for ``key``, or ``default`` if it is absent."""

    @abstractmethod
    def has(self, key: K) -> bool:
        """Return True if the view contains ``key``."""

    @abstractmethod
    def items(self) -> Iterator[Tuple[K, V]]:
        """Return an iterator over ``(key, value)`` pairs."""

    def __getitem__(self, key: K) -> V:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]