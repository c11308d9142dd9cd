"""Bag views over mapping keys, mapping values and sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence

from roviews.base import Bag
from roviews.lists import _mapping_or_empty, _sequence_or_empty


@dataclass(frozen=True)
class BagOfMapKeys(Bag):
    """A Bag (and List) of a mapping's keys."""

    mapping: Optional[Mapping] = None

    def __len__(self) -> int:
        return len(_mapping_or_empty(self.mapping))

    def values(self) -> Iterator:
        return iter(_mapping_or_empty(self.mapping).keys())

    def has(self, value) -> bool:
        """Check for a key; O(1) for hash-based mappings."""
        return value in _mapping_or_empty(self.mapping)


ListOfMapKeys = BagOfMapKeys


@dataclass(frozen=True)
class BagOfMapValues(Bag):
    """A Bag (and List) of a mapping's values."""

    mapping: Optional[Mapping] = None

    def __len__(self) -> int:
        return len(_mapping_or_empty(self.mapping))

    def values(self) -> Iterator:
        return iter(_mapping_or_empty(self.mapping).values())

    def has(self, value) -> bool:
        """Check for a value by linear scan."""
        return any(v == value for v in self.values())


@dataclass(frozen=True)
class BagOfSlice(Bag):
    """A Bag of a sequence's elements."""

    sequence: Optional[Sequence] = None

    def __len__(self) -> int:
        return len(_sequence_or_empty(self.sequence))

    def values(self) -> Iterator:
        return iter(_sequence_or_empty(self.sequence))

    def has(self, value) -> bool:
        """Check for a value by linear scan."""
        return value in _sequence_or_empty(self.sequence)