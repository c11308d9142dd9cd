"""Dict views over mappings and sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from roviews.base import Dict
from roviews.lists import _mapping_or_empty, _sequence_or_empty


@dataclass(frozen=True)
class DictOfMap(Dict):
    """A Dict view of a mapping."""

    mapping: Optional[Mapping] = None

    def __len__(self) -> int:
        return len(_mapping_or_empty(self.mapping))

    def values(self) -> Iterator:
        return iter(_mapping_or_empty(self.mapping).values())

    def keys(self) -> Iterator:
        return iter(_mapping_or_empty(self.mapping).keys())

    def get(self, key, default=None):
        return _mapping_or_empty(self.mapping).get(key, default)

    def has(self, key) -> bool:
        return key in _mapping_or_empty(self.mapping)

    def items(self) -> Iterator[Tuple]:
        return iter(_mapping_or_empty(self.mapping).items())


@dataclass(frozen=True)
class DictOfSlice(Dict):
    """A Dict view of a sequence, keyed by index."""

    sequence: Optional[Sequence] = None

    def __len__(self) -> int:
        return len(_sequence_or_empty(self.sequence))

    def values(self) -> Iterator:
        return iter(_sequence_or_empty(self.sequence))

    def keys(self) -> Iterator[int]:
        return iter(range(len(self)))

    def get(self, key, default=None):
        return _sequence_or_empty(self.sequence)[key] if self.has(key) else default

    def has(self, key) -> bool:
        """Return True if ``key`` is a valid non-negative index."""
        return isinstance(key, int) and 0 <= key < len(self)

    def items(self) -> Iterator[Tuple[int, object]]:
        return enumerate(self.values())