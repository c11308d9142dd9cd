"""List views over mapping values and sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence

from roviews.base import List


def _mapping_or_empty(mapping: Optional[Mapping]) -> Mapping:
    return mapping if mapping is not None else {}


def _sequence_or_empty(sequence: Optional[Sequence]) -> Sequence:
    return sequence if sequence is not None else ()


@dataclass(frozen=True)
class ListOfMapValues(List):
    """A List of a mapping's values; values need not be comparable."""

    mapping: Optional[Mapping] = None

    def __len__(self) -> int:
        return len(_mapping_or_empty(self.mapping))

    def values(self) -> Iterator:
        return iter(_mapping_or_empty(self.mapping).values())


@dataclass(frozen=True)
class ListOfSlice(List):
    """A List of a sequence's elements."""

    sequence: Optional[Sequence] = None

    def __len__(self) -> int:
        return len(_sequence_or_empty(self.sequence))

    def values(self) -> Iterator:
        return iter(_sequence_or_empty(self.sequence))