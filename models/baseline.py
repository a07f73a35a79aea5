# -*- coding: utf-8 -*-
"""
StringEdit Baseline Store

The last known remote snapshot for the active partition.
A Baseline is never mutated element-wise; the session swaps in a new one.
"""

from typing import Iterable, Iterator, Optional, Tuple, FrozenSet

from models.entry import Entry, PartitionTag
from stringedit_logger import get_logger

logger = get_logger("models.baseline")


class Baseline:
    """Immutable ordered collection of entries for one partition."""

    def __init__(self, entries: Iterable[Entry] = (), partition: Optional[PartitionTag] = None):
        self._entries: Tuple[Entry, ...] = tuple(entries)
        self._partition = partition
        self._keys: FrozenSet[str] = frozenset(e.key for e in self._entries)

        if len(self._keys) != len(self._entries):
            logger.warning(
                f"Baseline for {partition} contains duplicate keys "
                f"({len(self._entries)} entries, {len(self._keys)} unique keys)"
            )

    @property
    def partition(self) -> Optional[PartitionTag]:
        return self._partition

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    @property
    def keys(self) -> FrozenSet[str]:
        return self._keys

    def entry_at(self, row: int) -> Optional[Entry]:
        """Get the entry at row, or None if out of bounds."""
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Baseline):
            return NotImplemented
        return self._entries == other._entries and self._partition == other._partition

    def __repr__(self) -> str:
        return f"Baseline({self._partition}, entries={len(self._entries)})"
