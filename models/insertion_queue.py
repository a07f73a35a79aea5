# -*- coding: utf-8 -*-
"""
StringEdit Insertion Queue

Brand-new entries waiting for the next push, newest first.
"""

from typing import Iterator, List, Optional, Set, Tuple

from models.entry import Entry
from stringedit_logger import get_logger

logger = get_logger("models.insertion_queue")


class InsertionQueue:
    """Ordered collection of pending insertions. Index 0 is the most recent."""

    def __init__(self):
        self._entries: List[Entry] = []

    def prepend(self, entry: Entry):
        self._entries.insert(0, entry)

    def remove_at(self, index: int) -> Optional[Entry]:
        """
        Remove the entry at `index`.

        Returns the removed entry, or None if the index is stale.
        """
        if 0 <= index < len(self._entries):
            return self._entries.pop(index)
        logger.debug(f"[InsertionQueue] Ignoring removal of index {index} (size {len(self._entries)})")
        return None

    def keys(self) -> Set[str]:
        return {e.key for e in self._entries}

    def snapshot(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def clear(self):
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return any(e.key == key for e in self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
