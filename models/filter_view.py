# -*- coding: utf-8 -*-
"""
StringEdit Filter View

Read-only filtered view over the effective rows of a session.
The underlying data never changes; only what is visible does.

Row ids: the view yields baseline row indices alongside entries. Callers
must edit through those ids, never through positions in the filtered list.
"""

from typing import Callable, Iterable, Iterator, List, Tuple

from core.text_utils import normalize_query, contains_casefold
from models.entry import Entry

RowSource = Callable[[], Iterable[Tuple[int, Entry]]]


class FilterView:
    """
    Case-insensitive substring filter over key or value.

    The view owns nothing: every iteration pulls fresh rows from `source`,
    so it can be iterated any number of times and always reflects the
    current pending edits.
    """

    def __init__(self, source: RowSource, query: str):
        needle = normalize_query(query)
        if needle is None:
            raise ValueError("FilterView needs a non-blank query")
        self._source = source
        self._query = query
        self._needle = needle

    @property
    def query(self) -> str:
        return self._query

    def matches(self, entry: Entry) -> bool:
        return contains_casefold(entry.key, self._needle) or contains_casefold(entry.value, self._needle)

    def __iter__(self) -> Iterator[Tuple[int, Entry]]:
        for row, entry in self._source():
            if self.matches(entry):
                yield row, entry

    def rows(self) -> List[Tuple[int, Entry]]:
        """Materialize the currently visible rows."""
        return list(self)

    def __repr__(self) -> str:
        return f"FilterView(query={self._query!r})"
