# -*- coding: utf-8 -*-
"""
StringEdit Edit Tracker

Pending edits to baseline rows, keyed by row position.

A row is tracked iff its replacement differs from the baseline entry at
that row. Writing the original text back removes the row again.
"""

from typing import Dict, Iterator, Optional, Tuple

from models.entry import Entry
from stringedit_enums import EditOutcome
from stringedit_logger import get_logger

logger = get_logger("models.edit_tracker")


class EditTracker:
    """
    Maps baseline row index -> replacement Entry.

    Rows are positions in the baseline rather than stable identities, so
    the tracker must be cleared whenever the baseline is replaced.
    """

    def __init__(self):
        self._edits: Dict[int, Entry] = {}

    def apply(self, row: int, candidate: Entry, original: Entry) -> EditOutcome:
        """
        Record `candidate` as the new content of `row`.

        Args:
            row: Baseline row index
            candidate: Proposed replacement entry
            original: Baseline entry currently at `row`

        Returns:
            REVERTED if the candidate equals the original (any pending edit is
            dropped), APPLIED otherwise
        """
        if candidate == original:
            if self._edits.pop(row, None) is not None:
                logger.debug(f"[EditTracker] Row {row} reverted to baseline")
            return EditOutcome.REVERTED

        self._edits[row] = candidate
        logger.debug(f"[EditTracker] Row {row} -> {candidate.key!r}")
        return EditOutcome.APPLIED

    def get(self, row: int) -> Optional[Entry]:
        return self._edits.get(row)

    def effective(self, row: int, original: Entry) -> Entry:
        """Entry shown for `row`: the pending replacement, else the original."""
        return self._edits.get(row, original)

    def items(self) -> Iterator[Tuple[int, Entry]]:
        """Pending edits in row order."""
        for row in sorted(self._edits):
            yield row, self._edits[row]

    def snapshot(self) -> Dict[int, Entry]:
        return dict(self._edits)

    def clear(self):
        self._edits.clear()

    def __contains__(self, row: int) -> bool:
        return row in self._edits

    def __len__(self) -> int:
        return len(self._edits)

    def __bool__(self) -> bool:
        return bool(self._edits)
