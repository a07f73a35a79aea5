# -*- coding: utf-8 -*-
"""
StringEdit Editing Session

Holds the baseline snapshot of one partition and every local change made
against it:
- Pending edits to baseline rows (reverting to the original text drops them)
- Pending insertions, newest first, with key collision checks
- A non-destructive filter view
- Guarded partition switching
- Commit payload construction and absorption of the push result

The baseline is never modified in place. It is replaced after a
successful load, switch or push.
"""

from typing import Dict, Iterator, List, Optional, Set, Tuple

from PySide6.QtCore import QObject, Signal, Slot, QThreadPool

from stringedit_logger import get_logger
from stringedit_enums import (
    CollisionReason, EditErrorReason, EditOutcome, LoadingState, Platform,
)
from stringedit_exceptions import (
    CollisionError, EditError, SessionBusyError, ValidationError,
)
from locales import tr
from core.sync_task import start_sync_task
from core.text_utils import clean_input, normalize_query
from interfaces.i_sync import ISyncCollaborator, IPreferenceStore
from models.baseline import Baseline
from models.edit_tracker import EditTracker
from models.entry import Entry, PartitionTag
from models.filter_view import FilterView
from models.insertion_queue import InsertionQueue
from models.sync_types import CommitPayload, SwitchDecision, SyncResult
import stringedit_config as config

logger = get_logger("controllers.session")


class EditingSession(QObject):
    """
    Editing session for one partition of the shared strings.

    All mutating calls must come from the thread that owns the session.
    Remote calls run on a worker; while one is in flight every mutating
    call raises SessionBusyError.

    Signals:
        baseline_loaded(Baseline): A new baseline replaced the old one
        pending_changed(): Pending edits or insertions changed
        insertion_accepted(Entry): An insertion was queued; clear input fields
        filter_changed(): The filter was set or cleared
        loading_state_changed(LoadingState): Progress of a remote operation
        status_updated(str): Human-readable status line
        busy_changed(bool): A remote operation started or finished
        commit_finished(SyncResult): A push completed, successfully or not
        partition_switched(PartitionTag): A partition switch completed
        sync_failed(SyncError): A remote operation failed; pending work kept
    """

    baseline_loaded = Signal(object)
    pending_changed = Signal()
    insertion_accepted = Signal(object)
    filter_changed = Signal()
    loading_state_changed = Signal(object)
    status_updated = Signal(str)
    busy_changed = Signal(bool)
    commit_finished = Signal(object)
    partition_switched = Signal(object)
    sync_failed = Signal(object)

    def __init__(
        self,
        sync: ISyncCollaborator,
        preferences: Optional[IPreferenceStore] = None,
        thread_pool: Optional[QThreadPool] = None
    ):
        """
        Initialize the session.

        Args:
            sync: Remote repository collaborator
            preferences: Store remembering the last partition (read here,
                         written after each successful switch)
            thread_pool: Pool for remote calls; defaults to the global pool
        """
        super().__init__()
        self._sync = sync
        self._preferences = preferences
        self._thread_pool = thread_pool

        if preferences is not None:
            partition = preferences.last_partition
        else:
            partition = PartitionTag(Platform(config.DEFAULT_PLATFORM), config.DEFAULT_LANGUAGE)

        self._baseline = Baseline((), partition)
        self._edits = EditTracker()
        self._insertions = InsertionQueue()
        self._filter: Optional[FilterView] = None
        self._last_commit_message: Optional[str] = None

        # Remote call bookkeeping
        self._in_flight: Optional[LoadingState] = None
        self._task_signals = None
        self._switch_target: Optional[PartitionTag] = None
        self._closed = False

        logger.debug(f"EditingSession created for {partition}")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def partition(self) -> PartitionTag:
        return self._baseline.partition

    @property
    def baseline(self) -> Baseline:
        return self._baseline

    @property
    def pending_edits(self) -> Dict[int, Entry]:
        """Copy of the pending edits, row -> replacement entry."""
        return self._edits.snapshot()

    @property
    def pending_insertions(self) -> Tuple[Entry, ...]:
        """Pending insertions, most recent first."""
        return self._insertions.snapshot()

    @property
    def filter_text(self) -> Optional[str]:
        return self._filter.query if self._filter else None

    @property
    def last_commit_message(self) -> Optional[str]:
        return self._last_commit_message

    @property
    def is_busy(self) -> bool:
        return self._in_flight is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    def has_unsaved_changes(self) -> bool:
        return bool(self._edits) or bool(self._insertions)

    def pending_count(self) -> int:
        return len(self._edits) + len(self._insertions)

    # =========================================================================
    # BASELINE
    # =========================================================================

    def load_baseline(
        self,
        entries,
        partition: Optional[PartitionTag] = None,
        commit_message: Optional[str] = None
    ):
        """
        Replace the baseline and drop all pending state and the filter.

        Args:
            entries: Entries of the partition in remote order
            partition: Partition they belong to; defaults to the current one
            commit_message: Remote head commit message, if known
        """
        self._ensure_mutable()
        partition = partition or self.partition

        self._baseline = Baseline(entries, partition)
        self._edits.clear()
        self._insertions.clear()
        had_filter = self._filter is not None
        self._filter = None
        self._last_commit_message = commit_message

        logger.info(f"Baseline loaded: {partition} ({len(self._baseline)} entries)")
        self.baseline_loaded.emit(self._baseline)
        self.pending_changed.emit()
        if had_filter:
            self.filter_changed.emit()

    def effective_entries(self) -> List[Entry]:
        """Baseline with pending edits applied, in baseline order."""
        return [entry for _, entry in self._effective_rows()]

    def _effective_rows(self) -> Iterator[Tuple[int, Entry]]:
        for row, original in enumerate(self._baseline):
            yield row, self._edits.effective(row, original)

    # =========================================================================
    # INSERTIONS
    # =========================================================================

    def insert(self, key: str, value: str) -> Entry:
        """
        Queue a brand-new entry in the current partition.

        Args:
            key: Key text as typed; surrounding whitespace is trimmed
            value: Value text as typed; surrounding whitespace is trimmed

        Returns:
            The queued Entry

        Raises:
            ValidationError: key or value is empty after trimming
            CollisionError: key already in the baseline or already queued
            SessionBusyError: a remote operation is in flight
        """
        self._ensure_mutable()
        key = clean_input(key)
        value = clean_input(value)

        if not key or not value:
            raise ValidationError(tr("insert_empty"), field='key' if not key else 'value')

        if key in self._baseline or key in self._edited_keys():
            raise CollisionError(CollisionReason.ALREADY_IN_BASELINE, key)
        if key in self._insertions:
            raise CollisionError(CollisionReason.ALREADY_QUEUED, key)

        entry = Entry(key=key, value=value, partition=self.partition)
        self._insertions.prepend(entry)
        logger.debug(f"Queued insertion {key!r} ({len(self._insertions)} pending)")

        self.insertion_accepted.emit(entry)
        self.pending_changed.emit()
        return entry

    def remove_insertion(self, index: int):
        """Remove a queued insertion by position. Stale indices are ignored."""
        self._ensure_mutable()
        if self._insertions.remove_at(index) is not None:
            self.pending_changed.emit()

    # =========================================================================
    # EDITS
    # =========================================================================

    def edit(
        self,
        row: int,
        new_key: Optional[str] = None,
        new_value: Optional[str] = None
    ) -> EditOutcome:
        """
        Change the key and/or value of a baseline row.

        The candidate is compared with the ORIGINAL baseline entry at `row`,
        so typing the original text back cancels the pending edit.

        Args:
            row: Baseline row index (not a position in the filtered view)
            new_key: Replacement key, or None to keep the current one
            new_value: Replacement value, or None to keep the current one

        Returns:
            EditOutcome.APPLIED or EditOutcome.REVERTED

        Raises:
            EditError: rejected; `previous_text` holds what to show again
            SessionBusyError: a remote operation is in flight
        """
        self._ensure_mutable()

        original = self._baseline.entry_at(row)
        if original is None:
            raise EditError(EditErrorReason.UNKNOWN_ROW, row)
        current = self._edits.effective(row, original)

        key_text = clean_input(new_key) if new_key is not None else None
        value_text = clean_input(new_value) if new_value is not None else None

        # previous_text is always the text of the rejected field
        if key_text == "":
            raise EditError(EditErrorReason.EMPTY_REJECTED, row, current.key, current.key)
        if value_text == "":
            raise EditError(EditErrorReason.EMPTY_REJECTED, row, current.key, current.value)

        if self._touches_immutable_key(original, current, key_text):
            previous_text = current.key if key_text is not None else current.value
            raise EditError(EditErrorReason.IMMUTABLE_KEY, row, current.key, previous_text)

        if key_text is not None and key_text != current.key and key_text in self._keys_outside_row(row):
            raise EditError(EditErrorReason.DUPLICATE_KEY, row, key_text, current.key)

        candidate = current.with_text(key=key_text, value=value_text)
        outcome = self._edits.apply(row, candidate, original)
        self.pending_changed.emit()
        return outcome

    def _touches_immutable_key(self, original: Entry, current: Entry, key_text: Optional[str]) -> bool:
        if original.key in config.IMMUTABLE_KEYS or current.key in config.IMMUTABLE_KEYS:
            return True
        return key_text is not None and key_text in config.IMMUTABLE_KEYS

    def _edited_keys(self) -> Set[str]:
        return {entry.key for _, entry in self._edits.items()}

    def _keys_outside_row(self, row: int) -> Set[str]:
        """
        Keys a row may not be renamed to: every other row's original and
        edited key, plus queued insertions. Blocking original keys keeps
        every other row able to revert.
        """
        taken = set(self._insertions.keys())
        for other_row, original in enumerate(self._baseline):
            if other_row == row:
                continue
            taken.add(original.key)
            taken.add(self._edits.effective(other_row, original).key)
        return taken

    # =========================================================================
    # FILTERING
    # =========================================================================

    def set_filter(self, text: Optional[str]):
        """
        Show only rows whose key or value contains `text` (case-insensitive).

        None or blank text clears the filter. Pending state is never touched.
        """
        if normalize_query(text) is None:
            self._filter = None
        else:
            self._filter = FilterView(self._effective_rows, text)
        self.filter_changed.emit()

    def filtered_rows(self) -> List[Tuple[int, Entry]]:
        """
        Currently visible rows as (baseline row, effective entry) pairs.

        Recomputed on every call from the current pending edits.
        """
        if self._filter is not None:
            return self._filter.rows()
        return list(self._effective_rows())

    # =========================================================================
    # PARTITION SWITCHING
    # =========================================================================

    def request_partition_switch(self, target: PartitionTag) -> SwitchDecision:
        """
        Ask whether switching to `target` needs the user's confirmation.

        Returns CONFIRM_REQUIRED with the number of pending changes when
        switching would discard unsaved work.
        """
        if self.has_unsaved_changes():
            count = self.pending_count()
            logger.info(f"Switch to {target} needs confirmation ({count} unsaved changes)")
            return SwitchDecision.confirm(count)
        return SwitchDecision.immediate()

    def commit_partition_switch(self, target: PartitionTag):
        """
        Switch to `target`, discarding pending work once the remote succeeds.

        The call is asynchronous: partition_switched or sync_failed follows.
        If the collaborator rejects the switch, the session is left exactly
        as it was.
        """
        self._ensure_mutable()
        self._switch_target = target
        self._begin_remote(LoadingState.SWITCHING, tr("status_switching", partition=str(target)))
        self._task_signals = start_sync_task(
            "change_partition",
            lambda: self._sync.change_partition(target),
            self._on_switch_finished,
            self._thread_pool,
        )

    @Slot(object)
    def _on_switch_finished(self, result: SyncResult):
        target = self._switch_target
        self._switch_target = None
        self._end_remote()
        if self._closed:
            logger.debug("Ignoring partition switch result for closed session")
            return

        if not result.ok:
            self._report_failure(result)
            return

        partition = result.state.partition or target
        self.load_baseline(result.state.entries, partition, result.state.commit_message)

        if self._preferences is not None:
            self._preferences.last_partition = partition
            self._preferences.save()

        self.loading_state_changed.emit(LoadingState.COMPLETE)
        self.status_updated.emit(tr("status_complete"))
        self.partition_switched.emit(partition)

    # =========================================================================
    # COMMIT
    # =========================================================================

    def build_commit_payload(self, message: str) -> CommitPayload:
        """
        Build the change set for the pending work. Pending state is kept.

        Edits are keyed by the key the row has in the baseline.
        """
        edits = {}
        for row, entry in self._edits.items():
            edits[self._baseline.entry_at(row).key] = entry

        return CommitPayload(
            insertions=self._insertions.snapshot(),
            edits=edits,
            message=clean_input(message) or config.DEFAULT_COMMIT_MESSAGE,
        )

    def push(self, message: str = "") -> CommitPayload:
        """
        Push all pending work as one commit.

        The call is asynchronous: commit_finished follows with the SyncResult.

        Returns:
            The payload handed to the collaborator

        Raises:
            ValidationError: nothing is pending
            SessionBusyError: another remote operation is in flight
        """
        self._ensure_mutable()
        payload = self.build_commit_payload(message)
        if payload.is_empty:
            raise ValidationError(tr("commit_nothing_pending"))

        logger.info(
            f"Pushing {len(payload.insertions)} insertions and {len(payload.edits)} edits "
            f"to {self.partition}: {payload.message!r}"
        )
        self._begin_remote(LoadingState.PUSHING, tr("status_pushing"))
        self._task_signals = start_sync_task(
            "push",
            lambda: self._sync.push(payload.insertions, payload.edits, payload.message),
            self._on_push_finished,
            self._thread_pool,
        )
        return payload

    @Slot(object)
    def _on_push_finished(self, result: SyncResult):
        self._end_remote()
        if self._closed:
            logger.debug("Ignoring push result for closed session")
            return
        self.absorb_commit_result(result)

    def absorb_commit_result(self, result: SyncResult):
        """
        Apply the outcome of a push.

        Success: pending state is cleared and the returned entries become the
        new baseline. Failure: pending state is left untouched and the error
        is reported through sync_failed; the session stays editable.
        """
        self._ensure_mutable()
        if result.ok:
            partition = result.state.partition or self.partition
            self.load_baseline(result.state.entries, partition, result.state.commit_message)
            self.loading_state_changed.emit(LoadingState.COMPLETE)
            self.status_updated.emit(tr("status_upload_successful"))
        else:
            self._report_failure(result)
        self.commit_finished.emit(result)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def close(self):
        """Tear the session down. Results of in-flight calls are dropped."""
        if self._closed:
            return
        self._closed = True
        self._filter = None
        logger.debug(f"EditingSession for {self.partition} closed")

    def _ensure_mutable(self):
        if self._closed:
            raise SessionBusyError(tr("session_closed"))
        if self._in_flight is not None:
            raise SessionBusyError(tr("session_busy"), details={'operation': self._in_flight.value})

    def _begin_remote(self, state: LoadingState, status: str):
        self._in_flight = state
        self.busy_changed.emit(True)
        self.loading_state_changed.emit(state)
        self.status_updated.emit(status)

    def _end_remote(self):
        self._in_flight = None
        self.busy_changed.emit(False)

    def _report_failure(self, result: SyncResult):
        error = result.error
        logger.error(f"Remote operation failed, keeping {self.pending_count()} pending changes: {error!r}")
        self.loading_state_changed.emit(LoadingState.ERROR)
        self.status_updated.emit(tr("status_error", detail=error.message))
        self.sync_failed.emit(error)

    def __repr__(self) -> str:
        return f"EditingSession({self.partition}, baseline={len(self._baseline)}, pending={self.pending_count()})"
