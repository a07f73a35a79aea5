# -*- coding: utf-8 -*-
"""
Unit Tests for StringEdit Models

Tests for Entry, Baseline, EditTracker, InsertionQueue, FilterView and the
sync value types.
"""

import pytest

from models.entry import Entry, PartitionTag
from models.baseline import Baseline
from models.edit_tracker import EditTracker
from models.insertion_queue import InsertionQueue
from models.filter_view import FilterView
from models.sync_types import CommitPayload, LoadedState, SwitchDecision, SyncResult
from stringedit_enums import EditOutcome, Platform, SwitchDecisionKind, SyncErrorKind
from stringedit_exceptions import SyncError


class TestPartitionTag:
    """Tests for PartitionTag."""

    def test_accepts_platform_strings(self):
        tag = PartitionTag("android", "fr")
        assert tag.platform is Platform.ANDROID
        assert str(tag) == "android/fr"

    def test_blank_language_is_none(self):
        assert PartitionTag(Platform.IOS, "") == PartitionTag(Platform.IOS)
        assert str(PartitionTag(Platform.IOS)) == "ios"

    def test_dict_round_trip(self):
        tag = PartitionTag(Platform.ANDROID, "de")
        assert PartitionTag.from_dict(tag.to_dict()) == tag


class TestEntry:
    """Tests for the Entry value object."""

    def test_equality_is_field_wise(self, ios, android):
        assert Entry("a", "1", ios) == Entry("a", "1", ios)
        assert Entry("a", "1", ios) != Entry("a", "1", android)
        assert Entry("a", "1", ios) != Entry("a", "2", ios)

    def test_is_immutable(self, ios):
        entry = Entry("a", "1", ios)
        with pytest.raises(AttributeError):
            entry.key = "b"

    def test_with_text_keeps_unspecified_fields(self, ios):
        entry = Entry("a", "1", ios)
        assert entry.with_text(value="2") == Entry("a", "2", ios)
        assert entry.with_text(key="b") == Entry("b", "1", ios)
        assert entry.with_text() == entry


class TestBaseline:
    """Tests for Baseline."""

    def test_lookup(self, sample_entries, ios):
        baseline = Baseline(sample_entries, ios)

        assert len(baseline) == 4
        assert "hello" in baseline
        assert "missing" not in baseline
        assert baseline.entry_at(1).key == "hello"
        assert baseline.entry_at(4) is None
        assert baseline.entry_at(-1) is None

    def test_copies_input(self, sample_entries, ios):
        baseline = Baseline(sample_entries, ios)
        sample_entries.clear()
        assert len(baseline) == 4


class TestEditTracker:
    """Tests for EditTracker."""

    def test_apply_and_revert(self, ios):
        tracker = EditTracker()
        original = Entry("a", "1", ios)

        assert tracker.apply(0, original.with_text(value="2"), original) == EditOutcome.APPLIED
        assert tracker.get(0) == Entry("a", "2", ios)
        assert 0 in tracker

        assert tracker.apply(0, original, original) == EditOutcome.REVERTED
        assert 0 not in tracker
        assert len(tracker) == 0

    def test_revert_without_pending_edit(self, ios):
        tracker = EditTracker()
        original = Entry("a", "1", ios)
        assert tracker.apply(3, original, original) == EditOutcome.REVERTED
        assert not tracker

    def test_effective_falls_back_to_original(self, ios):
        tracker = EditTracker()
        original = Entry("a", "1", ios)
        assert tracker.effective(0, original) is original

    def test_items_in_row_order(self, ios):
        tracker = EditTracker()
        for row in (5, 1, 3):
            original = Entry(f"k{row}", "v", ios)
            tracker.apply(row, original.with_text(value="new"), original)
        assert [row for row, _ in tracker.items()] == [1, 3, 5]


class TestInsertionQueue:
    """Tests for InsertionQueue."""

    def test_newest_first(self, ios):
        queue = InsertionQueue()
        queue.prepend(Entry("b", "x", ios))
        queue.prepend(Entry("c", "y", ios))
        assert [e.key for e in queue] == ["c", "b"]
        assert queue.keys() == {"b", "c"}
        assert "b" in queue

    def test_remove_out_of_range_is_noop(self, ios):
        queue = InsertionQueue()
        queue.prepend(Entry("b", "x", ios))

        assert queue.remove_at(5) is None
        assert queue.remove_at(-1) is None
        assert len(queue) == 1

        assert queue.remove_at(0).key == "b"
        assert not queue


class TestFilterView:
    """Tests for FilterView."""

    def _rows(self, ios):
        return [(0, Entry("greeting", "Hello", ios)), (1, Entry("farewell", "Bye", ios))]

    def test_matches_key_or_value_case_insensitively(self, ios):
        view = FilterView(lambda: self._rows(ios), "HEL")
        assert [row for row, _ in view] == [0]

        view = FilterView(lambda: self._rows(ios), "well")
        assert [row for row, _ in view] == [1]

    def test_is_restartable(self, ios):
        view = FilterView(lambda: self._rows(ios), "e")
        assert view.rows() == view.rows()
        assert len(list(view)) == 2
        assert len(list(view)) == 2

    def test_reflects_source_changes(self, ios):
        rows = self._rows(ios)
        view = FilterView(lambda: rows, "zzz")
        assert view.rows() == []
        rows.append((2, Entry("zzz", "sleep", ios)))
        assert [row for row, _ in view] == [2]

    def test_rejects_blank_query(self, ios):
        with pytest.raises(ValueError):
            FilterView(lambda: self._rows(ios), "   ")


class TestSyncTypes:
    """Tests for the sync value types."""

    def test_sync_result_needs_exactly_one_side(self):
        with pytest.raises(ValueError):
            SyncResult()
        with pytest.raises(ValueError):
            SyncResult(state=LoadedState(entries=()), error=SyncError(SyncErrorKind.OTHER))

    def test_sync_result_helpers(self):
        assert SyncResult.success(LoadedState(entries=[])).ok
        assert not SyncResult.failure(SyncError(SyncErrorKind.NETWORK, "down")).ok

    def test_credential_errors(self):
        assert SyncError(SyncErrorKind.NO_CREDENTIALS).is_credential_error
        assert SyncError(SyncErrorKind.BAD_CREDENTIALS).is_credential_error
        assert not SyncError(SyncErrorKind.NETWORK, "x").is_credential_error
        assert "x" in SyncError(SyncErrorKind.NETWORK, "x").message

    def test_commit_payload_is_read_only(self, ios):
        edits = {"old": Entry("new", "v", ios)}
        payload = CommitPayload(insertions=[Entry("a", "1", ios)], edits=edits, message="m")

        edits["other"] = Entry("o", "v", ios)
        assert dict(payload.edits) == {"old": Entry("new", "v", ios)}
        with pytest.raises(TypeError):
            payload.edits["x"] = Entry("x", "v", ios)
        assert payload.change_count == 2
        assert not payload.is_empty

    def test_switch_decision(self):
        assert not SwitchDecision.immediate().confirm_required
        decision = SwitchDecision.confirm(3)
        assert decision.kind == SwitchDecisionKind.CONFIRM_REQUIRED
        assert decision.pending_count == 3
