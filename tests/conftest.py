# -*- coding: utf-8 -*-
"""
StringEdit Test Fixtures

Shared fixtures for all tests.
"""

import os
import sys
import tempfile
import threading
from pathlib import Path

# Headless Qt and a throwaway log directory, before any project import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("STRINGEDIT_LOG_DIR", str(Path(tempfile.gettempdir()) / "stringedit-test-logs"))

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from models.entry import Entry, PartitionTag
from models.sync_types import LoadedState, SyncResult
from stringedit_enums import Platform, SyncErrorKind
from stringedit_exceptions import SyncError


# =============================================================================
# FAKE COLLABORATOR
# =============================================================================

class FakeSyncCollaborator:
    """
    In-memory stand-in for the remote strings repository.

    Results are configured per operation. Setting `gate` to a
    threading.Event holds push/change_partition on the worker until the
    test releases it.
    """

    def __init__(self):
        self.load_result = None
        self.push_result = None
        self.partition_results = {}
        self.accept_credentials = True
        self.credentials = None
        self.logged_out = False
        self.gate = None
        self.calls = []

    def load(self):
        self.calls.append(("load",))
        return self.load_result

    def change_partition(self, target):
        self.calls.append(("change_partition", target))
        self._wait()
        if target in self.partition_results:
            return self.partition_results[target]
        return SyncResult.failure(SyncError(SyncErrorKind.NETWORK, f"no data for {target}"))

    def push(self, insertions, edits, message):
        self.calls.append(("push", tuple(insertions), dict(edits), message))
        self._wait()
        return self.push_result

    def store_credentials(self, username, password):
        self.calls.append(("store_credentials", username))
        if self.accept_credentials:
            self.credentials = (username, password)
        return self.accept_credentials

    def logout(self):
        self.calls.append(("logout",))
        self.credentials = None
        self.logged_out = True

    def _wait(self):
        if self.gate is not None:
            self.gate.wait(5)

    def call_names(self):
        return [call[0] for call in self.calls]


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def ios() -> PartitionTag:
    return PartitionTag(Platform.IOS)


@pytest.fixture
def android() -> PartitionTag:
    return PartitionTag(Platform.ANDROID)


@pytest.fixture
def make_entries():
    """Build entries from (key, value) pairs."""
    def _make(pairs, partition=None):
        partition = partition or PartitionTag(Platform.IOS)
        return [Entry(key=k, value=v, partition=partition) for k, v in pairs]
    return _make


@pytest.fixture
def sample_entries(make_entries):
    """Baseline rows used by most session tests."""
    return make_entries([
        ("content_version", "42"),
        ("hello", "Hi"),
        ("old_x", "X"),
        ("goodbye", "Bye"),
    ])


@pytest.fixture
def settings_model(tmp_path):
    """Fresh SettingsModel backed by a temp file."""
    from models.settings_model import SettingsModel
    SettingsModel.reset_instance()
    return SettingsModel(tmp_path / "settings.json")


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def fake_sync() -> FakeSyncCollaborator:
    return FakeSyncCollaborator()


@pytest.fixture
def session(fake_sync, settings_model, sample_entries, ios):
    """EditingSession with the sample baseline loaded."""
    from controllers.editing_session import EditingSession
    s = EditingSession(fake_sync, settings_model)
    s.load_baseline(sample_entries, ios)
    return s


@pytest.fixture
def coordinator(fake_sync, settings_model):
    from controllers.session_coordinator import SessionCoordinator
    return SessionCoordinator(fake_sync, settings_model)


@pytest.fixture
def gate(fake_sync):
    """Hold the fake's push/change_partition until released."""
    event = threading.Event()
    fake_sync.gate = event
    yield event
    event.set()


def loaded(entries, partition=None, message=None) -> SyncResult:
    return SyncResult.success(LoadedState(entries=entries, commit_message=message, partition=partition))


def failed(kind=SyncErrorKind.NETWORK, detail="timed out") -> SyncResult:
    return SyncResult.failure(SyncError(kind, detail))
