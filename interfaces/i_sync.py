# -*- coding: utf-8 -*-
"""
StringEdit Collaborator Interfaces

Protocol definitions for the external collaborators the editing core
depends on. Implementations are injected; nothing here is a global.
"""

from typing import Protocol, Mapping, Sequence, runtime_checkable

from models.entry import Entry, PartitionTag
from models.sync_types import SyncResult


@runtime_checkable
class ISyncCollaborator(Protocol):
    """
    Protocol for the remote strings repository.

    load/change_partition/push may block; the core only calls them from
    worker threads. Failures are returned inside SyncResult, not raised.
    """

    def load(self) -> SyncResult:
        """Fetch the current partition. Credential problems come back as
        NO_CREDENTIALS / BAD_CREDENTIALS errors."""
        ...

    def change_partition(self, target: PartitionTag) -> SyncResult:
        """Switch the remote working copy to `target` and fetch it."""
        ...

    def push(
        self,
        insertions: Sequence[Entry],
        edits: Mapping[str, Entry],
        message: str
    ) -> SyncResult:
        """Commit and push one change set. `edits` is keyed by original key."""
        ...

    def store_credentials(self, username: str, password: str) -> bool:
        """Remember credentials for the next load."""
        ...

    def logout(self) -> None:
        """Forget stored credentials."""
        ...


@runtime_checkable
class IPreferenceStore(Protocol):
    """
    Protocol for persisted user preferences.

    Read once when a session is created; written after every successful
    partition switch.
    """

    last_partition: PartitionTag

    def save(self) -> bool:
        ...
