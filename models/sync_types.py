# -*- coding: utf-8 -*-
"""
StringEdit Sync Value Types

Values exchanged between the editing session and the sync collaborator.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.entry import Entry, PartitionTag
from stringedit_enums import SwitchDecisionKind
from stringedit_exceptions import SyncError


@dataclass(frozen=True)
class LoadedState:
    """
    Remote snapshot returned by a successful load, push or partition change.

    Attributes:
        entries: Entries of the loaded partition, in remote order.
        commit_message: Message of the remote head commit, if known.
        partition: Partition the entries belong to; None means
                   "the one that was asked for".
    """
    entries: Tuple[Entry, ...]
    commit_message: Optional[str] = None
    partition: Optional[PartitionTag] = None

    def __post_init__(self):
        object.__setattr__(self, 'entries', tuple(self.entries))


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one sync collaborator call. Exactly one of state/error is set."""
    state: Optional[LoadedState] = None
    error: Optional[SyncError] = None

    def __post_init__(self):
        if (self.state is None) == (self.error is None):
            raise ValueError("SyncResult needs exactly one of state or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, state: LoadedState) -> 'SyncResult':
        return cls(state=state)

    @classmethod
    def failure(cls, error: SyncError) -> 'SyncResult':
        return cls(error=error)


@dataclass(frozen=True)
class CommitPayload:
    """
    Minimal change set handed to the sync collaborator on push.

    `edits` maps the key a row had in the baseline to its replacement entry.
    """
    insertions: Tuple[Entry, ...]
    edits: Mapping[str, Entry]
    message: str

    def __post_init__(self):
        object.__setattr__(self, 'insertions', tuple(self.insertions))
        object.__setattr__(self, 'edits', MappingProxyType(dict(self.edits)))

    @property
    def change_count(self) -> int:
        return len(self.insertions) + len(self.edits)

    @property
    def is_empty(self) -> bool:
        return self.change_count == 0


@dataclass(frozen=True)
class SwitchDecision:
    """Answer to a partition switch request."""
    kind: SwitchDecisionKind
    pending_count: int = 0

    @property
    def confirm_required(self) -> bool:
        return self.kind == SwitchDecisionKind.CONFIRM_REQUIRED

    @classmethod
    def immediate(cls) -> 'SwitchDecision':
        return cls(SwitchDecisionKind.IMMEDIATE)

    @classmethod
    def confirm(cls, pending_count: int) -> 'SwitchDecision':
        return cls(SwitchDecisionKind.CONFIRM_REQUIRED, pending_count)
