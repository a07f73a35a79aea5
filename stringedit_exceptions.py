# -*- coding: utf-8 -*-
"""
StringEdit Exceptions Module
Structured error types for the editing session and its collaborators.
"""

from typing import Optional

from stringedit_enums import CollisionReason, EditErrorReason, SyncErrorKind
from locales import tr


class StringEditError(Exception):
    """
    Base exception class for all StringEdit errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Local validation
# =============================================================================

class ValidationError(StringEditError):
    """Raised when user input is rejected. Nothing in the session changes."""

    def __init__(self, message: str, field: str = None, value=None):
        super().__init__(message, details={'field': field, 'value': value})
        self.field = field
        self.value = value


class CollisionError(ValidationError):
    """Raised when a new entry's key is already taken."""

    _MESSAGE_KEYS = {
        CollisionReason.ALREADY_IN_BASELINE: "collision_already_in_baseline",
        CollisionReason.ALREADY_QUEUED: "collision_already_queued",
    }

    def __init__(self, reason: CollisionReason, key: str):
        super().__init__(tr(self._MESSAGE_KEYS[reason], key=key), field='key', value=key)
        self.reason = reason
        self.key = key


class EditError(ValidationError):
    """
    Raised when an edit to an existing row is rejected.

    The caller should put `previous_text` back into the edited cell.
    """

    _MESSAGE_KEYS = {
        EditErrorReason.EMPTY_REJECTED: "edit_empty_rejected",
        EditErrorReason.IMMUTABLE_KEY: "edit_immutable_key",
        EditErrorReason.DUPLICATE_KEY: "edit_duplicate_key",
        EditErrorReason.UNKNOWN_ROW: "edit_unknown_row",
    }

    def __init__(
        self,
        reason: EditErrorReason,
        row: int,
        key: Optional[str] = None,
        previous_text: Optional[str] = None
    ):
        super().__init__(tr(self._MESSAGE_KEYS[reason], key=key, row=row), field='row', value=row)
        self.reason = reason
        self.row = row
        self.key = key
        self.previous_text = previous_text


# =============================================================================
# Remote sync
# =============================================================================

class SyncError(StringEditError):
    """
    A failure reported by the sync collaborator.

    Travels as a value inside SyncResult; the core never raises it.
    """

    _MESSAGE_KEYS = {
        SyncErrorKind.NO_CREDENTIALS: "sync_no_credentials",
        SyncErrorKind.BAD_CREDENTIALS: "sync_bad_credentials",
        SyncErrorKind.NETWORK: "sync_network",
        SyncErrorKind.OTHER: "sync_other",
    }

    def __init__(self, kind: SyncErrorKind, detail: str = ""):
        super().__init__(tr(self._MESSAGE_KEYS[kind], detail=detail))
        self.kind = kind
        self.detail = detail

    @property
    def is_credential_error(self) -> bool:
        return self.kind in (SyncErrorKind.NO_CREDENTIALS, SyncErrorKind.BAD_CREDENTIALS)

    def __repr__(self) -> str:
        return f"SyncError({self.kind.value}, {self.detail!r})"


class SessionBusyError(StringEditError):
    """Raised when a mutating call arrives while a sync is in flight or after close()."""
    pass

