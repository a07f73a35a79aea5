"""
StringEdit Enum Definitions

Type-safe enums for partitions, session outcomes and loading states.
"""

from enum import Enum


class Platform(str, Enum):
    """Platforms a strings file can belong to"""
    IOS = 'ios'
    ANDROID = 'android'


class EditOutcome(str, Enum):
    """Result of a successful edit"""
    APPLIED = 'applied'
    REVERTED = 'reverted'


class CollisionReason(str, Enum):
    ALREADY_IN_BASELINE = 'already_in_baseline'
    ALREADY_QUEUED = 'already_queued'


class EditErrorReason(str, Enum):
    EMPTY_REJECTED = 'empty_rejected'
    IMMUTABLE_KEY = 'immutable_key'
    DUPLICATE_KEY = 'duplicate_key'
    UNKNOWN_ROW = 'unknown_row'


class SyncErrorKind(str, Enum):
    """Failures reported by the sync collaborator"""
    NO_CREDENTIALS = 'no_credentials'
    BAD_CREDENTIALS = 'bad_credentials'
    NETWORK = 'network'
    OTHER = 'other'


class SwitchDecisionKind(str, Enum):
    IMMEDIATE = 'immediate'
    CONFIRM_REQUIRED = 'confirm_required'


class LoadingState(str, Enum):
    """Progress of a remote operation, for launch screen and status labels"""
    FETCHING = 'fetching'
    PULLING = 'pulling'
    PUSHING = 'pushing'
    SWITCHING = 'switching'
    COMPLETE = 'complete'
    ERROR = 'error'


class CoordinatorState(str, Enum):
    """Application phases"""
    LAUNCHING = 'launching'
    LOGGED_OUT = 'logged_out'
    READY = 'ready'
