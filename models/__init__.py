# -*- coding: utf-8 -*-
"""
StringEdit Models Package

Data models for the editing core: value objects, the baseline snapshot,
pending-change containers, the filter view and user preferences.
"""

from models.entry import Entry, PartitionTag
from models.sync_types import LoadedState, SyncResult, CommitPayload, SwitchDecision
from models.baseline import Baseline
from models.edit_tracker import EditTracker
from models.insertion_queue import InsertionQueue
from models.filter_view import FilterView
from models.settings_model import SettingsModel

__all__ = [
    'Entry', 'PartitionTag',
    'LoadedState', 'SyncResult', 'CommitPayload', 'SwitchDecision',
    'Baseline', 'EditTracker', 'InsertionQueue', 'FilterView',
    'SettingsModel',
]
