# -*- coding: utf-8 -*-
"""
StringEdit Interfaces Package

Protocol interfaces for the collaborators injected into the core.
Using Protocol from typing allows structural subtyping (duck typing)
without requiring explicit inheritance.
"""

from interfaces.i_sync import ISyncCollaborator, IPreferenceStore

__all__ = [
    'ISyncCollaborator',
    'IPreferenceStore',
]
