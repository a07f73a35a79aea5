# -*- coding: utf-8 -*-
"""
StringEdit Controllers Package

Controllers hold the editing logic and talk to the injected collaborators.
Views bind to their Qt signals.
"""

from controllers.editing_session import EditingSession
from controllers.session_coordinator import SessionCoordinator

__all__ = [
    'EditingSession',
    'SessionCoordinator',
]
