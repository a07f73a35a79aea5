# -*- coding: utf-8 -*-
"""
StringEdit Application Bootstrap (Composition Root)

Creates and wires the core components:
- Preference store (SettingsModel)
- Session coordinator with the injected sync collaborator
- UI language from the stored preferences

The presentation layer supplies the sync collaborator and binds to the
coordinator's signals; the coordinator hands out EditingSessions.
"""

from typing import Optional

from PySide6.QtCore import QThreadPool

from stringedit_logger import get_logger
from interfaces.i_sync import ISyncCollaborator, IPreferenceStore
from models.settings_model import SettingsModel
from controllers.session_coordinator import SessionCoordinator
import locales

logger = get_logger("bootstrap")


def bootstrap(
    sync: ISyncCollaborator,
    preferences: Optional[IPreferenceStore] = None,
    thread_pool: Optional[QThreadPool] = None,
    autostart: bool = False
) -> SessionCoordinator:
    """
    Build the coordinator.

    This is the single place where the collaborators are resolved and
    connected.

    Args:
        sync: Remote repository collaborator
        preferences: Preference store; defaults to the shared SettingsModel
        thread_pool: Pool for remote calls; defaults to the global pool
        autostart: Call coordinator.start() before returning

    Returns:
        The SessionCoordinator, in LAUNCHING state
    """
    logger.info("=== StringEdit Bootstrap Starting ===")

    if not isinstance(sync, ISyncCollaborator):
        raise TypeError(f"{type(sync).__name__} does not implement ISyncCollaborator")

    if preferences is None:
        preferences = SettingsModel.instance()

    ui_language = getattr(preferences, "ui_language", None)
    if ui_language:
        locales.set_language(ui_language)

    coordinator = SessionCoordinator(sync, preferences, thread_pool)
    _wire_logging(coordinator)

    logger.info(f"Bootstrap complete (last partition: {preferences.last_partition})")

    if autostart:
        coordinator.start()
    return coordinator


def _wire_logging(coordinator: SessionCoordinator):
    """Log phase changes and sessions created by the coordinator."""
    coordinator.did_login.connect(lambda: logger.info("Logged in"))
    coordinator.did_logout.connect(lambda: logger.info("Logged out"))
    coordinator.launch_failed.connect(lambda error: logger.error(f"Launch failed: {error.message}"))
    coordinator.session_created.connect(
        lambda session: session.sync_failed.connect(
            lambda error: logger.warning(f"[{session.partition}] {error.message}")
        )
    )
