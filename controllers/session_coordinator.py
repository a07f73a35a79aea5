# -*- coding: utf-8 -*-
"""
StringEdit Session Coordinator

Outer state machine sequencing the application phases:

    LAUNCHING -> LOGGED_OUT   (no / bad credentials, or any other load error)
    LAUNCHING -> READY        (load succeeded; an EditingSession is created)
    READY     -> LOGGED_OUT   (explicit logout)
    READY / LOGGED_OUT -> LAUNCHING   (resume, or credentials submitted)

Load errors other than credential problems are surfaced through
launch_failed and the coordinator falls back to LOGGED_OUT. The process
is never terminated from here.
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot, QThreadPool

from stringedit_logger import get_logger
from stringedit_enums import CoordinatorState, LoadingState
from stringedit_exceptions import SessionBusyError, SyncError
from locales import tr
from core.sync_task import start_sync_task
from interfaces.i_sync import ISyncCollaborator, IPreferenceStore
from models.sync_types import LoadedState, SyncResult
from controllers.editing_session import EditingSession

logger = get_logger("controllers.coordinator")


class SessionCoordinator(QObject):
    """
    Drives launch, login and logout, and owns the EditingSession while READY.

    Each transition tears the previous phase down before building the next
    one; a closed session never coexists with its replacement.

    Signals:
        state_changed(CoordinatorState): Phase changed
        did_login(): Entered READY
        did_logout(): Entered LOGGED_OUT
        launch_failed(SyncError): Load failed for a reason other than credentials
        session_created(EditingSession): A fresh session is ready for binding
        loading_state_changed(LoadingState): Launch progress
        status_updated(str): Human-readable status line
    """

    state_changed = Signal(object)
    did_login = Signal()
    did_logout = Signal()
    launch_failed = Signal(object)
    session_created = Signal(object)
    loading_state_changed = Signal(object)
    status_updated = Signal(str)

    def __init__(
        self,
        sync: ISyncCollaborator,
        preferences: Optional[IPreferenceStore] = None,
        thread_pool: Optional[QThreadPool] = None
    ):
        super().__init__()
        self._sync = sync
        self._preferences = preferences
        self._thread_pool = thread_pool

        self._state = CoordinatorState.LAUNCHING
        self._session: Optional[EditingSession] = None
        self._loading = False
        self._task_signals = None
        self._last_error: Optional[SyncError] = None

        logger.debug("SessionCoordinator initialized")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def session(self) -> Optional[EditingSession]:
        """The editing session; only set while READY."""
        return self._session

    @property
    def last_error(self) -> Optional[SyncError]:
        """The most recent launch error, cleared by the next successful load."""
        return self._last_error

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_busy(self) -> bool:
        """True while a load runs or the session has a push or switch in flight."""
        return self._loading or (self._session is not None and self._session.is_busy)

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def start(self):
        """
        Enter LAUNCHING and load from the remote.

        Raises:
            SessionBusyError: a load, push or partition switch is in flight
        """
        self._ensure_idle()

        self._teardown_session()
        self._set_state(CoordinatorState.LAUNCHING)
        self._loading = True
        self.loading_state_changed.emit(LoadingState.FETCHING)
        self.status_updated.emit(tr("status_fetching"))

        self._task_signals = start_sync_task("load", self._sync.load, self._on_load_finished, self._thread_pool)

    def resume(self):
        """Re-run the launch sequence after the process comes back to the foreground."""
        if self.is_busy:
            logger.debug("Resume ignored, a sync operation is still running")
            return
        logger.info(f"Resuming from {self._state.value}")
        self.start()

    def submit_credentials(self, username: str, password: str) -> bool:
        """
        Store credentials from the login screen and relaunch.

        Returns:
            False if the collaborator refused to store them
        """
        self._ensure_idle()

        if not self._sync.store_credentials(username, password):
            logger.warning("Credentials could not be stored")
            return False

        logger.info("Credentials stored, relaunching")
        self.start()
        return True

    def logout(self):
        """Drop credentials and force LOGGED_OUT."""
        self._ensure_idle()

        self._sync.logout()
        logger.info("Logged out")
        self._enter_logged_out()

    # =========================================================================
    # LOAD RESULT
    # =========================================================================

    @Slot(object)
    def _on_load_finished(self, result: SyncResult):
        self._loading = False

        if result.ok:
            self._last_error = None
            self.loading_state_changed.emit(LoadingState.COMPLETE)
            self.status_updated.emit(tr("status_complete"))
            self._enter_ready(result.state)
            return

        error = result.error
        self._last_error = error
        if error.is_credential_error:
            logger.info(f"Load needs login: {error.kind.value}")
        else:
            logger.error(f"Load failed, falling back to login: {error!r}")
            self.loading_state_changed.emit(LoadingState.ERROR)
            self.status_updated.emit(tr("status_error", detail=error.message))
            self.launch_failed.emit(error)
        self._enter_logged_out()

    def _enter_ready(self, state: LoadedState):
        self._teardown_session()

        session = EditingSession(self._sync, self._preferences, self._thread_pool)
        session.load_baseline(state.entries, state.partition or session.partition, state.commit_message)
        self._session = session

        self._set_state(CoordinatorState.READY)
        self.session_created.emit(session)
        self.did_login.emit()

    def _enter_logged_out(self):
        self._teardown_session()
        self._set_state(CoordinatorState.LOGGED_OUT)
        self.did_logout.emit()

    def _teardown_session(self):
        if self._session is not None:
            self._session.close()
            self._session = None

    def _ensure_idle(self):
        if self._loading:
            raise SessionBusyError(tr("session_busy"), details={'operation': 'load'})
        if self._session is not None and self._session.is_busy:
            raise SessionBusyError(tr("session_busy"), details={'operation': 'session'})

    def _set_state(self, state: CoordinatorState):
        if self._state != state:
            logger.info(f"State {self._state.value} -> {state.value}")
            self._state = state
            self.state_changed.emit(state)

    def __repr__(self) -> str:
        return f"SessionCoordinator(state={self._state.value}, session={self._session!r})"
