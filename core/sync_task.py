# -*- coding: utf-8 -*-
"""
StringEdit Sync Task

Runs one blocking sync collaborator call on a QThreadPool worker and
hands the SyncResult back through a Qt signal. Receivers connect a @Slot
on a QObject living in the owning thread, so the result is delivered
there through a queued connection.
"""

import traceback
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, QRunnable, Slot, QThreadPool

from models.sync_types import SyncResult
from stringedit_enums import SyncErrorKind
from stringedit_exceptions import SyncError
from stringedit_logger import get_logger
from locales import tr

logger = get_logger("core.sync_task")


class SyncTaskSignals(QObject):
    """Signals for SyncTask."""
    finished = Signal(object)  # SyncResult


class SyncTask(QRunnable):
    """Background worker for a single sync collaborator call."""

    def __init__(self, operation: str, call: Callable[[], SyncResult]):
        super().__init__()
        self.operation = operation
        self.call = call
        self.signals = SyncTaskSignals()

    @Slot()
    def run(self):
        logger.debug(f"[SyncTask] {self.operation} started")
        try:
            result = self.call()
            if not isinstance(result, SyncResult):
                raise TypeError(f"{self.operation} returned {type(result).__name__}, expected SyncResult")
        except Exception as e:
            logger.error(f"[SyncTask] {self.operation} raised:\n{traceback.format_exc()}")
            detail = tr("sync_unexpected", operation=self.operation, detail=str(e))
            result = SyncResult.failure(SyncError(SyncErrorKind.OTHER, detail))

        if result.ok:
            logger.info(f"[SyncTask] {self.operation} succeeded ({len(result.state.entries)} entries)")
        else:
            logger.warning(f"[SyncTask] {self.operation} failed: {result.error!r}")

        self.signals.finished.emit(result)


def start_sync_task(
    operation: str,
    call: Callable[[], SyncResult],
    on_finished: Callable[[SyncResult], None],
    thread_pool: Optional[QThreadPool] = None
) -> SyncTaskSignals:
    """
    Start an asynchronous sync call.

    Args:
        operation: Name used in logs and error messages ("push", "load", ...)
        call: Zero-argument callable performing the blocking collaborator call
        on_finished: Slot receiving the SyncResult on the owning thread
        thread_pool: Pool to run on; defaults to the global pool

    Returns:
        The task's signals object. Keep a reference until the result has
        been delivered; the runnable itself is deleted by the pool.
    """
    task = SyncTask(operation, call)
    signals = task.signals
    signals.finished.connect(on_finished)
    (thread_pool or QThreadPool.globalInstance()).start(task)
    return signals
