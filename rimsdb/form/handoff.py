"""
Hand-off of file dialog results to the form.

File dialogs wait on the user, so they run on a worker thread. Their result
is put into a queue that the interactive surface drains on its regular
refresh; only the most recent result is used.
"""

import threading
from queue import Queue, Empty
from typing import Callable, Generic, Optional, TypeVar

from rimsdb.core.logging_config import get_logger

logger = get_logger("form.handoff")

T = TypeVar("T")


def run_in_background(task: Callable[[], None], name: str = "rimsdb-dialog") -> threading.Thread:
    """
    Run a task on a daemon thread.

    Parameters
    ----------
    task : callable
        Function without arguments
    name : str
        Thread name

    Returns
    -------
    threading.Thread
        The started thread
    """

    def _run():
        try:
            task()
        except Exception as e:
            logger.error(f"Background task failed: {e}", exc_info=True)

    thread = threading.Thread(target=_run, name=name, daemon=True)
    thread.start()
    return thread


class FileHandoff(Generic[T]):
    """
    Single-producer/single-consumer channel for dialog results.

    A dialog that returns None (nothing chosen) delivers nothing.
    """

    def __init__(self):
        self._queue: Queue = Queue()

    def send(self, payload: Optional[T]) -> None:
        """Deliver a result; None is dropped."""
        if payload is None:
            logger.debug("Dialog cancelled, nothing delivered")
            return
        self._queue.put(payload)

    def submit(self, producer: Callable[[], Optional[T]]) -> threading.Thread:
        """
        Run a producer (e.g. a file picker) off the calling thread.

        Parameters
        ----------
        producer : callable
            Returns the payload, or None if cancelled

        Returns
        -------
        threading.Thread
            The worker thread
        """
        return run_in_background(lambda: self.send(producer()))

    def poll(self) -> Optional[T]:
        """
        Drain the channel.

        Returns
        -------
        payload or None
            The latest delivered payload, or None if nothing arrived
        """
        latest = None
        while True:
            try:
                latest = self._queue.get_nowait()
            except Empty:
                return latest

    @property
    def pending(self) -> bool:
        """True if a payload is waiting."""
        return not self._queue.empty()
