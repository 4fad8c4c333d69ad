"""Listener dispatch onto a single execution context.

Tracker mutations may come from any thread. Listener callbacks are posted
to a dispatcher instead of being called inline, so they run one at a time
and in the order they were posted.
"""

import queue
import sys
import threading
import traceback
from typing import Callable, Optional

from ..constants import DispatchConstants


class TkDispatcher:
    """Runs callbacks in the tkinter main loop.

    Callbacks are scheduled with ``after()``, which queues them in the
    event loop of the thread that owns the root window.
    """

    def __init__(self, root, delay_ms: int = DispatchConstants.TK_AFTER_DELAY_MS):
        """Initialize the dispatcher.

        Args:
            root: Tk root window (or any widget) owning the main loop
            delay_ms: Delay passed to after()
        """
        self.root = root
        self.delay_ms = delay_ms

    def post(self, callback: Callable[[], None]) -> None:
        """Schedule a callback in the main loop."""
        self.root.after(self.delay_ms, callback)


class ThreadDispatcher:
    """Runs callbacks on one dedicated worker thread.

    Used where no tkinter main loop exists. The worker drains a FIFO queue,
    so callbacks never overlap and keep their posting order.
    """

    def __init__(
        self,
        name: str = DispatchConstants.THREAD_NAME,
        join_timeout: float = DispatchConstants.JOIN_TIMEOUT,
    ):
        """Initialize the dispatcher.

        Args:
            name: Name of the worker thread
            join_timeout: Seconds to wait for the worker in stop()
        """
        self.name = name
        self.join_timeout = join_timeout
        self._queue: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._stopped = False
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        """Check if the worker thread is running."""
        return self._running

    def start(self) -> None:
        """Start the worker thread."""
        with self._lock:
            self._start_locked()

    def _start_locked(self) -> None:
        """Start the worker thread. Caller holds the lock."""
        if self._running:
            return
        if self._stopped:
            raise RuntimeError(f"{self.name} dispatcher has been stopped")

        self._running = True
        self._thread = threading.Thread(target=self._worker_loop, name=self.name)
        self._thread.daemon = True
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the worker thread after pending callbacks have run.

        Callbacks accepted by post() before stop() always run; later posts
        are rejected.

        Args:
            timeout: Seconds to wait for the worker, defaults to join_timeout
        """
        with self._lock:
            self._stopped = True
            if not self._running:
                return
            self._running = False

        if self._thread and self._thread.is_alive():
            if threading.current_thread() is not self._thread:
                self._thread.join(
                    timeout=self.join_timeout if timeout is None else timeout
                )
        self._thread = None

    def post(self, callback: Callable[[], None]) -> None:
        """Queue a callback for the worker thread.

        Raises:
            RuntimeError: If the dispatcher has been stopped
        """
        with self._lock:
            if self._stopped:
                raise RuntimeError(f"{self.name} dispatcher has been stopped")
            self._start_locked()
            self._queue.put(callback)

    def flush(self) -> None:
        """Block until every callback posted so far has run."""
        if self.is_dispatch_thread():
            raise RuntimeError("flush() called from the dispatch thread")
        self._queue.join()

    def is_dispatch_thread(self) -> bool:
        """Check if the caller runs on the worker thread."""
        return self._thread is not None and threading.current_thread() is self._thread

    def _worker_loop(self) -> None:
        """Main worker loop running queued callbacks."""
        while self._running or not self._queue.empty():
            try:
                callback = self._queue.get(
                    timeout=DispatchConstants.QUEUE_POLL_TIMEOUT
                )
            except queue.Empty:
                continue  # Timeout is normal

            try:
                callback()
            except Exception as e:
                print(f"[{self.name}] Error in listener callback: {e}", file=sys.stderr)
                traceback.print_exc()
            finally:
                self._queue.task_done()
