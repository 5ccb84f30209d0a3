"""Single-slot background execution of render requests."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional


class RenderScheduler:
    """Run at most one task at a time on a worker thread.

    A request submitted while a task is in flight is dropped rather than
    queued; in-flight tasks are never cancelled.
    """

    def __init__(self) -> None:
        self._slot = threading.Lock()
        self._state_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._result: Any = None
        self._error: Optional[BaseException] = None
        self._generation = 0

    @property
    def busy(self) -> bool:
        return self._slot.locked()

    @property
    def generation(self) -> int:
        """Number of tasks that have finished successfully."""

        with self._state_lock:
            return self._generation

    @property
    def result(self) -> Any:
        with self._state_lock:
            return self._result

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        if not self._slot.acquire(blocking=False):
            return False
        thread = threading.Thread(target=self._run, args=(fn, args, kwargs), daemon=True)
        self._thread = thread
        thread.start()
        return True

    def _run(self, fn: Callable[..., Any], args: tuple, kwargs: dict) -> None:
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:
            with self._state_lock:
                self._error = exc
            self._slot.release()
            return

        with self._state_lock:
            self._result = result
            self._error = None
            self._generation += 1
        self._slot.release()

    def join(self, timeout: Optional[float] = None) -> None:
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
            if thread.is_alive():
                raise TimeoutError("render did not finish in time")

    def take_error(self) -> Optional[BaseException]:
        """Return and clear the exception raised by the last failed task."""

        with self._state_lock:
            error, self._error = self._error, None
        return error

    def wait(self, timeout: Optional[float] = None) -> Any:
        """Block until the in-flight task finishes and return the latest result.

        An exception raised by the task is re-raised here once.
        """

        self.join(timeout)
        error = self.take_error()
        if error is not None:
            raise error
        return self.result
