"""Per-call cancellation and deadline handle."""

from __future__ import annotations

import contextlib
import threading
import time
import weakref
from collections.abc import Callable

from .errors import DeadlineExceededError, RequestCancelledError

DoneCallback = Callable[[], None]


class CallContext:
    """Cancellation/deadline carrier passed to every operation.

    A context is done once ``cancel()`` was called on it or on any ancestor,
    or once its deadline (absolute ``time.monotonic()`` seconds) has passed.
    Instances are safe to share between threads and event loops. A parent
    holds its children weakly, so per-call children are dropped with the call.
    """

    def __init__(self, *, deadline: float | None = None, parent: CallContext | None = None) -> None:
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline
        self._parent = parent
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[DoneCallback] = []
        self._children: weakref.WeakSet[CallContext] = weakref.WeakSet()
        if parent is not None:
            parent._adopt(self)

    @classmethod
    def background(cls) -> CallContext:
        return cls()

    def with_timeout(self, seconds: float) -> CallContext:
        return CallContext(deadline=time.monotonic() + seconds, parent=self)

    def with_cancel(self) -> CallContext:
        return CallContext(parent=self)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def remaining(self) -> float | None:
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks, self._callbacks = self._callbacks, []
            children = list(self._children)
            self._children.clear()
        for child in children:
            child.cancel()
        for callback in callbacks:
            callback()
        if self._parent is not None:
            self._parent._release(self)

    def _adopt(self, child: CallContext) -> None:
        with self._lock:
            if not self._cancelled.is_set():
                self._children.add(child)
                return
        child.cancel()

    def _release(self, child: CallContext) -> None:
        with self._lock:
            self._children.discard(child)

    def add_cancel_callback(self, callback: DoneCallback) -> None:
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_cancel_callback(self, callback: DoneCallback) -> None:
        with self._lock, contextlib.suppress(ValueError):
            self._callbacks.remove(callback)

    def error(self) -> RequestCancelledError | None:
        if self.cancelled:
            return RequestCancelledError("context cancelled")
        if self.expired:
            return DeadlineExceededError("context deadline exceeded")
        return None

    def raise_if_done(self) -> None:
        error = self.error()
        if error is not None:
            raise error
