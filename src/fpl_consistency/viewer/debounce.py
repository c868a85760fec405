"""Latest-call-wins debouncing for search input and viewport resizes."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Tuple

PendingCall = Tuple[Callable[..., Any], Tuple[Any, ...], dict]


class Debouncer:
    """Delay a call until no newer call has been scheduled for ``delay_ms``.

    Each ``schedule`` supersedes the previous one, so at most one call is ever
    pending. Every scheduled call carries a generation number; a timer only
    runs its call if that generation is still current when it takes the lock,
    which keeps ``cancel`` and ``schedule`` effective even against a timer
    that has already fired.
    """

    def __init__(self, delay_ms: int) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms cannot be negative")
        self.delay_ms = delay_ms
        self._lock = threading.Lock()
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[PendingCall] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def schedule(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (fn, args, kwargs)
            timer = threading.Timer(self.delay_ms / 1000.0, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> bool:
        """Drop the pending call, returning True if there was one."""

        with self._lock:
            return self._take_locked() is not None

    def flush(self) -> bool:
        """Run the pending call now on the calling thread."""

        with self._lock:
            call = self._take_locked()
        if call is None:
            return False
        fn, args, kwargs = call
        fn(*args, **kwargs)
        return True

    def _take_locked(self) -> Optional[PendingCall]:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        call, self._pending = self._pending, None
        return call

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            call, self._pending = self._pending, None
            self._timer = None
        fn, args, kwargs = call
        fn(*args, **kwargs)


__all__ = ["Debouncer"]
