import asyncio
from collections.abc import Callable
from typing import Any, Protocol


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` shape."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Cancellable: ...


class Debouncer:
    """Collapse bursts of calls into one, run ``delay`` seconds after the last.

    Last write wins: every ``trigger`` cancels the pending call, so at most
    one call is ever scheduled and it carries the latest arguments.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        scheduler: Scheduler | None = None,
    ):
        self.delay = delay
        self._callback = callback
        self._scheduler = scheduler
        self._pending: Cancellable | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        scheduler = self._scheduler or asyncio.get_running_loop()
        self._pending = scheduler.call_later(self.delay, self._fire, *args)

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fire(self, *args: Any) -> None:
        self._pending = None
        self._callback(*args)
