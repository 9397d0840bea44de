"""Coalesce bursts of calls into a single delayed call."""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any

_LOGGER = logging.getLogger(__name__)


class Debouncer:
    """Callable that runs ``func`` once the calls have stopped for ``wait`` seconds.

    Every call cancels the pending one and reschedules with its own arguments,
    so only the last call of a burst reaches ``func``. Must be called from
    inside a running event loop.
    """

    def __init__(self, func: Callable[..., Any], wait: float) -> None:
        """Initialize the debouncer."""
        self._func = func
        self._wait = wait
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()
        functools.update_wrapper(self, func, updated=())

    @property
    def pending(self) -> bool:
        """Return True if a call is scheduled."""
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Schedule ``func`` with these arguments, replacing any pending call."""
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self._wait, self._fire, args, kwargs)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handle = None
        result = self._func(*args, **kwargs)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            _LOGGER.debug("Debounced call to %s cancelled", self._func)
        elif (err := task.exception()) is not None:
            _LOGGER.warning("Debounced call to %s failed: %s", self._func, err)


def debounce(func: Callable[..., Any], wait: float) -> Debouncer:
    """Return a debounced version of ``func``.

    Args:
        func: Function or coroutine function to call.
        wait: Quiet period in seconds before the last call goes through.
    """
    return Debouncer(func, wait)
