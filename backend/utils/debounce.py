import asyncio
import inspect
import logging
from typing import Any, Callable

from config import settings

logger = logging.getLogger(__name__)


class Debouncer:
    """Delay calls to ``fn`` until ``delay`` seconds pass without a new call.

    Each call cancels the pending one, so only the latest arguments are used.
    Must be called from inside a running event loop.
    """

    def __init__(self, fn: Callable[..., Any], delay: float | None = None):
        self._fn = fn
        self.delay = settings.debounce_ms / 1000 if delay is None else delay
        self._handle: asyncio.TimerHandle | None = None
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args, **kwargs) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args, kwargs)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def _fire(self, args: tuple, kwargs: dict) -> None:
        self._handle = None
        try:
            result = self._fn(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call failed")
            return
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result)
            self._task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        if self._task is task:
            self._task = None
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced call failed: %s", exc, exc_info=exc)
