"""Fire-and-forget scheduler for webhook deliveries.

Purpose
-------
Start each delivery as an independent asynchronous operation so the host's
log call returns immediately, while still observing every delivery's outcome.

Contents
--------
* :class:`DeliveryScheduler` - runs coroutines on the caller's event loop when
  one is running, otherwise on a private background loop thread.

System Role
-----------
Keeps host code responsive: network latency and failures stay off the logging
call path. Completed deliveries are released; unexpected exceptions escaping
a delivery are logged instead of disappearing with the task.

Alignment Notes
---------------
Start-on-demand and drain-on-stop semantics follow the queue worker used by
the wider logging backbone.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Awaitable, Callable
from typing import Any

LOGGER = logging.getLogger(__name__)


class DeliveryScheduler:
    """Schedule delivery coroutines without waiting for them.

    Examples
    --------
    >>> results = []
    >>> async def job():
    ...     results.append("sent")
    >>> scheduler = DeliveryScheduler()
    >>> future = scheduler.submit(job)
    >>> scheduler.stop(timeout=1.0)
    >>> results
    ['sent']
    """

    def __init__(
        self,
        *,
        thread_name: str = "lib-log-discord-delivery",
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
    ) -> None:
        self._thread_name = thread_name
        self._diagnostic = diagnostic
        self._lock = threading.RLock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._futures: set[concurrent.futures.Future[Any]] = set()
        self._tasks: set[asyncio.Task[Any]] = set()

    def submit(
        self,
        factory: Callable[[], Awaitable[Any]],
        *,
        on_cancel: Callable[[], None] | None = None,
    ) -> Any:
        """Start ``factory()`` in the background and return its task or future.

        ``factory`` is only invoked once the target loop is known so no
        coroutine object is left un-awaited. ``on_cancel`` runs once if the
        delivery is cancelled, whether or not it had started; a loop shutting
        down (``asyncio.run`` returning) cancels pending tasks this way.
        """

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is not None:
            task = running.create_task(_as_coroutine(factory))
            with self._lock:
                self._tasks.add(task)
            task.add_done_callback(lambda done: self._task_done(done, on_cancel))
            return task

        loop = self._ensure_loop()
        future = asyncio.run_coroutine_threadsafe(_as_coroutine(factory), loop)
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(lambda done: self._future_done(done, on_cancel))
        return future

    @property
    def pending(self) -> int:
        """Return the number of deliveries that have not completed yet."""

        with self._lock:
            return len(self._futures) + len(self._tasks)

    async def drain(self) -> None:
        """Await deliveries started on the running loop and the background loop."""

        with self._lock:
            tasks = list(self._tasks)
            futures = list(self._futures)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if futures:
            await asyncio.gather(*(asyncio.wrap_future(future) for future in futures), return_exceptions=True)

    def stop(self, *, timeout: float | None = 5.0) -> None:
        """Wait for background deliveries and shut the private loop down.

        Tasks running on a caller-owned loop are left to that loop; use
        :meth:`drain` from async code to await them.
        """

        with self._lock:
            futures = list(self._futures)
            loop = self._loop
            thread = self._thread

        if futures:
            _done, not_done = concurrent.futures.wait(futures, timeout=timeout)
            if not_done:
                self._emit_diagnostic("delivery_stop_timeout", {"pending": len(not_done), "timeout": timeout})

        if loop is None or thread is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout)
        with self._lock:
            if thread.is_alive():
                return
            loop.close()
            self._loop = None
            self._thread = None

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is not None and self._thread is not None and self._thread.is_alive():
                return self._loop
            loop = asyncio.new_event_loop()
            ready = threading.Event()

            def run() -> None:
                asyncio.set_event_loop(loop)
                loop.call_soon(ready.set)
                loop.run_forever()

            thread = threading.Thread(target=run, name=self._thread_name, daemon=True)
            thread.start()
            ready.wait()
            self._loop = loop
            self._thread = thread
            return loop

    def _task_done(self, task: asyncio.Task[Any], on_cancel: Callable[[], None] | None) -> None:
        with self._lock:
            self._tasks.discard(task)
        if task.cancelled():
            self._cancelled(on_cancel)
            return
        self._observe(task.exception())

    def _future_done(self, future: concurrent.futures.Future[Any], on_cancel: Callable[[], None] | None) -> None:
        with self._lock:
            self._futures.discard(future)
        if future.cancelled():
            self._cancelled(on_cancel)
            return
        self._observe(future.exception())

    def _cancelled(self, on_cancel: Callable[[], None] | None) -> None:
        LOGGER.warning("Webhook delivery was cancelled before it completed")
        self._emit_diagnostic("delivery_cancelled", {})
        if on_cancel is None:
            return
        try:
            on_cancel()
        except Exception as cancel_exc:  # noqa: BLE001
            LOGGER.error("Cancellation hook raised while reporting a cancelled delivery", exc_info=cancel_exc)

    def _observe(self, exc: BaseException | None) -> None:
        if exc is None:
            return
        LOGGER.error("Webhook delivery task raised an exception", exc_info=exc)
        self._emit_diagnostic("delivery_task_error", {"exception": repr(exc)})

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is None:
            return
        try:
            self._diagnostic(name, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Delivery diagnostic hook raised while reporting %s", name, exc_info=diagnostic_exc)


async def _as_coroutine(factory: Callable[[], Awaitable[Any]]) -> Any:
    return await factory()


__all__ = ["DeliveryScheduler"]
