"""Bounded worker pool isolating broker I/O from callers.

A fixed set of worker tasks drains a bounded queue of units of work. Each
unit resolves its own future; callers only wait on that future, so a slow
broker occupies pool capacity and never the caller's own task.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..domain.exceptions import PublisherNotRunningError
from ..ports.logger import LoggerPort

T = TypeVar("T")

WorkUnit = Callable[[], Awaitable[Any]]


class PublishingWorkerPool:
    """Fixed-size pool of asyncio worker tasks.

    The size is static for the lifetime of the pool. Submitted units always
    run to completion; there is no cancellation of in-flight work.
    """

    def __init__(
        self,
        size: int = 20,
        queue_size: int = 1000,
        name: str = "event-publishing",
        logger: LoggerPort | None = None,
    ):
        if size < 1:
            raise ValueError(f"Pool size must be positive, got {size}")
        if queue_size < 1:
            raise ValueError(f"Queue size must be positive, got {queue_size}")
        self._size = size
        self._queue_size = queue_size
        self._name = name
        self._logger = logger
        self._queue: asyncio.Queue[tuple[WorkUnit, asyncio.Future[Any]]] | None = None
        self._workers: list[asyncio.Task[None]] = []
        self._running = False

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        """Units waiting for a free worker."""
        return self._queue.qsize() if self._queue else 0

    async def start(self) -> None:
        """Spawn the worker tasks on the running event loop."""
        if self._running:
            return
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._workers = [
            asyncio.create_task(self._worker_loop(self._queue), name=f"{self._name}-{i}")
            for i in range(self._size)
        ]
        self._running = True
        if self._logger:
            self._logger.info("Worker pool started", pool=self._name, size=self._size)

    async def stop(self) -> None:
        """Let queued work finish, then stop the workers."""
        if not self._running or self._queue is None:
            return
        self._running = False
        await self._queue.join()
        for worker in self._workers:
            worker.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers.clear()
        if self._logger:
            self._logger.info("Worker pool stopped", pool=self._name)

    async def submit(self, work: Callable[[], Awaitable[T]]) -> asyncio.Future[T]:
        """Queue a unit of work, waiting for queue space when it is full.

        Returns:
            Future resolved with the unit's result or exception

        Raises:
            PublisherNotRunningError: If the pool has not been started or is stopping
        """
        if not self._running or self._queue is None:
            raise PublisherNotRunningError()
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        await self._queue.put((work, future))
        return future

    async def _worker_loop(
        self, queue: asyncio.Queue[tuple[WorkUnit, asyncio.Future[Any]]]
    ) -> None:
        while True:
            work, future = await queue.get()
            try:
                result = await work()
            except asyncio.CancelledError:
                # A unit cancelled from inside only cancels its own future
                if not future.done():
                    future.cancel()
                if current_task_cancelling():
                    raise
            except Exception as e:
                if not future.done():
                    future.set_exception(e)
            except BaseException as e:
                if not future.done():
                    future.set_exception(e)
                raise
            else:
                if not future.done():
                    future.set_result(result)
            finally:
                queue.task_done()


def current_task_cancelling() -> bool:
    """True when the running task itself has a pending cancellation request."""
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0
