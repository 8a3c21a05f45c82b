"""Concurrent execution of a phase of transfer tasks."""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Optional, TypeVar

from .progress import NullObserver, SyncEvent, SyncEventInfo, SyncObserver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TransferExecutor:
    """Runs one worker thread per task and fails fast.

    Every task of a phase is dispatched at once; there is no cap besides the
    number of tasks. Results are collected in completion order. The first
    exception collected is raised and no further results are awaited. Tasks
    that are already running are not interrupted and finish in the
    background.
    """

    def __init__(self, observer: Optional[SyncObserver] = None):
        """Initialize transfer executor.

        Args:
            observer: Receives a progress event per completed task
        """
        self.observer = observer or NullObserver()

    def run(self, phase: str, tasks: list[Callable[[], T]]) -> list[T]:
        """Run all tasks of a phase concurrently.

        Args:
            phase: Phase name reported in progress events
            tasks: Callables to run, one per mod

        Returns:
            Task results in completion order

        Raises:
            Exception: The first exception raised by any task
        """
        total = len(tasks)
        if total == 0:
            return []

        logger.debug("Running %s phase with %d task(s)", phase, total)
        start = time.time()
        results: list[T] = []

        executor = ThreadPoolExecutor(
            max_workers=total, thread_name_prefix=f"modsync-{phase}"
        )
        try:
            futures: list[Future] = [executor.submit(task) for task in tasks]
            for current, future in enumerate(as_completed(futures), start=1):
                results.append(future.result())
                self.observer.notify(
                    SyncEventInfo(
                        event=SyncEvent.PROGRESS_UPDATED,
                        phase=phase,
                        current=current,
                        total=total,
                    )
                )
        except Exception:
            logger.debug(
                "%s phase aborted after %d of %d task(s)", phase, len(results), total
            )
            raise
        finally:
            # Running tasks are left to finish on their own
            executor.shutdown(wait=False)

        logger.debug("%s phase took %.2fs", phase, time.time() - start)
        return results
