"""Polling wait and the retrying executor used by element searches.

The UI tree may still be settling when a search starts, so searches are
retried until they produce a result or the timeout elapses. Clock and sleep
are injectable so tests can drive timing without sleeping.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from finder.models import NoSuchElementError

logger = logging.getLogger("element-finder.wait")

T = TypeVar("T")


class WaitTimeout(Exception):
    """The wait ran out of time without a result."""

    def __init__(self, message: str, last_error: Exception | None = None) -> None:
        super().__init__(message)
        self.last_error = last_error


class Wait:
    """Calls an attempt until it returns a non-None value.

    Attempts that return None or raise one of ``ignored`` mean "not yet".
    Any other exception propagates immediately. A timeout of zero or less
    makes exactly one attempt.
    """

    def __init__(
        self,
        timeout: float,
        poll_interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        ignored: tuple[type[Exception], ...] = (NoSuchElementError,),
    ) -> None:
        self.timeout = timeout
        self.poll_interval = max(poll_interval, 0.0)
        self._clock = clock
        self._sleep = sleep
        self._ignored = ignored

    def until(self, attempt: Callable[[], T | None]) -> T:
        start = self._clock()
        perf_start = time.perf_counter()
        polls = 0
        last_error: Exception | None = None

        while True:
            polls += 1
            try:
                result = attempt()
            except self._ignored as e:
                last_error = e
                result = None

            if result is not None:
                logger.debug(
                    f"[PERF] wait MATCHED: polls={polls}, "
                    f"total={(time.perf_counter()-perf_start)*1000:.1f}ms"
                )
                return result

            elapsed = self._clock() - start
            if elapsed >= self.timeout:
                logger.debug(
                    f"[PERF] wait TIMEOUT: polls={polls}, "
                    f"total={(time.perf_counter()-perf_start)*1000:.1f}ms"
                )
                raise WaitTimeout(
                    f"Timed out after {max(self.timeout, 0):g}s ({polls} polls)",
                    last_error=last_error,
                )

            logger.debug(f"[PERF] wait poll #{polls}: not yet, elapsed={elapsed:.2f}s")
            self._sleep(self.poll_interval)


def _raise_not_found(timeout: WaitTimeout) -> T:
    if isinstance(timeout.last_error, NoSuchElementError):
        raise timeout.last_error
    raise NoSuchElementError(str(timeout)) from timeout


def _empty_list(timeout: WaitTimeout) -> list:
    return []


class RetryingExecutor:
    """Runs search attempts under a Wait.

    ``find_one``: NoSuchElementError is transient, the last one is re-raised
    on timeout. ``find_all``: an empty list is transient and an empty list
    is returned on timeout.
    """

    def __init__(self, wait: Wait) -> None:
        self.wait = wait

    def run(
        self,
        attempt: Callable[[], T],
        is_ready: Callable[[T], bool],
        on_timeout: Callable[[WaitTimeout], T],
    ) -> T:
        """Retry attempt until is_ready(result); on timeout return on_timeout(error)."""
        def poll() -> T | None:
            result = attempt()
            return result if is_ready(result) else None

        try:
            return self.wait.until(poll)
        except WaitTimeout as e:
            return on_timeout(e)

    def find_one(self, attempt: Callable[[], T]) -> T:
        return self.run(attempt, lambda result: result is not None, _raise_not_found)

    def find_all(self, attempt: Callable[[], list[T]]) -> list[T]:
        return self.run(attempt, bool, _empty_list)
