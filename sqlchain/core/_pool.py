"""Thread-safe object pool for reusable query accumulators."""

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar

from mypy_extensions import mypyc_attr

from sqlchain.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ("ObjectPool",)

logger = get_logger("core.pool")

T = TypeVar("T")


@mypyc_attr(allow_interpreted_subclasses=False)
class ObjectPool(Generic[T]):
    """Reusable object pool with reset-instead-of-recreate semantics.

    The free list is guarded by a lock so one pool can be shared by every
    thread of an application. ``release`` runs the resetter before the
    object is put back, so ``acquire`` only ever hands out reset objects.
    An object already waiting in the free list is never added a second time.
    """

    __slots__ = ("_factory", "_lock", "_max_size", "_pool", "_resetter")

    def __init__(self, factory: "Callable[[], T]", resetter: "Callable[[T], None]", max_size: int = 100) -> None:
        self._pool: list[T] = []
        self._lock = threading.Lock()
        self._max_size = max_size
        self._factory = factory
        self._resetter = resetter

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        """Number of objects currently waiting for reuse."""
        with self._lock:
            return len(self._pool)

    def acquire(self) -> T:
        with self._lock:
            if self._pool:
                return self._pool.pop()
        return self._factory()

    def release(self, obj: T) -> None:
        if obj in self:
            log_with_context(logger, logging.DEBUG, "Ignoring release of an object already pooled", size=self.size)
            return
        self._resetter(obj)
        with self._lock:
            if len(self._pool) < self._max_size:
                self._pool.append(obj)
                return
        log_with_context(logger, logging.DEBUG, "Pool full, dropping released object", max_size=self._max_size)

    def __contains__(self, obj: object) -> bool:
        """Whether ``obj`` itself (not an equal object) is waiting for reuse."""
        with self._lock:
            return any(pooled is obj for pooled in self._pool)

    def clear(self) -> None:
        """Drop every pooled object."""
        with self._lock:
            self._pool.clear()
