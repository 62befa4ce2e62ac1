import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

__all__ = ("Memoized",)

T = TypeVar("T")

_unset = object()


@dataclass(slots=True)
class Memoized(Generic[T]):
    """
    Caches the value returned by the first call to :meth:`get`.

    The initializer runs at most once, even when several threads race on the first
    call. Threads arriving after publication read the value without taking the lock.

    Example::

        >>> calls = []
        >>> cell = Memoized(lambda: calls.append(1) or len(calls))
        >>> cell.get(), cell.get()
        (1, 1)
        >>> cell.is_initialized
        True
    """

    initializer: Callable[[], T]
    _value: object = field(init=False, default=_unset, repr=False)
    _lock: threading.Lock = field(init=False, default_factory=threading.Lock, repr=False)

    @property
    def is_initialized(self) -> bool:
        return self._value is not _unset

    def get(self) -> T:
        value = self._value
        if value is _unset:
            with self._lock:
                value = self._value
                if value is _unset:
                    value = self.initializer()
                    # the reference is assigned only once the value is fully built
                    self._value = value
        return value  # type: ignore[return-value]
