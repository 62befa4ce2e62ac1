"""
Outcome of validating a password.

A rule either passes, yielding the shared :data:`OK` result, or fails, yielding a
:class:`FailedResult` holding one or more :class:`Failure` records. A failure is data
for the caller to render (e.g. a localized message keyed by :attr:`Failure.reason`),
never an exception.
"""

import abc
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final, Literal

from typing_extensions import override

__all__ = ("Failure", "RuleResult", "OkResult", "FailedResult", "OK", "ok", "failed")


@dataclass(frozen=True, slots=True)
class Failure:
    """
    Attributes:
        reason: Stable reason code, e.g. ``"length.tooShort"``.
        parameters: Values to interpolate into the rendered message, in insertion order.
    """

    reason: str
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.reason, str):
            raise TypeError("reason must be a string, got %r" % (self.reason,))
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self.reason == other.reason and dict(self.parameters) == dict(
            other.parameters
        )

    @override
    def __hash__(self) -> int:
        # Parameter values may be unhashable, only the keys take part.
        return hash((self.reason, frozenset(self.parameters)))

    @override
    def __repr__(self) -> str:
        return "Failure(reason=%r, parameters=%r)" % (
            self.reason,
            dict(self.parameters),
        )


class RuleResult(abc.ABC):
    __slots__ = ()

    @property
    @abc.abstractmethod
    def is_valid(self) -> bool: ...

    @property
    @abc.abstractmethod
    def failures(self) -> tuple[Failure, ...]:
        """Every failure in the order it was reported, empty for a passing result."""

    def __bool__(self) -> bool:
        return self.is_valid


class OkResult(RuleResult):
    __slots__ = ()

    _instance: "OkResult | None" = None

    def __new__(cls) -> "OkResult":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    @override
    def is_valid(self) -> Literal[True]:
        return True

    @property
    @override
    def failures(self) -> tuple[Failure, ...]:
        return ()

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, OkResult)

    @override
    def __hash__(self) -> int:
        return hash(OkResult)

    @override
    def __repr__(self) -> str:
        return "RuleResult.ok()"


OK: Final = OkResult()


class FailedResult(RuleResult):
    """
    A failing result, built by chaining :meth:`add_failure` calls.

    The result stays open for additions until :meth:`finalize` is called. The engine
    only hands out finalized results.

    Example::

        >>> result = FailedResult().add_failure("length.tooShort", minimumLength=8)
        >>> result.finalize().failures
        (Failure(reason='length.tooShort', parameters={'minimumLength': 8}),)
    """

    __slots__ = ("_failures", "_finalized")

    def __init__(self, failures: Iterable[Failure] = ()) -> None:
        self._failures: list[Failure] = list(failures)
        self._finalized = False

    @property
    @override
    def is_valid(self) -> Literal[False]:
        return False

    @property
    @override
    def failures(self) -> tuple[Failure, ...]:
        return tuple(self._failures)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError("Cannot add failures to a finalized result")

    def add_failure(
        self,
        reason: str,
        parameters: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> "FailedResult":
        self._ensure_open()
        self._failures.append(Failure(reason, {**(parameters or {}), **kwargs}))
        return self

    def add_failures(self, failures: Iterable[Failure]) -> "FailedResult":
        self._ensure_open()
        self._failures.extend(failures)
        return self

    def finalize(self) -> "FailedResult":
        self._finalized = True
        return self

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FailedResult):
            return NotImplemented
        return self._failures == other._failures

    @override
    def __hash__(self) -> int:
        return hash((FailedResult, tuple(self._failures)))

    @override
    def __repr__(self) -> str:
        return "RuleResult.failed(%r)" % (self._failures,)


def ok() -> OkResult:
    return OK


def failed(reason: str | None = None, /, **parameters: Any) -> FailedResult:
    """
    Returns a finalized failing result.

    Without a ``reason`` the result holds no failure at all, which is what the
    always-failing rule reports.
    """
    result = FailedResult()
    if reason is not None:
        result.add_failure(reason, parameters)
    return result.finalize()
