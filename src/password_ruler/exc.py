from dataclasses import dataclass
from typing import Any

from typing_extensions import TypedDict, override

__all__ = (
    "ApplicationError",
    "ContractViolationError",
    "InvalidArgumentError",
    "EmptyRulesetError",
    "NoCharacterRulesError",
    "LengthTooShortForRulesError",
    "PolicyValidationError",
    "ConfigValidationError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class ContractViolationError(ApplicationError):
    """
    Base class for programmer errors.

    Unlike a failed validation, which is returned as a
    :class:`~password_ruler.result.FailedResult`, a contract violation means the engine
    was misused or misconfigured and must not be retried or silently defaulted.
    """


@dataclass(slots=True)
class InvalidArgumentError(ContractViolationError):
    """Raised when a rule factory or an engine operation receives an illegal argument."""

    class Context(TypedDict):
        """
        Attributes:
            argument: The name of the offending argument.
            value: The value that was rejected.
        """

        argument: str
        value: Any

    ctx: Context


@dataclass(slots=True)
class EmptyRulesetError(ContractViolationError):
    """Raised when a ruler is built without a single rule."""


@dataclass(slots=True)
class NoCharacterRulesError(ContractViolationError):
    """
    Raised when a password is requested from a ruler that holds no character rule.

    Without at least one character rule there is no alphabet to draw characters from.
    """


@dataclass(slots=True)
class LengthTooShortForRulesError(ContractViolationError):
    """
    Raised when the requested password length can't hold every mandatory character.
    """

    class Context(TypedDict):
        """
        Attributes:
            length: The requested password length.
            minimum_length: The sum of the mandatory counts of all character rules.
        """

        length: int
        minimum_length: int

    ctx: Context


@dataclass(slots=True)
class PolicyValidationError(ApplicationError):
    @override
    def format_message(self) -> str:
        return "Invalid password policy.\n\n%s" % self.message


@dataclass(slots=True)
class ConfigValidationError(ApplicationError):
    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message
