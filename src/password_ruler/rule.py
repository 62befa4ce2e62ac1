"""
Password rules and the factories that build them.

Every rule is an immutable value exposing ``validate(password) -> RuleResult``. Rules
compare by value, so two rules built by the same factory call with the same arguments
are the same rule as far as a :class:`~password_ruler.ruler.Ruler` is concerned.

Factories and rule constructors check their arguments eagerly and raise
:class:`~password_ruler.exc.InvalidArgumentError` on illegal input.
"""

import abc
import sys
from dataclasses import dataclass, field
from typing import Final

from typing_extensions import TypeGuard, override

from . import classifier
from .classifier import AsciiClassifier, is_whitespace
from .exc import InvalidArgumentError
from .password import Password
from .result import RuleResult, failed, ok

__all__ = (
    "AbstractRule",
    "LengthRule",
    "CharacterRule",
    "NoWhitespaceRule",
    "OkRule",
    "FailedRule",
    "Rule",
    "is_character_rule",
    "length_is",
    "length_is_between",
    "length_is_greater_than",
    "no_whitespace",
    "always_ok",
    "always_failed",
    "ascii_uppercase_letters",
    "ascii_lowercase_letters",
    "ascii_letters",
    "ascii_digits",
    "ascii_alphanumeric",
    "ascii_symbols",
)

UNBOUNDED: Final = sys.maxsize
"""Maximum length of a rule that only sets a lower bound."""


@dataclass(frozen=True, slots=True)
class AbstractRule:
    @abc.abstractmethod
    def validate(self, password: Password) -> RuleResult:
        """
        Validates a password against the requirements of this rule.

        Returns:
            :data:`~password_ruler.result.OK` if the password satisfies the rule, a
            finalized :class:`~password_ruler.result.FailedResult` otherwise.
        """


@dataclass(frozen=True, slots=True)
class LengthRule(AbstractRule):
    """
    Both bounds are inclusive.

    Failure reasons:
        - ``"length.tooShort"`` with the parameter ``"minimumLength"``;
        - ``"length.tooLong"`` with the parameter ``"maximumLength"``.
    """

    minimum_length: int
    maximum_length: int = UNBOUNDED

    def __post_init__(self) -> None:
        _check_argument(
            self.minimum_length >= 0,
            "minimum_length",
            self.minimum_length,
            "minimum_length must be >= 0, got {ctx[value]!r}",
        )
        _check_argument(
            self.minimum_length <= self.maximum_length,
            "maximum_length",
            self.maximum_length,
            "maximum_length must not be lower than minimum_length (%d), got "
            "{ctx[value]!r}" % self.minimum_length,
        )

    @override
    def validate(self, password: Password) -> RuleResult:
        length = len(password.text)
        if length < self.minimum_length:
            return failed("length.tooShort", minimumLength=self.minimum_length)
        if length > self.maximum_length:
            return failed("length.tooLong", maximumLength=self.maximum_length)
        return ok()

    @override
    def __repr__(self) -> str:
        if self.minimum_length == self.maximum_length:
            return "length_is(%d)" % self.minimum_length
        if self.maximum_length == UNBOUNDED:
            return "length_is_greater_than(%d)" % self.minimum_length
        return "length_is_between(%d, %d)" % (self.minimum_length, self.maximum_length)


@dataclass(frozen=True, slots=True)
class CharacterRule(AbstractRule):
    """
    Requires a minimum number of characters out of a given set.

    Besides validating, a character rule drives password generation: its
    :attr:`valid_characters` are drawn from and its :attr:`mandatory_count` is how many
    of them a generated password holds at least.

    Failure reason:
        :attr:`reason` with the parameters ``"characters"`` and
        ``"numberOfCharacters"``.
    """

    valid_characters: str
    matcher: AsciiClassifier = field(repr=False)
    mandatory_count: int
    reason: str
    factory_name: str = field(default="character_rule", compare=False)

    def __post_init__(self) -> None:
        _check_argument(
            len(self.valid_characters) > 0,
            "valid_characters",
            self.valid_characters,
            "valid_characters must not be empty",
        )
        _check_argument(
            self.mandatory_count > 0,
            "mandatory_count",
            self.mandatory_count,
            "mandatory_count must be greater than 0, got {ctx[value]!r}",
        )

    @override
    def validate(self, password: Password) -> RuleResult:
        if self.matcher.count_matches(password.text) >= self.mandatory_count:
            return ok()
        return failed(
            self.reason,
            characters=self.valid_characters,
            numberOfCharacters=self.mandatory_count,
        )

    @override
    def __repr__(self) -> str:
        return "%s(%d)" % (self.factory_name, self.mandatory_count)


@dataclass(frozen=True, slots=True)
class NoWhitespaceRule(AbstractRule):
    """
    Rejects any password holding a whitespace character, ASCII or not.

    Failure reason:
        ``"noWhitespace"`` without parameters.
    """

    @override
    def validate(self, password: Password) -> RuleResult:
        if any(is_whitespace(char) for char in password.text):
            return failed("noWhitespace")
        return ok()

    @override
    def __repr__(self) -> str:
        return "no_whitespace()"


@dataclass(frozen=True, slots=True)
class OkRule(AbstractRule):
    @override
    def validate(self, password: Password) -> RuleResult:
        return ok()

    @override
    def __repr__(self) -> str:
        return "always_ok()"


@dataclass(frozen=True, slots=True)
class FailedRule(AbstractRule):
    """Always fails, without reporting a single failure."""

    @override
    def validate(self, password: Password) -> RuleResult:
        return failed()

    @override
    def __repr__(self) -> str:
        return "always_failed()"


Rule = LengthRule | CharacterRule | NoWhitespaceRule | OkRule | FailedRule
"""Closed set of rule kinds a ruler accepts."""

NO_WHITESPACE: Final = NoWhitespaceRule()
OK_RULE: Final = OkRule()
FAILED_RULE: Final = FailedRule()


def is_character_rule(rule: Rule) -> TypeGuard[CharacterRule]:
    return isinstance(rule, CharacterRule)


def _check_argument(condition: bool, argument: str, value: object, message: str) -> None:
    if not condition:
        raise InvalidArgumentError(
            message,
            ctx=InvalidArgumentError.Context(argument=argument, value=value),
        )


def length_is(length: int) -> LengthRule:
    """
    Accepts passwords of exactly ``length`` characters.

    Raises:
        InvalidArgumentError: If ``length`` is negative.
    """
    _check_argument(
        length >= 0, "length", length, "length must be >= 0, got {ctx[value]!r}"
    )
    return LengthRule(length, length)


def length_is_between(minimum_length: int, maximum_length: int) -> LengthRule:
    """
    Accepts passwords whose length lies within both bounds, inclusive.

    Raises:
        InvalidArgumentError: If ``minimum_length`` is negative or not lower than
            ``maximum_length``.
    """
    _check_argument(
        minimum_length >= 0,
        "minimum_length",
        minimum_length,
        "minimum_length must be >= 0, got {ctx[value]!r}",
    )
    _check_argument(
        minimum_length < maximum_length,
        "maximum_length",
        maximum_length,
        "maximum_length must be greater than minimum_length (%d), got {ctx[value]!r}"
        % minimum_length,
    )
    return LengthRule(minimum_length, maximum_length)


def length_is_greater_than(minimum_length: int) -> LengthRule:
    """
    Accepts passwords of at least ``minimum_length`` characters.

    Raises:
        InvalidArgumentError: If ``minimum_length`` is negative.
    """
    _check_argument(
        minimum_length >= 0,
        "minimum_length",
        minimum_length,
        "minimum_length must be >= 0, got {ctx[value]!r}",
    )
    return LengthRule(minimum_length)


def no_whitespace() -> NoWhitespaceRule:
    return NO_WHITESPACE


def always_ok() -> OkRule:
    return OK_RULE


def always_failed() -> FailedRule:
    return FAILED_RULE


def _character_rule(
    factory_name: str,
    characters: str,
    matcher: AsciiClassifier,
    number_of_characters: int,
    reason: str,
) -> CharacterRule:
    _check_argument(
        number_of_characters > 0,
        "number_of_characters",
        number_of_characters,
        "number_of_characters must be greater than 0, got {ctx[value]!r}",
    )
    return CharacterRule(
        valid_characters=characters,
        matcher=matcher,
        mandatory_count=number_of_characters,
        reason=reason,
        factory_name=factory_name,
    )


def ascii_uppercase_letters(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_uppercase_letters",
        classifier.ASCII_UPPERCASE_LETTER_CHARACTERS,
        classifier.ASCII_UPPERCASE_LETTERS,
        number_of_characters,
        "characters.asciiUppercaseLetters",
    )


def ascii_lowercase_letters(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_lowercase_letters",
        classifier.ASCII_LOWERCASE_LETTER_CHARACTERS,
        classifier.ASCII_LOWERCASE_LETTERS,
        number_of_characters,
        "characters.asciiLowercaseLetters",
    )


def ascii_letters(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_letters",
        classifier.ASCII_LETTER_CHARACTERS,
        classifier.ASCII_LETTERS,
        number_of_characters,
        "characters.asciiLetters",
    )


def ascii_digits(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_digits",
        classifier.ASCII_DIGIT_CHARACTERS,
        classifier.ASCII_DIGITS,
        number_of_characters,
        "characters.asciiDigits",
    )


def ascii_alphanumeric(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_alphanumeric",
        classifier.ASCII_ALPHANUMERIC_CHARACTERS,
        classifier.ASCII_ALPHANUMERIC,
        number_of_characters,
        "characters.asciiAlphanumeric",
    )


def ascii_symbols(number_of_characters: int) -> CharacterRule:
    return _character_rule(
        "ascii_symbols",
        classifier.ASCII_SYMBOL_CHARACTERS,
        classifier.ASCII_SYMBOLS,
        number_of_characters,
        "characters.asciiSymbols",
    )
