import itertools
import logging
import random
import secrets
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from . import _conf
from .exc import (
    EmptyRulesetError,
    InvalidArgumentError,
    LengthTooShortForRulesError,
    NoCharacterRulesError,
)
from .password import Password
from .result import FailedResult, RuleResult, ok
from .rule import AbstractRule, CharacterRule, Rule, is_character_rule
from .util.lazy import Memoized

__all__ = (
    "RandomSource",
    "GenerationContext",
    "Ruler",
    "RulerBuilder",
    "create_from_rules",
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """
    Anything able to draw an integer uniformly from ``[0, stop)``.

    Both :class:`random.Random` and :class:`secrets.SystemRandom` qualify. Only the
    latter should be used for real credentials.
    """

    def randrange(self, stop: int, /) -> int: ...


@dataclass(frozen=True, slots=True)
class GenerationContext:
    """
    What a ruler needs to know to generate passwords, derived from its character rules.

    Attributes:
        character_rules: The character rules, in the order of the ruler.
        alphabet: Every valid character of every character rule, without duplicates,
            in order of first appearance.
        minimum_length: The sum of the mandatory counts of all character rules.
    """

    character_rules: tuple[CharacterRule, ...]
    alphabet: str
    minimum_length: int

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> "GenerationContext | None":
        character_rules = tuple(rule for rule in rules if is_character_rule(rule))
        if not character_rules:
            return None
        return cls(
            character_rules=character_rules,
            alphabet="".join(
                dict.fromkeys(
                    itertools.chain.from_iterable(
                        rule.valid_characters for rule in character_rules
                    )
                )
            ),
            minimum_length=sum(rule.mandatory_count for rule in character_rules),
        )


def _default_random_source(secure: bool) -> RandomSource:
    return secrets.SystemRandom() if secure else random.Random()


@dataclass(frozen=True, slots=True, eq=False)
class Ruler:
    """
    An immutable set of rules, used both to validate and to generate passwords.

    A ruler is safe to share between threads. The only state it derives lazily, its
    :class:`GenerationContext`, is computed at most once.

    Example::

        >>> from password_ruler import rule
        >>> ruler = create_from_rules(
        ...     [rule.ascii_lowercase_letters(2), rule.ascii_digits(2)]
        ... )
        >>> password = ruler.generate_password(8, random.Random(42))
        >>> ruler.validate_password(password).is_valid
        True
    """

    rules: tuple[Rule, ...]
    _context: Memoized[GenerationContext | None] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.rules:
            raise EmptyRulesetError("A ruler requires at least one rule", ctx=None)
        object.__setattr__(
            self, "_context", Memoized(self._derive_generation_context)
        )

    @classmethod
    def builder(cls) -> "RulerBuilder":
        return RulerBuilder()

    @classmethod
    def create_from_rules(cls, rules: Iterable[Rule]) -> "Ruler":
        return RulerBuilder().add_rules(rules).build()

    def _derive_generation_context(self) -> GenerationContext | None:
        context = GenerationContext.from_rules(self.rules)
        if context is None:
            logger.debug("no character rule found, generation is unavailable")
        else:
            logger.debug(
                "derived generation context (character rules: %d, alphabet size: %d, "
                "minimum length: %d)",
                len(context.character_rules),
                len(context.alphabet),
                context.minimum_length,
            )
        return context

    @property
    def generation_context(self) -> GenerationContext | None:
        return self._context.get()

    def validate_password(self, password: str) -> RuleResult:
        """
        Validates the password against every rule and aggregates their failures.

        Failures are reported in the order of the rules, then in the order each rule
        reported them.

        A rule that fails without reporting any failure, such as
        :func:`~password_ruler.rule.always_failed`, still makes the outcome a
        :class:`~password_ruler.result.FailedResult`, whose failure list may then be
        empty.

        Raises:
            InvalidArgumentError: If ``password`` is not a string.
        """
        pwd = Password(password)
        result = FailedResult()
        is_failed = False

        for rule in self.rules:
            rule_result = rule.validate(pwd)
            if not rule_result.is_valid:
                is_failed = True
                result.add_failures(rule_result.failures)

        if is_failed:
            return result.finalize()
        return ok()

    def generate_password(
        self, length: int | None = None, random_source: RandomSource | None = None
    ) -> str:
        """
        Generates a random password satisfying every character rule of this ruler.

        Each character rule first contributes its mandatory count of characters, the
        remaining positions are drawn from the whole alphabet, and the result is
        shuffled (Fisher-Yates). Length and whitespace rules are not taken into account,
        it's up to the caller to combine them with compatible character rules.

        Args:
            length: The exact length of the password. Defaults to
                ``Settings.default_length``.
            random_source: Source of uniformly distributed integers. Defaults to a
                :class:`secrets.SystemRandom` unless ``Settings.secure_random`` is off.

        Raises:
            InvalidArgumentError: If ``length`` is not a positive integer.
            NoCharacterRulesError: If this ruler holds no character rule.
            LengthTooShortForRulesError: If ``length`` is lower than the sum of the
                mandatory counts of the character rules.
        """
        if length is None:
            length = _conf.settings.default_length
        if random_source is None:
            random_source = _default_random_source(_conf.settings.secure_random)

        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidArgumentError(
                "length must be a positive integer, got {ctx[value]!r}",
                ctx=InvalidArgumentError.Context(argument="length", value=length),
            )

        context = self.generation_context
        if context is None:
            raise NoCharacterRulesError(
                "Cannot generate a password without any character rule", ctx=None
            )
        if length < context.minimum_length:
            raise LengthTooShortForRulesError(
                "Cannot generate a password of {ctx[length]} characters, the rules "
                "require at least {ctx[minimum_length]}",
                ctx=LengthTooShortForRulesError.Context(
                    length=length, minimum_length=context.minimum_length
                ),
            )

        buf = [""] * length
        offset = 0

        for rule in context.character_rules:
            chars = rule.valid_characters
            for _ in range(rule.mandatory_count):
                buf[offset] = chars[random_source.randrange(len(chars))]
                offset += 1

        alphabet = context.alphabet
        while offset < length:
            buf[offset] = alphabet[random_source.randrange(len(alphabet))]
            offset += 1

        for i in range(length - 1, 0, -1):
            j = random_source.randrange(i + 1)
            buf[i], buf[j] = buf[j], buf[i]

        logger.debug("generated a password of %d characters", length)
        return "".join(buf)


@dataclass(slots=True)
class RulerBuilder:
    """
    Collects rules for a :class:`Ruler`.

    Rules keep the order they were added in. A rule equal to one already added is
    silently dropped. Not thread-safe.

    Example::

        >>> from password_ruler import rule
        >>> ruler = (
        ...     RulerBuilder()
        ...     .add_rule(rule.length_is_greater_than(12))
        ...     .add_rule(rule.no_whitespace())
        ...     .build()
        ... )
    """

    _rules: dict[Rule, None] = field(init=False, default_factory=dict)
    _non_empty: bool = field(init=False, default=False)

    def add_rule(self, rule: Rule) -> "RulerBuilder":
        if not isinstance(rule, AbstractRule):
            raise InvalidArgumentError(
                "Expected a rule, got {ctx[value]!r}",
                ctx=InvalidArgumentError.Context(argument="rule", value=rule),
            )
        self._rules.setdefault(rule, None)
        self._non_empty = True
        return self

    def add_rules(self, rules: Iterable[Rule]) -> "RulerBuilder":
        for rule in rules:
            self.add_rule(rule)
        return self

    def build(self) -> Ruler:
        """
        Raises:
            EmptyRulesetError: If no rule was added to this builder.
        """
        if not self._non_empty:
            raise EmptyRulesetError("No rules were added to this builder", ctx=None)

        ruler = Ruler(tuple(self._rules))
        logger.debug("built a ruler with %d rules", len(ruler.rules))
        return ruler


def create_from_rules(rules: Iterable[Rule]) -> Ruler:
    """
    Creates a ruler holding every rule of ``rules``.

    Raises:
        EmptyRulesetError: If ``rules`` is empty.
    """
    return Ruler.create_from_rules(rules)
