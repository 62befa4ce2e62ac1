from collections.abc import Callable, Mapping
from typing import Annotated, Any, Literal, Optional

import annotated_types
import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from .. import rule
from ..exc import PolicyValidationError
from ..ruler import Ruler, RulerBuilder
from ..util.model import convert_errors

__all__ = ("CharacterRuleSpec", "LengthSpec", "PasswordPolicy", "load_policy")

Charset = Literal[
    "asciiUppercaseLetters",
    "asciiLowercaseLetters",
    "asciiLetters",
    "asciiDigits",
    "asciiAlphanumeric",
    "asciiSymbols",
]

CHARSET_FACTORIES: dict[Charset, Callable[[int], rule.CharacterRule]] = {
    "asciiUppercaseLetters": rule.ascii_uppercase_letters,
    "asciiLowercaseLetters": rule.ascii_lowercase_letters,
    "asciiLetters": rule.ascii_letters,
    "asciiDigits": rule.ascii_digits,
    "asciiAlphanumeric": rule.ascii_alphanumeric,
    "asciiSymbols": rule.ascii_symbols,
}

_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class CharacterRuleSpec(BaseModel):
    model_config = _config

    charset: Charset
    min_chars: Annotated[int, annotated_types.Ge(1)] = 1

    def to_rule(self) -> rule.CharacterRule:
        return CHARSET_FACTORIES[self.charset](self.min_chars)


class LengthSpec(BaseModel):
    """
    Either an ``exact`` length, or a ``min`` bound with an optional ``max`` bound.
    """

    model_config = _config

    exact: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    min: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    max: Optional[Annotated[int, annotated_types.Ge(1)]] = None

    @pydantic.model_validator(mode="after")
    def check_bounds(self) -> Self:
        if self.exact is not None:
            if self.min is not None or self.max is not None:
                raise ValueError("'exact' can't be combined with 'min' or 'max'")
        elif self.min is None:
            raise ValueError("input must include either 'exact' or 'min'")
        elif self.max is not None and self.min >= self.max:
            raise ValueError("'min' must be lower than 'max'")
        return self

    def to_rule(self) -> rule.LengthRule:
        if self.exact is not None:
            return rule.length_is(self.exact)
        assert self.min is not None
        if self.max is None:
            return rule.length_is_greater_than(self.min)
        return rule.length_is_between(self.min, self.max)


class PasswordPolicy(BaseModel):
    """
    Declarative description of a ruler.

    Example::

        >>> policy = PasswordPolicy.model_validate(
        ...     {
        ...         "length": {"min": 12, "max": 64},
        ...         "noWhitespace": True,
        ...         "rules": [
        ...             {"charset": "asciiLowercaseLetters", "minChars": 2},
        ...             {"charset": "asciiDigits", "minChars": 2},
        ...         ],
        ...     }
        ... )
        >>> policy.build_ruler().rules
        (length_is_between(12, 64), ascii_lowercase_letters(2), ascii_digits(2), no_whitespace())
    """

    model_config = _config

    length: Optional[LengthSpec] = None
    no_whitespace: bool = False
    rules: tuple[CharacterRuleSpec, ...] = Field(default=())

    def build_ruler(self) -> Ruler:
        """
        Raises:
            EmptyRulesetError: If the policy declares no rule at all.
        """
        builder = RulerBuilder()
        if self.length is not None:
            builder.add_rule(self.length.to_rule())
        builder.add_rules(charset_rule.to_rule() for charset_rule in self.rules)
        if self.no_whitespace:
            builder.add_rule(rule.no_whitespace())
        return builder.build()


def load_policy(payload: Mapping[str, Any]) -> PasswordPolicy:
    """
    Raises:
        PolicyValidationError: If ``payload`` doesn't describe a valid policy.
    """
    try:
        return PasswordPolicy.model_validate(payload)
    except pydantic.ValidationError as ex:
        raise PolicyValidationError(str(convert_errors(ex)), ctx=None) from ex
