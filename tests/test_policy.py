import pytest

from password_ruler import rule
from password_ruler.dto import LengthSpec, PasswordPolicy, load_policy
from password_ruler.exc import EmptyRulesetError, PolicyValidationError
from password_ruler.result import OK


class TestLoadPolicy:
    def test_build_ruler_in_declaration_order(self):
        policy = load_policy(
            {
                "length": {"min": 12, "max": 64},
                "noWhitespace": True,
                "rules": [
                    {"charset": "asciiLowercaseLetters", "minChars": 2},
                    {"charset": "asciiDigits", "minChars": 2},
                ],
            }
        )
        assert policy.build_ruler().rules == (
            rule.length_is_between(12, 64),
            rule.ascii_lowercase_letters(2),
            rule.ascii_digits(2),
            rule.no_whitespace(),
        )

    def test_min_chars_defaults_to_one(self):
        policy = load_policy({"rules": [{"charset": "asciiSymbols"}]})
        assert policy.build_ruler().rules == (rule.ascii_symbols(1),)

    def test_field_names_are_accepted(self):
        policy = load_policy(
            {"no_whitespace": True, "rules": [{"charset": "asciiDigits", "min_chars": 3}]}
        )
        assert policy.build_ruler().rules == (rule.ascii_digits(3), rule.no_whitespace())

    def test_generated_password_satisfies_policy(self, rng):
        ruler = load_policy(
            {
                "length": {"min": 16},
                "noWhitespace": True,
                "rules": [
                    {"charset": "asciiUppercaseLetters", "minChars": 2},
                    {"charset": "asciiLowercaseLetters", "minChars": 2},
                    {"charset": "asciiDigits", "minChars": 2},
                    {"charset": "asciiSymbols", "minChars": 2},
                ],
            }
        ).build_ruler()
        for _ in range(20):
            assert ruler.validate_password(ruler.generate_password(16, rng)) == OK

    def test_empty_policy_has_no_rules(self):
        with pytest.raises(EmptyRulesetError):
            load_policy({}).build_ruler()

    @pytest.mark.parametrize(
        "payload",
        [
            {"rules": [{"charset": "emoji", "minChars": 1}]},
            {"rules": [{"charset": "asciiDigits", "minChars": 0}]},
            {"rules": [{"minChars": 1}]},
            {"rules": "asciiDigits"},
            {"length": {"min": 8, "max": 8}},
            {"length": {"max": 8}},
            {"length": {"exact": 8, "min": 2}},
            {"unknown": True},
        ],
    )
    def test_invalid_policy(self, payload):
        with pytest.raises(PolicyValidationError) as exc_info:
            load_policy(payload)
        assert str(exc_info.value).startswith("Invalid password policy.")


class TestLengthSpec:
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"exact": 8}, rule.length_is(8)),
            ({"min": 8}, rule.length_is_greater_than(8)),
            ({"min": 8, "max": 10}, rule.length_is_between(8, 10)),
        ],
    )
    def test_to_rule(self, payload, expected):
        assert LengthSpec.model_validate(payload).to_rule() == expected

    def test_policy_without_length(self):
        policy = PasswordPolicy(rules=())
        assert policy.length is None
