from .policy import CharacterRuleSpec, LengthSpec, PasswordPolicy, load_policy

__all__ = (
    "CharacterRuleSpec",
    "LengthSpec",
    "PasswordPolicy",
    "load_policy",
)
