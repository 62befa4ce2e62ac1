__all__ = (
    "dto",
    "exc",
    "rule",
    "AsciiClassifier",
    "Failure",
    "FailedResult",
    "GenerationContext",
    "OkResult",
    "Password",
    "RandomSource",
    "RuleResult",
    "Ruler",
    "RulerBuilder",
    "Settings",
    "create_from_rules",
    "load_settings",
)
__version__ = "0.1.0"

from . import dto, exc, rule
from ._conf import Settings, load_settings
from .classifier import AsciiClassifier
from .password import Password
from .result import FailedResult, Failure, OkResult, RuleResult
from .ruler import GenerationContext, RandomSource, Ruler, RulerBuilder, create_from_rules
