"""Validation package - rule parsing and parameter checking.

This package provides the rule variants, option parsing and the
``ParameterValidator`` that evaluates a rule list against provided values.
"""

from .base import MISSING, ValidationOutcome, is_defined
from .options import ValidateOptions, ValidatorConfig
from .rules import CustomChecks, Required, RequiredOneOf, Rule, parse_rules
from .validator import ParameterValidator

__all__ = [
    "MISSING",
    "CustomChecks",
    "ParameterValidator",
    "Required",
    "RequiredOneOf",
    "Rule",
    "ValidateOptions",
    "ValidationOutcome",
    "ValidatorConfig",
    "is_defined",
    "parse_rules",
]
