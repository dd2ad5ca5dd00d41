# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for paramguard.

Two tiers:

* :class:`ParameterValidationError` - the provided values failed one or more
  rules. Raised once per pass with every failure message joined together.
* :class:`ConfigurationError` and its subclasses - the call itself is
  malformed (bad rule list, non-callable predicate, ...). Raised immediately.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


class ParamGuardError(Exception):
    """Base class for every error raised by paramguard."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParameterValidationError(ParamGuardError):
    """Indicates that one or more parameter validation rules failed.

    ``message`` is the space-joined aggregate; ``errors`` keeps the
    individual failure messages in rule order.
    """

    def __init__(self, message: str, errors: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors is not None else [message]


class ConfigurationError(ParamGuardError, TypeError):
    """The validator was called or configured incorrectly."""


class InvalidConfigurationError(ConfigurationError):
    """Validator construction options are invalid."""


class MissingParametersError(ConfigurationError):
    """No provided-values mapping was supplied."""

    def __init__(self, message: str = "A params mapping is required."):
        super().__init__(message)


class InvalidRuleListError(ConfigurationError):
    """The rule list is not a sequence, or a one-of group names something unhashable."""

    def __init__(self, rules: Any, message: Optional[str] = None):
        super().__init__(
            message or f"Rules must be a list or tuple, got {type(rules).__name__}."
        )
        self.rules = rules


class InvalidOutputTargetError(ConfigurationError):
    """The output target cannot receive extracted parameters."""

    def __init__(self, target: Any):
        super().__init__(
            f"Invalid value of '{target}' was provided for the extracted params target."
        )
        self.target = target


class InvalidPrefixError(ConfigurationError):
    """The ``add_prefix`` option is not a string."""

    def __init__(self, prefix: Any):
        super().__init__(
            f"add_prefix option must be a string if provided, got {type(prefix).__name__}."
        )
        self.prefix = prefix


class InvalidErrorClassError(ConfigurationError):
    """The ``error_class``/``error_factory`` option cannot produce an exception."""


class InvalidOptionsError(ConfigurationError):
    """Per-call options are not a mapping or contain unknown keys."""


class InvalidValidationFunctionError(ConfigurationError):
    """A custom rule maps a parameter to something that is not callable."""

    def __init__(self, param_name: Any, function: Any):
        super().__init__(
            f"The validation function provided for the parameter '{param_name}' is not callable."
        )
        self.param_name = param_name
        self.function = function


__all__ = [
    "ParamGuardError",
    "ParameterValidationError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingParametersError",
    "InvalidRuleListError",
    "InvalidOutputTargetError",
    "InvalidPrefixError",
    "InvalidErrorClassError",
    "InvalidOptionsError",
    "InvalidValidationFunctionError",
]
