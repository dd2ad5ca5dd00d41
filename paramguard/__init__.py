# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""paramguard - declarative parameter validation.

.. code-block:: python

    from paramguard import validate

    params = validate(request_args, ["user_id", ["email", "phone"], {"limit": lambda v: v <= 100}])
"""

from .decorator import param_guard
from .exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    InvalidErrorClassError,
    InvalidOptionsError,
    InvalidOutputTargetError,
    InvalidPrefixError,
    InvalidRuleListError,
    InvalidValidationFunctionError,
    MissingParametersError,
    ParameterValidationError,
    ParamGuardError,
)
from .runtime import create_validator, get_parameter_validator, validate, validate_async
from .validation import (
    MISSING,
    CustomChecks,
    ParameterValidator,
    Required,
    RequiredOneOf,
    Rule,
    ValidateOptions,
    is_defined,
)

__version__ = "1.0.0"

__all__ = [
    "MISSING",
    "ConfigurationError",
    "CustomChecks",
    "InvalidConfigurationError",
    "InvalidErrorClassError",
    "InvalidOptionsError",
    "InvalidOutputTargetError",
    "InvalidPrefixError",
    "InvalidRuleListError",
    "InvalidValidationFunctionError",
    "MissingParametersError",
    "ParamGuardError",
    "ParameterValidationError",
    "ParameterValidator",
    "Required",
    "RequiredOneOf",
    "Rule",
    "ValidateOptions",
    "create_validator",
    "get_parameter_validator",
    "is_defined",
    "param_guard",
    "validate",
    "validate_async",
]
