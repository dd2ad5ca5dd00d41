# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide validator instance and standalone entry points."""

from __future__ import annotations

from typing import Any, Final, Optional

from ..validation import ParameterValidator
from ..validation.base import Predicate


_VALIDATOR: Final[ParameterValidator] = ParameterValidator()


def create_validator(options: Any = None, *, default_validation: Optional[Predicate] = None) -> ParameterValidator:
    """Build a new validator to be constructed once and passed around."""

    return ParameterValidator(options, default_validation=default_validation)


def get_parameter_validator() -> ParameterValidator:
    """Return the process-wide parameter validator instance."""

    return _VALIDATOR


def validate(*args: Any, **kwargs: Any) -> Any:
    """``ParameterValidator.validate`` on the shared default instance."""

    return get_parameter_validator().validate(*args, **kwargs)


async def validate_async(*args: Any, **kwargs: Any) -> Any:
    """``ParameterValidator.validate_async`` on the shared default instance."""

    return await get_parameter_validator().validate_async(*args, **kwargs)


__all__ = [
    "create_validator",
    "get_parameter_validator",
    "validate",
    "validate_async",
]
