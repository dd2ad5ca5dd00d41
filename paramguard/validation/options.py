# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Construction and per-call option parsing.

Option mappings accept snake_case keys plus the camelCase spellings used by
earlier releases (``defaultValidation``, ``addPrefix``, ``errorClass``,
``errorFactory``). Unknown keys are rejected rather than silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Type

from ..exceptions import (
    InvalidConfigurationError,
    InvalidErrorClassError,
    InvalidOptionsError,
    InvalidPrefixError,
    ParameterValidationError,
)
from .base import Predicate, is_defined

ErrorFactory = Callable[[str], BaseException]

_CONFIG_ALIASES = {
    "default_validation": "default_validation",
    "defaultValidation": "default_validation",
}

_OPTION_ALIASES = {
    "add_prefix": "add_prefix",
    "addPrefix": "add_prefix",
    "error_class": "error_class",
    "errorClass": "error_class",
    "error_factory": "error_factory",
    "errorFactory": "error_factory",
}


def _normalize(raw: Mapping[str, Any], aliases: Mapping[str, str], error_type) -> Dict[str, Any]:
    unknown = [key for key in raw if key not in aliases]
    if unknown:
        raise error_type(
            f"Unknown option(s): {sorted(map(str, unknown))}. "
            f"Supported options: {sorted(set(aliases.values()))}."
        )
    return {aliases[key]: value for key, value in raw.items()}


@dataclass(frozen=True)
class ValidatorConfig:
    """Instance-level configuration, fixed at construction."""

    default_validation: Optional[Predicate] = None

    def __post_init__(self):
        if self.default_validation is not None and not callable(self.default_validation):
            raise InvalidConfigurationError(
                "The optional default_validation option provided is not callable."
            )

    @property
    def predicate(self) -> Predicate:
        return self.default_validation or is_defined

    @classmethod
    def from_options(cls, options: Any = None, **overrides: Any) -> "ValidatorConfig":
        if options is None:
            values: Dict[str, Any] = {}
        elif isinstance(options, ValidatorConfig):
            values = {"default_validation": options.default_validation}
        elif isinstance(options, Mapping):
            values = _normalize(options, _CONFIG_ALIASES, InvalidConfigurationError)
            if "default_validation" in values and values["default_validation"] is None:
                raise InvalidConfigurationError(
                    "The optional default_validation option provided is not callable."
                )
        else:
            raise InvalidConfigurationError(
                f"Validator options must be a mapping, got {type(options).__name__}."
            )

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


@dataclass(frozen=True)
class ValidateOptions:
    """Options accepted by a single ``validate()`` call."""

    add_prefix: str = ""
    error_class: Optional[Type[BaseException]] = None
    error_factory: Optional[ErrorFactory] = None

    def __post_init__(self):
        if self.add_prefix is None:
            object.__setattr__(self, "add_prefix", "")
        if not isinstance(self.add_prefix, str):
            raise InvalidPrefixError(self.add_prefix)

        if self.error_class is not None:
            if not (isinstance(self.error_class, type) and issubclass(self.error_class, Exception)):
                raise InvalidErrorClassError(
                    f"The error_class provided was of type {type(self.error_class).__name__} "
                    "and was not an Exception subclass."
                )

        if self.error_factory is not None and not callable(self.error_factory):
            raise InvalidErrorClassError(
                f"The error_factory provided was of type {type(self.error_factory).__name__} "
                "and is not callable."
            )

    @classmethod
    def from_options(cls, options: Any = None, **overrides: Any) -> "ValidateOptions":
        if options is None:
            values: Dict[str, Any] = {}
        elif isinstance(options, ValidateOptions):
            values = {
                "add_prefix": options.add_prefix,
                "error_class": options.error_class,
                "error_factory": options.error_factory,
            }
        elif isinstance(options, Mapping):
            values = _normalize(options, _OPTION_ALIASES, InvalidOptionsError)
        else:
            raise InvalidOptionsError(
                f"validate() options must be a mapping, got {type(options).__name__}."
            )

        overrides = _normalize(overrides, _OPTION_ALIASES, InvalidOptionsError)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def build_error(self, message: str, errors) -> BaseException:
        """Create the exception raised for a failed validation pass."""

        if self.error_factory is not None:
            error = self.error_factory(message)
            if not isinstance(error, BaseException):
                raise InvalidErrorClassError(
                    f"The error_factory returned {type(error).__name__}, not an exception."
                )
            return error

        if self.error_class is None:
            return ParameterValidationError(message, errors)

        error = self.error_class(message)
        if isinstance(error, ParameterValidationError):
            error.errors = list(errors)
        return error


__all__ = [
    "ErrorFactory",
    "ValidateOptions",
    "ValidatorConfig",
]
