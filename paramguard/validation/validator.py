# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Parameter validator - checks provided values against a rule list."""

from __future__ import annotations

import logging
import time
from collections.abc import MutableMapping
from typing import Any, List, Mapping, Optional, Sequence

from ..exceptions import (
    InvalidOutputTargetError,
    InvalidRuleListError,
    MissingParametersError,
)
from ..telemetry.metrics import record_validation_metrics
from .base import Predicate
from .options import ValidateOptions, ValidatorConfig
from .rules import parse_rules

logger = logging.getLogger(__name__)


class ParameterValidator:
    """Performs validation on parameters contained in a mapping.

    Each item of the rule list is interpreted in order:

    * a string names a parameter that must satisfy the default predicate;
    * a list or tuple names parameters of which at least one must satisfy it;
    * a mapping pairs parameter names with predicates that must return
      exactly ``True``.

    Example::

        validator = ParameterValidator()
        validator.validate(
            params,
            ["required0", "required1", ["either_this", "or_that"], {"limit": lambda v: v > 30}],
        )
    """

    def __init__(self, options: Any = None, *, default_validation: Optional[Predicate] = None):
        self._config = ValidatorConfig.from_options(options, default_validation=default_validation)

    @property
    def default_validation(self) -> Predicate:
        """The configured default predicate, or ``is_defined``."""

        return self._config.predicate

    def validate(
        self,
        provided: Mapping[str, Any],
        rules: Sequence[Any],
        extracted: Any = None,
        options: Any = None,
        **option_kwargs: Any,
    ) -> Any:
        """Validate *provided* against *rules* and return the extracted values.

        Args:
            provided: Names and values of the provided parameters.
            rules: Ordered rule descriptors (see class docstring).
            extracted: Target receiving the validated values. ``None`` creates
                a new dict; a mutable mapping or an object with attributes
                (for example ``self``) is updated in place and returned.
            options: Mapping or :class:`ValidateOptions` with ``add_prefix``,
                ``error_class`` or ``error_factory``. Keyword arguments of the
                same names override it.

        Returns:
            The output target holding every extracted value.

        Raises:
            ParameterValidationError: One or more rules failed (or the
                configured ``error_class``/``error_factory`` exception).
            ConfigurationError: The call itself is malformed.
        """

        call_options = ValidateOptions.from_options(options, **option_kwargs)
        target = self._resolve_target(extracted)

        if provided is None:
            raise MissingParametersError()
        if not isinstance(provided, Mapping):
            raise MissingParametersError(
                f"A params mapping is required, got {type(provided).__name__}."
            )

        if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence):
            raise InvalidRuleListError(rules)

        parsed = parse_rules(rules)

        started_at = time.perf_counter()
        errors: List[str] = []
        for rule in parsed:
            outcome = rule.evaluate(provided, self.default_validation)
            self._assign(target, outcome.params, call_options.add_prefix)
            errors.extend(outcome.errors)

        if errors:
            record_validation_metrics(
                "failed", started_at, rule_count=len(parsed), error_count=len(errors)
            )
            logger.debug("Parameter validation failed with %d error(s)", len(errors))
            raise call_options.build_error(" ".join(errors), errors)

        record_validation_metrics("passed", started_at, rule_count=len(parsed), error_count=0)
        return target

    async def validate_async(self, *args: Any, **kwargs: Any) -> Any:
        """Same as :meth:`validate`, but awaitable.

        Nothing is evaluated until the coroutine is awaited, so errors always
        surface at the ``await`` rather than at the call site.
        """

        return self.validate(*args, **kwargs)

    @staticmethod
    def _resolve_target(extracted: Any) -> Any:
        if extracted is None:
            return {}
        if isinstance(extracted, MutableMapping) or hasattr(extracted, "__dict__"):
            return extracted
        raise InvalidOutputTargetError(extracted)

    @staticmethod
    def _assign(target: Any, params: Mapping[Any, Any], prefix: str = "") -> None:
        """Like ``dict.update()``, but prefixes every key."""

        for name, value in params.items():
            key = f"{prefix}{name}" if prefix else name
            if isinstance(target, MutableMapping):
                target[key] = value
            else:
                setattr(target, str(key), value)


__all__ = ["ParameterValidator"]
