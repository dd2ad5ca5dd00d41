# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Rule variants and the parser that builds them from loose descriptors.

Callers describe rules positionally::

    ["cat", ["dog", "wolf"], {"age": lambda v: v > 3}]

``parse_rules`` turns that list into ``Required``, ``RequiredOneOf`` and
``CustomChecks`` instances once, before anything is evaluated, so shape errors
such as a non-callable predicate surface before any value is extracted.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..exceptions import InvalidRuleListError, InvalidValidationFunctionError
from .base import Predicate, ValidationOutcome, lookup

logger = logging.getLogger(__name__)


def invalid_value_message(name: Any, value: Any) -> str:
    return f"Invalid value of '{value}' was provided for parameter '{name}'."


def one_of_message(names: Iterable[Any]) -> str:
    listed = ", ".join(f"'{name}'" for name in names)
    return f"One of the following parameters must be included: {listed}."


class Rule(ABC):
    """A single validation rule evaluated against the provided values."""

    @abstractmethod
    def evaluate(self, provided: Mapping[str, Any], default_predicate: Predicate) -> ValidationOutcome:
        """Return the values this rule extracts and the errors it produces."""

    @property
    @abstractmethod
    def names(self) -> Tuple[Any, ...]:
        """Parameter names referenced by this rule, in evaluation order."""


def _check(provided: Mapping[str, Any], name: Any, predicate: Predicate) -> ValidationOutcome:
    outcome = ValidationOutcome()
    value = lookup(provided, name)
    # Only the literal True counts; truthy non-bools are rejected.
    if predicate(value) is True:
        outcome.params[name] = value
    else:
        outcome.errors.append(invalid_value_message(name, value))
    return outcome


@dataclass(frozen=True)
class Required(Rule):
    """The named parameter must satisfy the default predicate."""

    name: str

    @property
    def names(self) -> Tuple[Any, ...]:
        return (self.name,)

    def evaluate(self, provided: Mapping[str, Any], default_predicate: Predicate) -> ValidationOutcome:
        return _check(provided, self.name, default_predicate)


@dataclass(frozen=True)
class RequiredOneOf(Rule):
    """At least one of the named parameters must satisfy the default predicate.

    Every name that does is extracted, not just the first.
    """

    choices: Tuple[Any, ...]

    def __post_init__(self):
        object.__setattr__(self, "choices", tuple(self.choices))

    @property
    def names(self) -> Tuple[Any, ...]:
        return self.choices

    def evaluate(self, provided: Mapping[str, Any], default_predicate: Predicate) -> ValidationOutcome:
        outcome = ValidationOutcome()
        for name in self.choices:
            value = lookup(provided, name)
            if default_predicate(value):
                outcome.params[name] = value

        if not outcome.params:
            outcome.errors.append(one_of_message(self.choices))
        return outcome


@dataclass(frozen=True)
class CustomChecks(Rule):
    """Each named parameter must satisfy its own predicate."""

    checks: Tuple[Tuple[Any, Predicate], ...]

    def __post_init__(self):
        checks = tuple((name, predicate) for name, predicate in self.checks)
        for name, predicate in checks:
            if not callable(predicate):
                raise InvalidValidationFunctionError(name, predicate)
        object.__setattr__(self, "checks", checks)

    @classmethod
    def of(cls, mapping: Mapping[Any, Predicate]) -> "CustomChecks":
        return cls(tuple(mapping.items()))

    @property
    def names(self) -> Tuple[Any, ...]:
        return tuple(name for name, _ in self.checks)

    def evaluate(self, provided: Mapping[str, Any], default_predicate: Predicate) -> ValidationOutcome:
        outcome = ValidationOutcome()
        for name, predicate in self.checks:
            result = _check(provided, name, predicate)
            outcome.params.update(result.params)
            outcome.errors.extend(result.errors)
        return outcome


def parse_rule(descriptor: Any) -> Optional[Rule]:
    """Convert one loose descriptor into a rule, or ``None`` if it is skipped."""

    if isinstance(descriptor, Rule):
        return descriptor

    if isinstance(descriptor, str):
        return Required(descriptor) if descriptor else None

    if isinstance(descriptor, (list, tuple)):
        unhashable = [name for name in descriptor if not isinstance(name, Hashable)]
        if unhashable:
            raise InvalidRuleListError(
                descriptor,
                f"Parameter names in a one-of group must be hashable, got {unhashable!r}.",
            )
        return RequiredOneOf(tuple(descriptor)) if descriptor else None

    if isinstance(descriptor, Mapping):
        return CustomChecks.of(descriptor) if descriptor else None

    logger.debug("Skipping unsupported rule descriptor: %r", descriptor)
    return None


def parse_rules(descriptors: Sequence[Any]) -> List[Rule]:
    """Parse a rule list, dropping descriptors that contribute nothing."""

    rules: List[Rule] = []
    for descriptor in descriptors:
        rule = parse_rule(descriptor)
        if rule is not None:
            rules.append(rule)
    return rules


__all__ = [
    "CustomChecks",
    "Required",
    "RequiredOneOf",
    "Rule",
    "invalid_value_message",
    "one_of_message",
    "parse_rule",
    "parse_rules",
]
