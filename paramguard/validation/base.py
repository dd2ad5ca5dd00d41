# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core data structures shared by rule parsing and evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping

Predicate = Callable[[Any], Any]


class _Missing:
    """Marker for a parameter that is absent from the provided values."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def is_defined(value: Any) -> bool:
    """Default validity predicate: anything but ``MISSING`` passes."""

    return value is not MISSING


def lookup(provided: Mapping[str, Any], name: Any) -> Any:
    """Return ``provided[name]`` or ``MISSING`` when the name is absent."""

    return provided.get(name, MISSING)


@dataclass
class ValidationOutcome:
    """Extracted values and error messages produced by a single rule."""

    params: Dict[Any, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


__all__ = [
    "MISSING",
    "Predicate",
    "ValidationOutcome",
    "is_defined",
    "lookup",
]
