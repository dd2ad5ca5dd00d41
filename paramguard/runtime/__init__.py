"""Runtime helpers - shared validator instance and convenience entry points."""

from .default import create_validator, get_parameter_validator, validate, validate_async

__all__ = [
    "create_validator",
    "get_parameter_validator",
    "validate",
    "validate_async",
]
