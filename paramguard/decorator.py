# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# paramguard/decorator.py

import anyio
import asyncio
import functools
import inspect
import logging
import concurrent.futures as _cf
import contextvars as _ctxvars
from typing import Any, Callable, Dict, Optional, Sequence, Type

from .exceptions import ConfigurationError, InvalidRuleListError, ParameterValidationError
from .runtime import get_parameter_validator
from .telemetry import get_tracer
from .validation import ParameterValidator, ValidateOptions, parse_rules

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def param_guard(
    rules: Sequence[Any],
    *,
    validator: Optional[ParameterValidator] = None,
    error_class: Optional[Type[BaseException]] = None,
    error_factory: Optional[Callable[[str], BaseException]] = None,
    on_invalid: Any = _sentinel,
):
    """
    Validate a function's call arguments before the function runs.

    The arguments the caller actually passed are bound to the function's
    signature (defaults are *not* applied, so an omitted parameter counts as
    missing) and checked against ``rules`` with the same semantics as
    :meth:`ParameterValidator.validate`. Works for sync and async functions.

    :param rules: Rule descriptors, e.g. ``["query", ["limit", "page_size"]]``.
    :param validator: Optional. The validator to use. Defaults to the
                      process-wide instance.
    :param error_class: Optional. Exception class raised on failure instead of
                        :class:`ParameterValidationError`.
    :param error_factory: Optional. Callable building the exception from the
                          aggregate message; wins over ``error_class``.
    :param on_invalid: Optional. If it is a callable, it is invoked with the
                       validation error and its result returned. An ``async def``
                       handler on a sync function is run to completion
                       before the wrapper returns. Any other
                       value is returned directly. If not provided, the error
                       is raised.

    .. code-block:: python

        from paramguard import param_guard

        @param_guard(["user_id", ["email", "phone"], {"limit": lambda v: 0 < v <= 100}])
        def lookup_user(user_id=None, email=None, phone=None, limit=10): ...

        # Return a static value instead of raising
        @param_guard(["token"], on_invalid=None)
        def refresh(token=None): ...

    Rules naming a parameter the function does not declare raise
    :class:`ConfigurationError` at decoration time, unless the function
    accepts ``**kwargs``.
    """

    if not isinstance(rules, (list, tuple)):
        raise InvalidRuleListError(rules)
    parsed = parse_rules(rules)
    options = ValidateOptions(error_class=error_class, error_factory=error_factory)

    def decorator(func: Callable):
        check_name = f"{func.__module__}.{func.__qualname__}"
        signature = inspect.signature(func)
        var_kwargs_name = next(
            (
                name
                for name, param in signature.parameters.items()
                if param.kind == inspect.Parameter.VAR_KEYWORD
            ),
            None,
        )

        if var_kwargs_name is None:
            referenced = {name for rule in parsed for name in rule.names}
            unknown = referenced - set(signature.parameters)
            if unknown:
                logger.error(
                    "Parameter rules for '%s' reference unknown arguments: %s",
                    check_name,
                    ", ".join(sorted(map(str, unknown))),
                )
                raise ConfigurationError(
                    f"Parameter rules for '{check_name}' reference undefined parameter(s): "
                    f"{sorted(map(str, unknown))}"
                )

        def _collect_arguments(args, kwargs) -> Dict[str, Any]:
            arguments = dict(signature.bind(*args, **kwargs).arguments)
            if var_kwargs_name is not None:
                arguments.update(arguments.pop(var_kwargs_name, {}))
            return arguments

        def _check(args, kwargs) -> Optional[BaseException]:
            """Return the error to report, or None when the arguments are valid."""

            active = validator if validator is not None else get_parameter_validator()
            arguments = _collect_arguments(args, kwargs)

            with get_tracer("paramguard").start_as_current_span(
                f"paramguard.check:{check_name}",
                attributes={"paramguard.function": check_name},
            ) as span:
                try:
                    active.validate(arguments, parsed)
                except ParameterValidationError as exc:
                    span.set_attribute("paramguard.valid", False)
                    logger.debug("Rejected call to '%s': %s", check_name, exc.message)
                    error = options.build_error(exc.message, exc.errors)
                    if error is not exc:
                        error.__cause__ = exc
                    return error

                span.set_attribute("paramguard.valid", True)
                return None

        def _handle_invalid(error: BaseException):
            """Executes the user-supplied ``on_invalid`` handler or raises by default."""

            if on_invalid is _sentinel:
                raise error

            # Static value supplied (e.g. None/False)
            if not callable(on_invalid):
                return on_invalid

            return on_invalid(error)

        def _run_handler_sync(error: BaseException):
            """Run an async ``on_invalid`` handler to completion from sync code."""

            # Detect if an event loop is already running in this thread.
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                # No loop → run inline (fast path)
                return anyio.run(on_invalid, error)

            # Loop running: drive the handler on a worker thread with its own loop.
            # Copy current contextvars so request-scoped state propagates.
            _ctx = _ctxvars.copy_context()
            with _cf.ThreadPoolExecutor(max_workers=1) as _exec:
                _future = _exec.submit(lambda: _ctx.run(asyncio.run, on_invalid(error)))
                return _future.result()

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""

            error = _check(args, kwargs)
            if error is not None:
                if inspect.iscoroutinefunction(on_invalid):
                    return _run_handler_sync(error)
                return _handle_invalid(error)
            return func(*args, **kwargs)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions."""

            error = _check(args, kwargs)
            if error is not None:
                result = _handle_invalid(error)
                if inspect.isawaitable(result):
                    result = await result
                return result
            return await func(*args, **kwargs)

        # Choose the appropriate wrapper based on whether the decorated function is sync or async
        if inspect.iscoroutinefunction(func):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        # Attach the parsed rules for introspection if needed
        wrapper.__paramguard_rules__ = parsed
        return wrapper

    return decorator


__all__ = ["param_guard"]
