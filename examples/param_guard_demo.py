# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""paramguard Demo: Declarative Parameter Validation.

This demo walks through the three rule shapes, aggregate error reporting,
extracting into an existing object, and the @param_guard decorator.

Run with:
    python examples/param_guard_demo.py
"""

import asyncio

from paramguard import (
    ParameterValidationError,
    ParameterValidator,
    param_guard,
    validate,
    validate_async,
)


def _banner(title):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_rule_shapes():
    """Show required, one-of and custom predicate rules together."""
    _banner("DEMO 1: Rule Shapes")

    request = {"user_id": "u-42", "phone": "555-0100", "limit": 25, "debug": True}
    rules = ["user_id", ["email", "phone"], {"limit": lambda value: 0 < value <= 100}]

    print(f"\n  Provided: {request}")
    print(f"  Rules:    ['user_id', ['email', 'phone'], {{'limit': <predicate>}}]")
    print(f"  Extracted: {validate(request, rules)}")
    print("\n  What happened:")
    print("    - 'user_id' was required and present")
    print("    - only 'phone' of the one-of group was present, so only it was extracted")
    print("    - 'debug' was never mentioned by a rule, so it was left out")


def demo_aggregate_errors():
    """Show that every failing rule is reported in one error."""
    _banner("DEMO 2: Aggregate Errors")

    try:
        validate({"limit": 500}, ["user_id", ["email", "phone"], {"limit": lambda value: value <= 100}])
    except ParameterValidationError as e:
        print("\n  Error message:")
        print(f"    {e}")
        print("\n  Individual failures:")
        for error in e.errors:
            print(f"    - {error}")


def demo_existing_target():
    """Show extraction onto an object with a private-attribute prefix."""
    _banner("DEMO 3: Extracting Onto an Object")

    validator = ParameterValidator()

    class Report:
        def __init__(self, **params):
            validator.validate(params, ["title", ["rows", "query"]], self, add_prefix="_")

    report = Report(title="Weekly", query="select 1")
    print(f"\n  report._title = {report._title!r}")
    print(f"  report._query = {report._query!r}")


def demo_decorator():
    """Show @param_guard on sync and async functions."""
    _banner("DEMO 4: @param_guard")

    @param_guard([["email", "phone"]], on_invalid=lambda error: f"rejected: {error}")
    def notify(email=None, phone=None):
        return f"notified {email or phone}"

    @param_guard(["query"])
    async def search(query=None):
        return [query]

    print(f"\n  notify(phone='555-0100') -> {notify(phone='555-0100')}")
    print(f"  notify()                 -> {notify()}")
    print(f"  await search('cats')     -> {asyncio.run(search('cats'))}")
    print(f"  await validate_async(...) -> {asyncio.run(validate_async({'a': 1}, ['a']))}")


def main():
    print("\n" + "=" * 70)
    print("paramguard Demo")
    print("=" * 70)

    demo_rule_shapes()
    demo_aggregate_errors()
    demo_existing_target()
    demo_decorator()

    print("\n" + "=" * 70)
    print("Demo Complete!")
    print("=" * 70)
    print("\n")


if __name__ == "__main__":
    main()
