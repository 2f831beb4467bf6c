# topmark:header:start
#
#   project      : structcheck
#   file         : test_combinators.py
#   file_relpath : tests/test_combinators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for or_, and_ and optional."""

from __future__ import annotations

import math
from typing import Any

import pytest

from structcheck import UNDEFINED, Checker, and_, array, checker, number, optional, or_, string


def test_or_checker() -> None:
    """or_() accepts values fitting at least one alternative."""
    assert or_(string(), number())("qua") is True
    assert or_(number(), string())("qua") is True
    assert or_(string(), number())(-1) is True
    assert or_(number(), string())(math.inf) is True
    assert or_(string(), number())(["qua"]) is False
    assert or_(number(), string())(True) is False


def test_or_without_alternatives_accepts_nothing() -> None:
    """An empty union is never satisfied."""
    assert or_()(None) is False
    assert or_()("qua") is False


def test_and_checker() -> None:
    """and_() accepts values fitting both structures."""
    strings = array(string())
    assert and_(strings, strings)(["qua", "was", "here"]) is True
    assert and_(string(), number())("qua") is False
    assert and_(string(), number())(1) is False


def test_or_short_circuits_in_declaration_order() -> None:
    """or_() stops at the first alternative that accepts."""
    calls: list[str] = []

    def _tracking(name: str, result: bool) -> Checker[Any]:
        def _body(_data: object) -> bool:
            calls.append(name)
            return result

        return checker(_body, label=name)

    assert or_(_tracking("a", False), _tracking("b", True), _tracking("c", True))(0) is True
    assert calls == ["a", "b"]

    calls.clear()
    assert and_(_tracking("a", False), _tracking("b", True))(0) is False
    assert calls == ["a"]


def test_optional_checker() -> None:
    """optional() adds None and UNDEFINED to the accepted values."""
    maybe_str = optional(string())
    assert maybe_str("qua") is True
    assert maybe_str(None) is True
    assert maybe_str(UNDEFINED) is True
    assert maybe_str(0) is False
    assert maybe_str.label == "or_(string(), nullish())"


def test_operators_build_combinators() -> None:
    """`|` builds a union and `&` an intersection."""
    str_or_num = string() | number()
    assert str_or_num("qua") is True
    assert str_or_num(1) is True
    assert str_or_num(None) is False
    assert str_or_num.label == "or_(string(), number())"

    positive = checker(lambda v: v > 0, label="positive()")
    positive_number = number() & positive
    assert positive_number(3) is True
    assert positive_number(-3) is False
    # The second checker is never reached for non-numbers.
    assert positive_number("qua") is False


class Marker:
    """Right-hand operand that answers the reflected operators."""

    def __ror__(self, other: object) -> str:
        return "ror"

    def __rand__(self, other: object) -> str:
        return "rand"


def test_operators_defer_on_non_callable_operands() -> None:
    """`|` and `&` return NotImplemented for operands that cannot be checkers."""
    assert string().__or__(3) is NotImplemented  # type: ignore[arg-type]
    assert string().__and__("x") is NotImplemented  # type: ignore[arg-type]
    assert string() | Marker() == "ror"  # type: ignore[operator]
    assert string() & Marker() == "rand"  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = string() | 3  # type: ignore[operator]


def test_plain_callables_are_accepted_as_sub_checkers() -> None:
    """Raw predicates are wrapped into checkers."""

    def is_even(value: object) -> bool:
        return isinstance(value, int) and value % 2 == 0

    evens = array(is_even)  # type: ignore[arg-type]
    assert evens([2, 4]) is True
    assert evens([2, 3]) is False
    assert evens.label == "array(checker(is_even))"
