# topmark:header:start
#
#   project      : structcheck
#   file         : combinators.py
#   file_relpath : src/structcheck/combinators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Union, intersection and optional combinators.

Sub-checkers run in declaration order and evaluation short-circuits:
``or_`` stops at the first acceptance, ``and_`` at the first rejection.
"""

from __future__ import annotations

from typing import Any, TypeVar

from structcheck.checker import Checker, as_checker, checker
from structcheck.core.undefined import Undefined
from structcheck.leaves import nullish

T = TypeVar("T")


def or_(*checkers: Checker[Any]) -> Checker[Any]:
    """Create a checker accepting values that fit at least one of ``checkers``.

    Args:
        *checkers (Checker[Any]): Alternatives, tried in order. With none given
            the resulting checker accepts nothing.

    Returns:
        Checker[Any]: The union checker.
    """
    alternatives: tuple[Checker[Any], ...] = tuple(as_checker(c) for c in checkers)
    return checker(
        lambda data: any(c(data) for c in alternatives),
        label=f"or_({', '.join(c.label for c in alternatives)})",
    )


def and_(checker_a: Checker[Any], checker_b: Checker[Any]) -> Checker[Any]:
    """Create a checker accepting values that fit both ``checker_a`` and ``checker_b``.

    Args:
        checker_a (Checker[Any]): First structure, checked first.
        checker_b (Checker[Any]): Second structure, checked only if the first passes.

    Returns:
        Checker[Any]: The intersection checker.
    """
    first: Checker[Any] = as_checker(checker_a)
    second: Checker[Any] = as_checker(checker_b)
    return checker(
        lambda data: first(data) and second(data),
        label=f"and_({first.label}, {second.label})",
    )


def optional(inner: Checker[T]) -> Checker[T | None | Undefined]:
    """Create a checker accepting ``None``, ``UNDEFINED`` or values fitting ``inner``.

    Same as ``or_(inner, nullish())``.
    """
    return or_(inner, nullish())
