# topmark:header:start
#
#   project      : structcheck
#   file         : errors.py
#   file_relpath : src/structcheck/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for structcheck.

Usage:
    Checking a value never raises; a mismatch is reported as ``False``. Only
    casting raises, with [`TypeCastError`][structcheck.errors.TypeCastError],
    when the value does not fit the checker's structure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structcheck.checker import Checker


class TypeCastError(TypeError):
    """Raised when a value does not fit the structure it is being cast to.

    Attributes:
        value (object): The rejected value, unchanged.
        checker (Checker[object]): The checker that rejected it.
    """

    def __init__(self, value: object, checker: Checker[object]) -> None:
        self.value: object = value
        self.checker: Checker[object] = checker
        super().__init__(
            f"Value of type {type(value).__name__} does not fit the structure {checker.label}"
        )


TypeCastException = TypeCastError
