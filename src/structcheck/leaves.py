# topmark:header:start
#
#   project      : structcheck
#   file         : leaves.py
#   file_relpath : src/structcheck/leaves.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leaf checkers: kinds, literals, nullish values and class instances.

Leaf checkers have no sub-checkers. They decide membership in a primitive kind
(see [`structcheck.core.kinds`][structcheck.core.kinds]), a literal value, or a
class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from structcheck.checker import Checker, checker
from structcheck.core.kinds import TypeName, kind_of
from structcheck.core.undefined import UNDEFINED, Undefined

if TYPE_CHECKING:
    from collections.abc import Callable
    from enum import Enum

V = TypeVar("V")


def _resolve_kind(kind: TypeName | str) -> TypeName:
    if isinstance(kind, TypeName):
        return kind
    resolved: TypeName | None = TypeName.parse(kind) if isinstance(kind, str) else None
    if resolved is None:
        valid: str = ", ".join(m.key for m in TypeName)
        raise ValueError(f"Unknown type name {kind!r} (expected one of: {valid})")
    return resolved


def _kind_checker(kind: TypeName, label: str) -> Checker[Any]:
    return checker(lambda data: kind_of(data) is kind, label=label)


def type_of_is(kind: TypeName | str) -> Checker[Any]:
    """Create a checker accepting values of the given runtime kind.

    Args:
        kind (TypeName | str): A ``TypeName`` member, or its key, name or alias
            (``"string"``, ``"str"``, ``"NUMBER"``...).

    Returns:
        Checker[Any]: A checker true iff ``kind_of(value) is kind``.

    Raises:
        ValueError: If ``kind`` names no known kind.
    """
    resolved: TypeName = _resolve_kind(kind)
    return _kind_checker(resolved, f"type_of_is({resolved.key!r})")


def string() -> Checker[str]:
    """Create a checker accepting ``str`` values."""
    return _kind_checker(TypeName.STRING, "string()")


def number() -> Checker[float]:
    """Create a checker accepting real numbers (``bool`` excluded, ``nan``/``inf`` included)."""
    return _kind_checker(TypeName.NUMBER, "number()")


def boolean() -> Checker[bool]:
    """Create a checker accepting ``True`` and ``False``."""
    return _kind_checker(TypeName.BOOLEAN, "boolean()")


def symbol() -> Checker[Enum]:
    """Create a checker accepting enum members."""
    return _kind_checker(TypeName.SYMBOL, "symbol()")


def func() -> Checker[Callable[..., Any]]:
    """Create a checker accepting callables that are not of another kind."""
    return _kind_checker(TypeName.FUNCTION, "func()")


def nullish() -> Checker[None | Undefined]:
    """Create a checker accepting ``None`` and ``UNDEFINED``."""
    return checker(lambda data: data is None or data is UNDEFINED, label="nullish()")


def nul() -> Checker[None]:
    """Create a checker accepting only ``None``."""
    return checker(lambda data: data is None, label="nul()")


def undef() -> Checker[Undefined]:
    """Create a checker accepting only ``UNDEFINED``."""
    return checker(lambda data: data is UNDEFINED, label="undef()")


is_nullish = nullish
is_null = nul
is_undefined = undef


def _is_nullish(value: object) -> bool:
    return value is None or value is UNDEFINED


def like(value: V) -> Checker[V]:
    """Create a checker accepting values loosely equal to ``value``.

    ``None`` and ``UNDEFINED`` are loosely equal to each other; every other
    comparison uses ``==``, so ``like(1)`` accepts ``1``, ``1.0`` and ``True``.
    A comparison that raises counts as a mismatch.

    Args:
        value (V): Reference value.

    Returns:
        Checker[V]: The loose-equality checker.
    """

    def _like(data: object) -> bool:
        if _is_nullish(value) or _is_nullish(data):
            return _is_nullish(value) and _is_nullish(data)
        try:
            return bool(data == value)
        except Exception:
            return False

    return checker(_like, label=f"like({value!r})")


def constant(value: V) -> Checker[V]:
    """Create a checker accepting values strictly equal to ``value``.

    Strict equality requires the same concrete type and ``==``: ``constant(1)``
    rejects ``1.0`` and ``True``, and ``constant(float("nan"))`` accepts nothing.
    A comparison that raises counts as a mismatch.

    Args:
        value (V): Literal value.

    Returns:
        Checker[V]: The strict-equality checker.
    """
    expected: type[Any] = type(value)

    def _constant(data: object) -> bool:
        if type(data) is not expected:
            return False
        try:
            return bool(data == value)
        except Exception:
            return False

    return checker(_constant, label=f"constant({value!r})")


def instance_of(cls: type[V] | tuple[type[Any], ...]) -> Checker[V]:
    """Create a checker accepting instances of ``cls`` (subclasses included).

    Args:
        cls (type[V] | tuple[type[Any], ...]): A class, or a tuple of classes.

    Returns:
        Checker[V]: A checker true iff ``isinstance(value, cls)``.

    Raises:
        TypeError: If ``cls`` is neither a class nor a tuple of classes.
    """
    classes: tuple[object, ...] = cls if isinstance(cls, tuple) else (cls,)
    if not classes or not all(isinstance(c, type) for c in classes):
        raise TypeError(f"instance_of() expects a class or a tuple of classes, got {cls!r}")
    name: str = " | ".join(getattr(c, "__qualname__", repr(c)) for c in classes)
    return checker(lambda data: isinstance(data, cls), label=f"instance_of({name})")
