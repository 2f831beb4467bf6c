# topmark:header:start
#
#   project      : structcheck
#   file         : checker.py
#   file_relpath : src/structcheck/checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Checker` type and the cast wrapper.

A [`Checker`][structcheck.checker.Checker] pairs a decision function
(``value -> bool``) with a ``cast`` operation built from the same logic:

- calling the checker (or ``checker.check(value)``) answers "does this value fit?"
  and never raises;
- ``checker.cast(value)`` returns ``value`` unchanged when it fits and raises
  [`TypeCastError`][structcheck.errors.TypeCastError] otherwise.

Checkers are immutable. Composite checkers hold references to their sub-checkers
and may share them freely.

Example:
    ```python
    from structcheck import checker

    even = checker(lambda v: isinstance(v, int) and v % 2 == 0, label="even()")
    assert even(4)
    assert even.cast(4) == 4
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeGuard, TypeVar

from structcheck.core.logging import get_logger
from structcheck.errors import TypeCastError

if TYPE_CHECKING:
    from collections.abc import Callable

    from structcheck.core.logging import StructcheckLogger

T_co = TypeVar("T_co", covariant=True)
T = TypeVar("T")
U = TypeVar("U")

logger: StructcheckLogger = get_logger(__name__)


class Checker(Generic[T_co]):
    """Immutable, reusable structure predicate with a ``cast`` operation.

    Checkers are usually obtained from the factory functions of this package
    (``string()``, ``object_()``, ``or_()``...) or from [`checker`][structcheck.checker.checker].

    Attributes:
        label (str): Readable rendering of how the checker was composed.
    """

    __slots__ = ("_body", "_label")

    _body: Callable[[Any], object]
    _label: str

    def __init__(self, body: Callable[[Any], object], *, label: str) -> None:
        object.__setattr__(self, "_body", body)
        object.__setattr__(self, "_label", label)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __call__(self, value: object) -> TypeGuard[T_co]:
        return bool(self._body(value))

    def check(self, value: object) -> bool:
        """Return True if ``value`` fits this checker's structure.

        Args:
            value (object): Value to test.

        Returns:
            bool: Whether the value conforms.
        """
        return self(value)

    def cast(self, value: object) -> T_co:
        """Return ``value`` unchanged if it fits, raise otherwise.

        Args:
            value (object): Value to cast.

        Returns:
            T_co: The very same ``value`` object.

        Raises:
            TypeCastError: If the value does not fit.
        """
        return cast(self, value)

    @property
    def label(self) -> str:
        """Readable rendering of how the checker was composed."""
        return self._label

    def __repr__(self) -> str:
        return f"<Checker {self._label}>"

    def __or__(self, other: Checker[U]) -> Checker[T_co | U]:
        if not callable(other):
            return NotImplemented
        from structcheck.combinators import or_

        return or_(self, other)

    def __and__(self, other: Checker[U]) -> Checker[Any]:
        if not callable(other):
            return NotImplemented
        from structcheck.combinators import and_

        return and_(self, other)


def checker(body: Callable[[Any], object], *, label: str | None = None) -> Checker[Any]:
    """Wrap a raw decision function into a [`Checker`][structcheck.checker.Checker].

    Args:
        body (Callable[[Any], object]): Decision function; its result is coerced to ``bool``.
        label (str | None): Optional readable label. Defaults to ``checker(<name>)``.

    Returns:
        Checker[Any]: A checker exposing ``check`` and ``cast``.

    Raises:
        TypeError: If ``body`` is not callable.
    """
    if not callable(body):
        raise TypeError(f"checker() expects a callable, got {type(body).__name__}")
    if label is None:
        label = f"checker({getattr(body, '__name__', type(body).__name__)})"
    logger.trace("Built checker %s", label)
    return Checker(body, label=label)


def as_checker(candidate: object) -> Checker[Any]:
    """Return ``candidate`` as a checker, wrapping plain callables.

    Args:
        candidate (object): A ``Checker`` or a ``value -> bool`` callable.

    Returns:
        Checker[Any]: ``candidate`` itself, or a checker wrapping it.

    Raises:
        TypeError: If ``candidate`` is not callable.
    """
    if isinstance(candidate, Checker):
        return candidate
    if not callable(candidate):
        raise TypeError(f"Expected a checker, got {type(candidate).__name__}")
    return checker(candidate)


def cast(checker: Checker[T], value: object) -> T:
    """Return ``value`` unchanged if ``checker`` accepts it.

    No coercion ever happens: on success the very same object is returned.

    Args:
        checker (Checker[T]): Checker to validate with.
        value (object): Value to cast.

    Returns:
        T: ``value`` itself.

    Raises:
        TypeCastError: If ``checker`` rejects ``value``.
    """
    if checker(value):
        return value
    logger.debug("Cast rejected a %s value for %s", type(value).__name__, checker.label)
    raise TypeCastError(value, checker)
