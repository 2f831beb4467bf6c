# topmark:header:start
#
#   project      : structcheck
#   file         : kinds.py
#   file_relpath : src/structcheck/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime kinds of Python values.

Every value is classified into one closed set of kinds ([`TypeName`][structcheck.core.kinds.TypeName]):

| Kind        | Values                                                        |
|-------------|---------------------------------------------------------------|
| `string`    | `str`                                                         |
| `number`    | real numbers (`int`, `float`, `Decimal`, ...) but not `bool`  |
| `boolean`   | `bool`                                                        |
| `undefined` | the `UNDEFINED` sentinel                                      |
| `function`  | other callables (functions, classes, callable instances)      |
| `symbol`    | `enum.Enum` members                                           |
| `object`    | any other value except `None`                                 |

`None` has no kind: [`kind_of`][structcheck.core.kinds.kind_of] returns ``None`` for it,
so an `object` check never accepts `None`.

The module also hosts the lookup helpers shared by the structural checkers.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Final, TypeGuard

from structcheck.core.enum_mixins import KeyedStrEnum
from structcheck.core.undefined import UNDEFINED


class TypeName(KeyedStrEnum):
    """Closed enumeration of runtime kinds."""

    STRING = ("string", "Text string", ("str",))
    NUMBER = ("number", "Real number", ("int", "float", "real"))
    BOOLEAN = ("boolean", "Boolean", ("bool",))
    UNDEFINED = ("undefined", "Absent value")
    FUNCTION = ("function", "Callable", ("callable", "func"))
    OBJECT = ("object", "Non-null object", ("obj",))
    SYMBOL = ("symbol", "Enum member", ("enum",))


def kind_of(value: object) -> TypeName | None:
    """Return the runtime kind of ``value``.

    Args:
        value (object): Any value.

    Returns:
        TypeName | None: The kind, or ``None`` when ``value`` is ``None``.
    """
    if value is None:
        return None
    if value is UNDEFINED:
        return TypeName.UNDEFINED
    # Checked first: IntEnum/StrEnum members are also ints/strings.
    if isinstance(value, Enum):
        return TypeName.SYMBOL
    if isinstance(value, bool):
        return TypeName.BOOLEAN
    if isinstance(value, (Real, Decimal)):
        return TypeName.NUMBER
    if isinstance(value, str):
        return TypeName.STRING
    if callable(value):
        return TypeName.FUNCTION
    return TypeName.OBJECT


def is_object(value: object) -> bool:
    """Return True if ``value`` has the `object` kind (arrays included)."""
    return kind_of(value) is TypeName.OBJECT


def is_array(value: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    """Type guard for an array value (``list`` or ``tuple``).

    Args:
        value (object): Value to test.

    Returns:
        TypeGuard[list[Any] | tuple[Any, ...]]: True if value is a list or a tuple.
    """
    return isinstance(value, (list, tuple))


class _Unreadable:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNREADABLE"


# Returned by `get_field` when the read itself raised. Structural checkers reject it.
UNREADABLE: Final[object] = _Unreadable()


def get_field(value: object, key: object) -> object:
    """Look up ``key`` on ``value`` without raising.

    Mappings are read with ``Mapping.get``, integer keys index arrays, and string
    keys on any other object read attributes.

    Args:
        value (object): Container to read from.
        key (object): Field name, mapping key or array index.

    Returns:
        object: The field value, ``UNDEFINED`` when absent, or ``UNREADABLE``
        when the lookup raised (a failing property, a broken ``__getitem__``...).
    """
    if isinstance(value, Mapping):
        try:
            return value.get(key, UNDEFINED)
        except TypeError:  # unhashable key
            return UNDEFINED
        except Exception:
            return UNREADABLE
    if is_array(value) and isinstance(key, int) and not isinstance(key, bool):
        return value[key] if 0 <= key < len(value) else UNDEFINED
    if isinstance(key, str):
        try:
            return getattr(value, key, UNDEFINED)
        except Exception:
            return UNREADABLE
    return UNDEFINED


def get_item(value: list[Any] | tuple[Any, ...], index: int) -> object:
    """Return ``value[index]``, or ``UNDEFINED`` past the end."""
    return value[index] if index < len(value) else UNDEFINED
