# topmark:header:start
#
#   project      : structcheck
#   file         : structures.py
#   file_relpath : src/structcheck/structures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural checkers: objects, single properties, arrays and tuples.

Terminology:
    - An *array* is a ``list`` or a ``tuple``.
    - An *object* is any value of the `object` kind (see
      [`kind_of`][structcheck.core.kinds.kind_of]); ``None`` is never an object.
    - A *field* is read with [`get_field`][structcheck.core.kinds.get_field]: mapping
      key, attribute, or array index. Absent fields read as ``UNDEFINED``; a field
      whose read raises fails its check.

Notes:
    ``object_()`` always rejects arrays, while ``property_()`` accepts them (so
    ``property_(0, string())`` can check the head of a list).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias, TypeVar

from structcheck.checker import Checker, as_checker, checker
from structcheck.core.kinds import UNREADABLE, get_field, get_item, is_array, is_object

E = TypeVar("E")

# A structural description for `object_`: field name -> checker.
CheckSpec: TypeAlias = Mapping[str, Checker[Any]]


def _field_passes(field_checker: Checker[Any], data: object, key: object) -> bool:
    field: object = get_field(data, key)
    return field is not UNREADABLE and field_checker(field)


def object_(spec: CheckSpec | None = None) -> Checker[Any]:
    """Create a checker for non-array objects, optionally with typed fields.

    Every key of ``spec`` is looked up on the value and handed to its checker;
    missing keys are handed over as ``UNDEFINED``, so optional fields must be
    declared with ``optional(...)``. Keys not named in ``spec`` are ignored.

    Args:
        spec (CheckSpec | None): Field checkers. ``None`` accepts
            any non-array object.

    Returns:
        Checker[Any]: The object checker.

    Raises:
        TypeError: If a field checker is not callable.
    """
    fields: tuple[tuple[str, Checker[Any]], ...] = (
        tuple((key, as_checker(c)) for key, c in spec.items()) if spec is not None else ()
    )

    def _object(data: object) -> bool:
        if not is_object(data) or is_array(data):
            return False
        return all(_field_passes(field_checker, data, key) for key, field_checker in fields)

    if spec is None:
        label = "object_()"
    else:
        label = "object_({" + ", ".join(f"{k!r}: {c.label}" for k, c in fields) + "})"
    return checker(_object, label=label)


def property_(key: str | int, value_check: Checker[Any]) -> Checker[Any]:
    """Create a checker for one field of an object.

    Args:
        key (str | int): Field name, or array index.
        value_check (Checker[Any]): Checker for the field value.

    Returns:
        Checker[Any]: A checker true iff the value is an object (arrays included)
        and its field passes ``value_check``.
    """
    field_checker: Checker[Any] = as_checker(value_check)
    return checker(
        lambda data: is_object(data) and _field_passes(field_checker, data, key),
        label=f"property_({key!r}, {field_checker.label})",
    )


def array(element_checker: Checker[E]) -> Checker[list[E]]:
    """Create a checker for arrays whose elements all pass ``element_checker``.

    Empty arrays always pass.

    Args:
        element_checker (Checker[E]): Checker applied to every element.

    Returns:
        Checker[list[E]]: The array checker.
    """
    elem: Checker[Any] = as_checker(element_checker)
    return checker(
        lambda data: is_array(data) and all(elem(x) for x in data),
        label=f"array({elem.label})",
    )


def tuple_(*element_checkers: Checker[Any], exact: bool = False) -> Checker[Any]:
    """Create a checker for arrays with a typed element per position.

    Positions past the end of a shorter array are checked as ``UNDEFINED``.
    Elements beyond the declared positions are ignored unless ``exact`` is set.

    Args:
        *element_checkers (Checker[Any]): One checker per position.
        exact (bool): Also require the array length to equal the number of checkers.

    Returns:
        Checker[Any]: The tuple checker.
    """
    elems: tuple[Checker[Any], ...] = tuple(as_checker(c) for c in element_checkers)
    arity: int = len(elems)

    def _tuple(data: object) -> bool:
        if not is_array(data):
            return False
        if exact and len(data) != arity:
            return False
        return all(c(get_item(data, i)) for i, c in enumerate(elems))

    args: list[str] = [c.label for c in elems]
    if exact:
        args.append("exact=True")
    return checker(_tuple, label=f"tuple_({', '.join(args)})")
