# topmark:header:start
#
#   project      : structcheck
#   file         : undefined.py
#   file_relpath : src/structcheck/core/undefined.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``UNDEFINED`` sentinel.

Python has a single "no value" object (``None``), while structural checks need to
tell an explicit ``None`` apart from a field or position that is absent altogether.
Field and position lookups report absence as ``UNDEFINED``; callers may also pass it
explicitly.
"""

from __future__ import annotations

from typing import Final, final


@final
class Undefined:
    """Singleton type of [`UNDEFINED`][structcheck.core.undefined.UNDEFINED]."""

    __slots__ = ()

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Pickle by reference so identity survives a round-trip.
        return "UNDEFINED"

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: object) -> Undefined:
        return self


UNDEFINED: Final[Undefined] = Undefined()
