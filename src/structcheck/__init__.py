# topmark:header:start
#
#   project      : structcheck
#   file         : __init__.py
#   file_relpath : src/structcheck/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime structure checking for untyped data.

structcheck builds reusable **checkers** from small factories and combinators.
A checker answers "does this value have the expected shape?" and can *cast* a
value, returning it unchanged or raising
[`TypeCastError`][structcheck.errors.TypeCastError].

```python
import json

from structcheck import array, number, object_, optional, or_, string, tuple_

point = tuple_(number(), number())
payload = object_({"name": optional(string()), "where": or_(number(), point)})

data = payload.cast(json.loads('{"where": [14, 17]}'))
```

Naming:
    Factories whose natural name is a keyword or a builtin take a trailing
    underscore: ``or_``, ``and_``, ``object_``, ``property_``, ``tuple_``.

Public surface
--------------
Everything listed in ``__all__`` is stable; submodules are implementation detail.
"""

from __future__ import annotations

from structcheck.checker import Checker, cast, checker
from structcheck.combinators import and_, optional, or_
from structcheck.core.kinds import TypeName, kind_of
from structcheck.core.undefined import UNDEFINED, Undefined
from structcheck.errors import TypeCastError, TypeCastException
from structcheck.leaves import (
    boolean,
    constant,
    func,
    instance_of,
    is_null,
    is_nullish,
    is_undefined,
    like,
    nul,
    nullish,
    number,
    string,
    symbol,
    type_of_is,
    undef,
)
from structcheck.structures import CheckSpec, array, object_, property_, tuple_

__all__: list[str] = [
    "Checker",
    "CheckSpec",
    "checker",
    "cast",
    "TypeCastError",
    "TypeCastException",
    "TypeName",
    "UNDEFINED",
    "Undefined",
    "kind_of",
    "type_of_is",
    "string",
    "number",
    "boolean",
    "symbol",
    "func",
    "nullish",
    "nul",
    "undef",
    "is_nullish",
    "is_null",
    "is_undefined",
    "like",
    "constant",
    "instance_of",
    "object_",
    "property_",
    "array",
    "tuple_",
    "or_",
    "and_",
    "optional",
]
