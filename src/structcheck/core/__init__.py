# topmark:header:start
#
#   project      : structcheck
#   file         : __init__.py
#   file_relpath : src/structcheck/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared across structcheck.

Included modules:

- ``kinds``
  The closed ``TypeName`` enumeration, ``kind_of()`` classification and the
  field/position lookup helpers used by structural checkers.

- ``undefined``
  The ``UNDEFINED`` sentinel reported for absent fields and positions.

- ``enum_mixins``
  ``KeyedStrEnum``: a ``str`` Enum with labels and parse aliases.

- ``logging``
  TRACE-capable logger class, chalk formatter and ``setup_logging()``.

Design goals:

- Keep this package free of checker-building logic and side effects.
- Prefer small, well-typed helpers.
"""

from __future__ import annotations
