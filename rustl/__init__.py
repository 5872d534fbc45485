# Core type aliases for Rustl's data model.
# Runtime values are plain Python objects (int, float, bool, str, list) plus a
# few small wrapper types for the variants Python has no direct match for
# (Null, Char, native and user-defined functions). See rustl.types.
#
# Naming guidance:
# - Value:       an evaluated runtime value, as stored in an Environment.
# - ExecuteFn:   runs a statement sequence; passed to statement forms so they
#                can execute nested bodies.

import logging
from typing import Any, Callable

# Runtime value alias
Value = Any

# Statement-sequence executor: execute_statements(statements, env, importing) -> None
ExecuteFn = Callable[..., None]

logging.getLogger(__name__).addHandler(logging.NullHandler())
