"""Built-in template functions.

Each module in this package defines functions using the
builtin_functions.register decorator. Functions are organized by category:

- grammar: PRONOUN, PLURAL, CHAR_NAME
- text: UPPERCASE, LOWERCASE, LENGTH, REVERSE, REPEAT
- remote: FETCHREMOTE

Import this module to register all built-ins.
"""

from funcystr.functions.base import builtin_functions
from funcystr.resolver.registry import FunctionRegistry

# Import all function modules to trigger registration (noqa: F401 for side-effect imports)
from funcystr.functions import (  # noqa: F401
    grammar,
    remote,
    text,
)

_default_registry: FunctionRegistry | None = None


def default_registry() -> FunctionRegistry:
    """Get the registry of all built-in functions."""
    global _default_registry
    if _default_registry is None:
        _default_registry = builtin_functions.build()
    return _default_registry


__all__ = ["builtin_functions", "default_registry"]
