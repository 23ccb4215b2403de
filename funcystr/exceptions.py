"""Exceptions raised by funcystr.

Only construction and configuration problems raise. Malformed templates and
unknown function names are never errors, and exceptions raised by template
functions propagate to the caller unchanged.
"""


class FuncyStrError(Exception):
    """Base exception for all funcystr errors."""

    pass


class RegistryError(FuncyStrError):
    """Raised when a function registry cannot be built.

    Common causes:
    - Two names that collide once upper-cased ('plural' and 'PLURAL')
    - A registered value that is not callable
    - An empty function name
    """

    pass


class NestingDepthError(FuncyStrError):
    """Raised when resolution recurses deeper than the configured limit.

    Only raised when a limit is set (see funcystr.config.get_max_depth).
    """

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f"Template nesting depth {depth} exceeds limit of {limit}")


__all__ = [
    "FuncyStrError",
    "NestingDepthError",
    "RegistryError",
]
