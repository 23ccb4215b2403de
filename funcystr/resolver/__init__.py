"""Template resolution engine.

Usage:
    from funcystr.resolver import TemplateResolver

    resolver = TemplateResolver({
        "PLURAL": lambda params, one, many: many if params["plural"] else one,
    })
    await resolver.resolve("two {{PLURAL|apple|apples}}", {"plural": True})

The resolver dispatches each '{{NAME|arg|...}}' occurrence through its
registry. Names are case-insensitive; unknown names are left untouched.
"""

from funcystr.resolver.registry import (
    Category,
    FunctionDefinition,
    FunctionRegistry,
    FunctionSet,
    normalize_name,
)
from funcystr.resolver.resolver import TemplateResolver, resolve
from funcystr.resolver.scanner import find_occurrence, iter_scan, split_arguments

__all__ = [
    # Main API
    "TemplateResolver",
    "resolve",
    # Registry
    "Category",
    "FunctionDefinition",
    "FunctionRegistry",
    "FunctionSet",
    "normalize_name",
    # Scanner
    "find_occurrence",
    "iter_scan",
    "split_arguments",
]
