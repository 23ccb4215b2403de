"""funcystr - function templates in plain text.

Resolves '{{NAME|arg|...}}' occurrences by calling registered functions,
which may be sync or async and may nest.

Usage:
    from funcystr import TemplateResolver

    resolver = TemplateResolver({"UPPERCASE": lambda params, text: text.upper()})
    await resolver.resolve("Hello, {{uppercase|world}}!", {})
"""

from funcystr.exceptions import FuncyStrError, NestingDepthError, RegistryError
from funcystr.resolver import (
    Category,
    FunctionDefinition,
    FunctionRegistry,
    FunctionSet,
    TemplateResolver,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "FunctionDefinition",
    "FunctionRegistry",
    "FunctionSet",
    "FuncyStrError",
    "NestingDepthError",
    "RegistryError",
    "TemplateResolver",
    "resolve",
]
