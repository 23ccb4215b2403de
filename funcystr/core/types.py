"""Core data types for template scanning and dispatch.

A scan of a text span yields one of three outcomes:

- Literal: no further '{{' in the span, everything left is plain text
- Matched: a balanced '{{...}}' occurrence, preceded by literal text
- Unbalanced: a '{{' that never closes; it and the rest of the span are literal
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

# Caller-defined values handed to every template function untouched
Params = Mapping[str, Any]

# (params, *resolved_args) -> str, or an awaitable yielding str
TemplateFunction = Callable[..., "str | Awaitable[str]"]

OPEN = "{{"
CLOSE = "}}"
PIPE = "|"


@dataclass(frozen=True)
class Occurrence:
    """A balanced '{{NAME|arg|...}}' span found in a text.

    start/end are offsets into the scanned text; source is text[start:end]
    including delimiters, inner is the text between them.
    """

    start: int
    end: int
    source: str
    inner: str
    name: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class Literal:
    """Remaining text with no opening delimiter."""

    text: str


@dataclass(frozen=True)
class Matched:
    """Literal prefix followed by a balanced occurrence."""

    prefix: str
    occurrence: Occurrence


@dataclass(frozen=True)
class Unbalanced:
    """Literal prefix followed by an unclosed '{{' and the rest of the text."""

    prefix: str
    literal: str


ScanResult = Literal | Matched | Unbalanced
