"""Core types for funcystr.

All data structures are frozen dataclasses with attribute access.
"""

from funcystr.core.types import (
    Literal,
    Matched,
    Occurrence,
    Params,
    ScanResult,
    TemplateFunction,
    Unbalanced,
)

__all__ = [
    "Literal",
    "Matched",
    "Occurrence",
    "Params",
    "ScanResult",
    "TemplateFunction",
    "Unbalanced",
]
