"""Text transformation functions."""

import logging
import re

from funcystr.core.types import Params
from funcystr.functions.base import builtin_functions
from funcystr.resolver.registry import Category

logger = logging.getLogger(__name__)

# Cap on REPEAT output, in characters
MAX_REPEAT_LENGTH = 1_000_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@builtin_functions.register(
    name="UPPERCASE",
    category=Category.TEXT,
    description="Upper-case the argument",
    examples={"{{UPPERCASE|world}}": "WORLD"},
)
def uppercase(params: Params, text: str = "") -> str:
    return text.upper()


@builtin_functions.register(
    name="LOWERCASE",
    category=Category.TEXT,
    description="Lower-case the argument",
    examples={"{{LOWERCASE|WORLD}}": "world"},
)
def lowercase(params: Params, text: str = "") -> str:
    return text.lower()


@builtin_functions.register(
    name="LENGTH",
    category=Category.TEXT,
    description="Number of characters in the argument",
    examples={"{{LENGTH|Hello world}}": "11"},
)
def length(params: Params, text: str = "") -> str:
    return str(len(text))


@builtin_functions.register(
    name="REVERSE",
    category=Category.TEXT,
    description="Reverse the argument",
    examples={"{{REVERSE|detsen}}": "nested"},
)
def reverse(params: Params, text: str = "") -> str:
    return text[::-1]


@builtin_functions.register(
    name="REPEAT",
    category=Category.TEXT,
    description="Repeat the first argument N times",
    examples={"{{REPEAT|so |3}}": "so so so "},
)
def repeat(params: Params, text: str = "", times: str = "") -> str:
    """Repeat text by the leading integer of times ('2.5' and '2x' count as 2).

    No leading integer or a negative count repeats zero times. Results longer
    than MAX_REPEAT_LENGTH are dropped.
    """
    match = _LEADING_INT.match(times)
    if not match:
        return ""
    count = int(match.group(1))
    if count <= 0:
        return ""
    if len(text) * count > MAX_REPEAT_LENGTH:
        logger.warning(
            "[TEXT] REPEAT of %d chars x %d exceeds %d chars, returning empty",
            len(text),
            count,
            MAX_REPEAT_LENGTH,
        )
        return ""
    return text * count
