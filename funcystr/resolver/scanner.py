"""Scanner for '{{NAME|arg|...}}' occurrences.

Delimiters are two-character tokens. Nesting is tracked by counting '{{'
and '}}' only; single braces are ordinary text everywhere and never affect
nesting or argument splitting.
"""

from collections.abc import Iterator

from funcystr.core.types import (
    CLOSE,
    OPEN,
    PIPE,
    Literal,
    Matched,
    Occurrence,
    ScanResult,
    Unbalanced,
)


def _find_close(text: str, pos: int) -> int:
    """Find the '}}' that closes a '{{' whose body starts at pos.

    Returns the index of the closing '}}', or -1 if text ends first.
    """
    depth = 1
    i = pos
    n = len(text)
    while i < n - 1:
        pair = text[i : i + 2]
        if pair == OPEN:
            depth += 1
            i += 2
        elif pair == CLOSE:
            depth -= 1
            if depth == 0:
                return i
            i += 2
        else:
            i += 1
    return -1


def split_arguments(inner: str) -> list[str]:
    """Split occurrence inner text on '|' at nesting depth 0.

    The first field is the function name, the rest are raw argument spans
    with their exact text. Pipes inside nested '{{...}}' are kept.

    >>> split_arguments("PLURAL|{{PRONOUN|a|b}}|c")
    ['PLURAL', '{{PRONOUN|a|b}}', 'c']
    """
    fields: list[str] = []
    depth = 0
    field_start = 0
    i = 0
    n = len(inner)
    while i < n:
        pair = inner[i : i + 2]
        if pair == OPEN:
            depth += 1
            i += 2
        elif pair == CLOSE and depth > 0:
            depth -= 1
            i += 2
        elif inner[i] == PIPE and depth == 0:
            fields.append(inner[field_start:i])
            field_start = i + 1
            i += 1
        else:
            i += 1
    fields.append(inner[field_start:])
    return fields


def find_occurrence(text: str, pos: int = 0) -> ScanResult:
    """Scan text from pos for the next top-level occurrence.

    Returns:
        Literal if text[pos:] has no '{{'.
        Matched with the literal prefix and the occurrence.
        Unbalanced if the first '{{' never closes; its literal is the rest
        of the text from that '{{' on.
    """
    start = text.find(OPEN, pos)
    if start == -1:
        return Literal(text[pos:])

    prefix = text[pos:start]
    close = _find_close(text, start + 2)
    if close == -1:
        return Unbalanced(prefix, text[start:])

    end = close + 2
    inner = text[start + 2 : close]
    name, *args = split_arguments(inner)
    occurrence = Occurrence(
        start=start,
        end=end,
        source=text[start:end],
        inner=inner,
        name=name,
        args=tuple(args),
    )
    return Matched(prefix, occurrence)


def iter_scan(text: str) -> Iterator[ScanResult]:
    """Yield successive scan results until the text is exhausted.

    Scanning stops after a Literal or Unbalanced result; the final result
    always accounts for the tail of the text.
    """
    pos = 0
    while True:
        result = find_occurrence(text, pos)
        yield result
        if not isinstance(result, Matched):
            return
        pos = result.occurrence.end
