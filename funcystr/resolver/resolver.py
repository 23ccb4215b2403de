"""Template resolver.

Resolves '{{NAME|arg|...}}' occurrences left to right:

1. Unknown names are emitted verbatim, arguments untouched
2. Arguments of known names are resolved first, in order (call-by-value)
3. The function is called with (params, *resolved_args) and awaited if
   it returned an awaitable
4. The returned text is resolved again, so functions may generate new
   template syntax

Unbalanced '{{' and anything after it is literal. Exceptions raised by a
template function propagate to the caller of resolve().
"""

import asyncio
import inspect
import logging
from collections.abc import Mapping

from funcystr.config import get_max_depth
from funcystr.core.types import (
    Literal,
    Matched,
    Occurrence,
    Params,
    TemplateFunction,
    Unbalanced,
)
from funcystr.exceptions import NestingDepthError
from funcystr.resolver.registry import FunctionRegistry
from funcystr.resolver.scanner import iter_scan

logger = logging.getLogger(__name__)

_UNSET = object()


class TemplateResolver:
    """Resolves function templates in strings against a fixed registry.

    One resolver can serve any number of concurrent resolve() calls; the
    only shared state is the read-only registry.

    Args:
        functions: A FunctionRegistry, or a mapping of name -> function.
        max_depth: Nested resolution limit. Defaults to FUNCYSTR_MAX_DEPTH;
            None means unbounded.
    """

    def __init__(
        self,
        functions: FunctionRegistry | Mapping[str, TemplateFunction] | None = None,
        max_depth: "int | None | object" = _UNSET,
    ):
        self._registry = FunctionRegistry.coerce(functions)
        self._max_depth = get_max_depth() if max_depth is _UNSET else max_depth

    @property
    def registry(self) -> FunctionRegistry:
        return self._registry

    @property
    def max_depth(self) -> int | None:
        return self._max_depth

    async def resolve(self, text: str, params: Params | None = None) -> str:
        """Resolve every template occurrence in text."""
        return await self._resolve(text, params if params is not None else {}, 0)

    def resolve_sync(self, text: str, params: Params | None = None) -> str:
        """Resolve on a fresh event loop.

        For callers outside async code. Raises RuntimeError if called while
        an event loop is already running in this thread.
        """
        return asyncio.run(self.resolve(text, params))

    async def _resolve(self, text: str, params: Params, depth: int) -> str:
        if self._max_depth is not None and depth > self._max_depth:
            raise NestingDepthError(depth, self._max_depth)

        parts: list[str] = []
        for result in iter_scan(text):
            if isinstance(result, Literal):
                parts.append(result.text)
            elif isinstance(result, Unbalanced):
                parts.append(result.prefix)
                parts.append(result.literal)
            elif isinstance(result, Matched):
                parts.append(result.prefix)
                parts.append(await self._dispatch(result.occurrence, params, depth))
        return "".join(parts)

    async def _dispatch(self, occurrence: Occurrence, params: Params, depth: int) -> str:
        func = self._registry.get(occurrence.name)
        if func is None:
            logger.debug("[RESOLVER] Unknown function '%s', passing through", occurrence.name)
            return occurrence.source

        args = []
        for raw in occurrence.args:
            args.append(await self._resolve(raw, params, depth + 1))

        logger.debug("[RESOLVER] Calling %s with %d args", occurrence.name.upper(), len(args))
        output = func(params, *args)
        if inspect.isawaitable(output):
            output = await output

        if output is None:
            output = ""
        elif not isinstance(output, str):
            output = str(output)

        return await self._resolve(output, params, depth + 1)


async def resolve(
    text: str,
    params: Params | None = None,
    functions: FunctionRegistry | Mapping[str, TemplateFunction] | None = None,
) -> str:
    """Resolve text with the given functions, or the built-in library."""
    if functions is None:
        from funcystr.functions import default_registry

        functions = default_registry()
    return await TemplateResolver(functions).resolve(text, params)
