"""Remote lookup functions.

FETCHREMOTE returns the title of the first Wikipedia page matching its
argument. Lookup failures never raise: the function returns a sentinel
string instead, so one bad lookup does not abort the whole template.
"""

import logging

import httpx

from funcystr.config import get_http_timeout, get_user_agent
from funcystr.core.types import Params
from funcystr.functions.base import builtin_functions
from funcystr.resolver.registry import Category

logger = logging.getLogger(__name__)

WIKIPEDIA_SEARCH_URL = "https://en.wikipedia.org/w/rest.php/v1/search/page"

NO_RESULTS = "<NO RESULTS>"
ERROR = "<ERROR>"


async def fetch_wikipedia_title(
    params: Params,
    article_name: str = "",
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Look up the first Wikipedia search hit for article_name.

    Args:
        params: Call params (unused).
        article_name: Search query.
        client: Optional client to reuse; a short-lived one is created
            otherwise.

    Returns:
        Page title, NO_RESULTS for a non-2xx response or empty result set,
        ERROR for transport or decoding failures.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(
            timeout=get_http_timeout(),
            headers={"User-Agent": get_user_agent()},
        )

    try:
        response = await client.get(
            WIKIPEDIA_SEARCH_URL,
            params={"q": article_name, "limit": 1},
        )
        if not response.is_success:
            logger.warning(
                "[REMOTE] Wikipedia search for %r returned HTTP %d",
                article_name,
                response.status_code,
            )
            return NO_RESULTS

        pages = response.json().get("pages") or []
        if not pages:
            return NO_RESULTS
        return pages[0]["title"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("[REMOTE] Wikipedia search for %r failed: %s", article_name, e)
        return ERROR
    finally:
        if owns_client:
            await client.aclose()


builtin_functions.register(
    name="FETCHREMOTE",
    category=Category.REMOTE,
    description="Title of the first Wikipedia search result for the argument",
    examples={"{{FETCHREMOTE|earth}}": "Earth"},
)(fetch_wikipedia_title)
