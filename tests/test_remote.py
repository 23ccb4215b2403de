"""Tests for FETCHREMOTE with a mocked HTTP transport."""

import functools

import httpx
import pytest
import pytest_asyncio

from funcystr.functions import remote
from funcystr.functions.remote import ERROR, NO_RESULTS, fetch_wikipedia_title
from funcystr.resolver import TemplateResolver

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

TITLES = {
    "earth": "Earth",
    "func": "Function (computer programming)",
}


def _search_handler(request: httpx.Request) -> httpx.Response:
    """Fake Wikipedia search: known queries return one page."""
    query = request.url.params.get("q", "")
    if query in TITLES:
        return httpx.Response(200, json={"pages": [{"id": 1, "title": TITLES[query]}]})
    return httpx.Response(200, json={"pages": []})


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# fetch_wikipedia_title
# ---------------------------------------------------------------------------


class TestFetchWikipediaTitle:
    """Direct calls with an injected client."""

    @pytest.mark.asyncio
    async def test_returns_first_title(self):
        async with _client(_search_handler) as client:
            assert await fetch_wikipedia_title({}, "earth", client=client) == "Earth"

    @pytest.mark.asyncio
    async def test_sends_query_and_limit(self):
        seen = []

        def handler(request):
            seen.append(request)
            return _search_handler(request)

        async with _client(handler) as client:
            await fetch_wikipedia_title({}, "func", client=client)

        assert seen[0].url.params["q"] == "func"
        assert seen[0].url.params["limit"] == "1"
        assert str(seen[0].url).startswith(remote.WIKIPEDIA_SEARCH_URL)

    @pytest.mark.asyncio
    async def test_empty_results(self):
        async with _client(_search_handler) as client:
            assert await fetch_wikipedia_title({}, "zzzz", client=client) == NO_RESULTS

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        async with _client(lambda request: httpx.Response(503)) as client:
            assert await fetch_wikipedia_title({}, "earth", client=client) == NO_RESULTS

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        async with _client(handler) as client:
            assert await fetch_wikipedia_title({}, "earth", client=client) == ERROR

    @pytest.mark.asyncio
    async def test_malformed_body(self):
        async with _client(lambda request: httpx.Response(200, text="not json")) as client:
            assert await fetch_wikipedia_title({}, "earth", client=client) == ERROR

    @pytest.mark.asyncio
    async def test_page_without_title(self):
        async with _client(lambda request: httpx.Response(200, json={"pages": [{}]})) as client:
            assert await fetch_wikipedia_title({}, "earth", client=client) == ERROR

    @pytest.mark.asyncio
    async def test_owned_client_uses_config(self, monkeypatch):
        seen = []

        def handler(request):
            seen.append(request)
            return _search_handler(request)

        real_client = httpx.AsyncClient
        monkeypatch.setenv("FUNCYSTR_USER_AGENT", "test-agent/1.0")
        monkeypatch.setattr(
            remote.httpx,
            "AsyncClient",
            lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
        )

        assert await fetch_wikipedia_title({}, "earth") == "Earth"
        assert seen[0].headers["User-Agent"] == "test-agent/1.0"


# ---------------------------------------------------------------------------
# FETCHREMOTE inside templates
# ---------------------------------------------------------------------------


class TestFetchRemoteTemplates:
    """FETCHREMOTE resolved alongside other functions."""

    @pytest_asyncio.fixture
    async def resolver(self):
        async with _client(_search_handler) as client:
            yield TemplateResolver(
                {
                    "FETCHREMOTE": functools.partial(fetch_wikipedia_title, client=client),
                    "PRONOUN": lambda params, he, she, they: {"he": he, "she": she}.get(
                        params.get("pronoun"), they
                    ),
                    "ARTICLE_NAME": lambda params: params["article_name"],
                },
                max_depth=None,
            )

    @pytest.mark.asyncio
    async def test_simple(self, resolver):
        assert await resolver.resolve("{{FETCHREMOTE|earth}}", {}) == "Earth"
        assert await resolver.resolve("{{FETCHREMOTE|func}}", {}) == "Function (computer programming)"

    @pytest.mark.asyncio
    async def test_with_other_functions(self, resolver):
        text = "{{FETCHREMOTE|earth}} said {{PRONOUN|he|she|they}} wants to go."
        assert await resolver.resolve(text, {"pronoun": "they"}) == "Earth said they wants to go."

    @pytest.mark.asyncio
    async def test_nested_argument(self, resolver):
        text = (
            '{{FETCHREMOTE|{{ARTICLE_NAME}}}} fetches the first result '
            'from Wikipedia for "{{ARTICLE_NAME}}".'
        )
        assert await resolver.resolve(text, {"article_name": "func"}) == (
            'Function (computer programming) fetches the first result '
            'from Wikipedia for "func".'
        )
