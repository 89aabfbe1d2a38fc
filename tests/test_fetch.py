import asyncio

import httpx
import pytest

from agent_docs_mcp.core.fetch import AgentDocFetcher, AgentDocFetchError, FetchOutcome


def _transport(routes: dict[str, httpx.Response], seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        url = str(request.url)
        if url in routes:
            return routes[url]
        if "offline" in url:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(404, text="404: Not Found")

    return httpx.MockTransport(handler)


RAW_B = "https://raw.githubusercontent.com/a/b/main/AGENT.md"


@pytest.mark.asyncio
async def test_fetch_one_returns_content():
    fetcher = AgentDocFetcher(transport=_transport({RAW_B: httpx.Response(200, text="# Agent\n")}))

    content = await fetcher.fetch_one("https://github.com/a/b")

    assert content == "# Agent\n"


@pytest.mark.asyncio
async def test_fetch_one_http_failure_carries_status():
    fetcher = AgentDocFetcher(transport=_transport({}))

    with pytest.raises(AgentDocFetchError) as exc:
        await fetcher.fetch_one("https://github.com/a/missing")

    msg = str(exc.value)
    assert msg.startswith("Error fetching AGENT.md from https://github.com/a/missing:")
    assert "404 Not Found" in msg


@pytest.mark.asyncio
async def test_fetch_one_transport_failure():
    fetcher = AgentDocFetcher(transport=_transport({}))

    with pytest.raises(AgentDocFetchError, match="connection refused"):
        await fetcher.fetch_one("https://github.com/a/offline")


@pytest.mark.asyncio
async def test_fetch_one_unsupported_url_makes_no_request():
    seen = []
    fetcher = AgentDocFetcher(transport=_transport({}, seen))

    with pytest.raises(AgentDocFetchError, match="Unsupported GitHub URL format"):
        await fetcher.fetch_one("not-a-real-host.example/x")

    assert seen == []


@pytest.mark.asyncio
async def test_fetch_all_keeps_order_and_isolates_failures():
    refs = [
        "https://github.com/a/offline",
        "https://github.com/a/b",
        "not-a-real-host.example/x",
        "https://github.com/a/missing",
    ]
    fetcher = AgentDocFetcher(refs, transport=_transport({RAW_B: httpx.Response(200, text="docs")}))

    outcomes = await fetcher.fetch_all()

    assert [o.base_url for o in outcomes] == refs
    assert [o.ok for o in outcomes] == [False, True, False, False]
    assert outcomes[1] == FetchOutcome(base_url="https://github.com/a/b", content="docs")
    assert "Unsupported GitHub URL format" in outcomes[2].error
    assert all(o.content == "" for o in outcomes if not o.ok)


@pytest.mark.asyncio
async def test_fetch_all_explicit_refs_override_configured():
    fetcher = AgentDocFetcher(["https://github.com/x/y"], transport=_transport({RAW_B: httpx.Response(200, text="b")}))

    outcomes = await fetcher.fetch_all(["https://github.com/a/b"])

    assert outcomes == [FetchOutcome(base_url="https://github.com/a/b", content="b")]


@pytest.mark.asyncio
async def test_fetch_all_empty():
    assert await AgentDocFetcher(transport=_transport({})).fetch_all() == []


@pytest.mark.asyncio
async def test_github_token_is_sent():
    seen = []
    fetcher = AgentDocFetcher(
        github_token="s3cret",
        transport=_transport({RAW_B: httpx.Response(200, text="x")}, seen),
    )

    await fetcher.fetch_one("https://github.com/a/b")

    assert seen[0].headers["Authorization"] == "token s3cret"


def test_fetcher_base_urls_are_immutable():
    refs = ["https://github.com/a/b"]
    fetcher = AgentDocFetcher(refs)
    refs.append("https://github.com/c/d")

    assert fetcher.base_urls == ("https://github.com/a/b",)


BAD_PORT_REF = "https://github.com:abc/a/b"


@pytest.mark.asyncio
async def test_fetch_one_unparseable_url_is_wrapped():
    fetcher = AgentDocFetcher(transport=_transport({}))

    with pytest.raises(AgentDocFetchError) as exc:
        await fetcher.fetch_one(BAD_PORT_REF)

    assert str(exc.value).startswith(f"Error fetching AGENT.md from {BAD_PORT_REF}:")


@pytest.mark.asyncio
async def test_fetch_all_unparseable_url_keeps_reference_prefix():
    fetcher = AgentDocFetcher(transport=_transport({RAW_B: httpx.Response(200, text="ok")}))

    outcomes = await fetcher.fetch_all([BAD_PORT_REF, "https://github.com/a/b"])

    assert outcomes[0].content == ""
    assert outcomes[0].error.startswith(f"Error fetching AGENT.md from {BAD_PORT_REF}:")
    assert outcomes[1].content == "ok"


@pytest.mark.asyncio
async def test_fetch_all_order_does_not_follow_completion():
    finished = []

    async def handler(request: httpx.Request) -> httpx.Response:
        owner = request.url.path.split("/")[1]
        await asyncio.sleep(0.05 if owner == "slow" else 0)
        finished.append(owner)
        return httpx.Response(200, text=owner)

    refs = ["https://github.com/slow/r", "https://github.com/fast/r"]
    fetcher = AgentDocFetcher(refs, transport=httpx.MockTransport(handler))

    outcomes = await fetcher.fetch_all()

    assert finished == ["fast", "slow"]
    assert [(o.base_url, o.content) for o in outcomes] == [
        ("https://github.com/slow/r", "slow"),
        ("https://github.com/fast/r", "fast"),
    ]
