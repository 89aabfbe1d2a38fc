from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import httpx

from .urls import UnsupportedURLError, build_agent_md_url, to_raw_url

logger = logging.getLogger("agent_docs_mcp.fetch")

USER_AGENT = "agent-docs-mcp"


class AgentDocFetchError(Exception):
    """A single AGENT.md fetch failed (bad URL, HTTP status or transport)."""


@dataclass(frozen=True)
class FetchOutcome:
    base_url: str
    content: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AgentDocFetcher:
    """
    Fetches AGENT.md from a fixed set of repository references.

    The reference list is captured at construction and never changes.
    ``transport`` exists so tests can plug in ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_urls: Iterable[str] = (),
        *,
        github_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_urls: tuple[str, ...] = tuple(base_urls)
        self._github_token = github_token
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": USER_AGENT}
        if self._github_token:
            headers["Authorization"] = f"token {self._github_token}"
        return httpx.AsyncClient(
            headers=headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _fetch(self, client: httpx.AsyncClient, base_url: str) -> str:
        try:
            raw_url = to_raw_url(build_agent_md_url(base_url))
            logger.debug("fetch: start base_url=%s raw_url=%s", base_url, raw_url)

            response = await client.get(raw_url)
            if not response.is_success:
                raise AgentDocFetchError(
                    f"Failed to fetch AGENT.md from {base_url}: "
                    f"{response.status_code} {response.reason_phrase}"
                )
            return response.text

        except (UnsupportedURLError, AgentDocFetchError, httpx.HTTPError, httpx.InvalidURL) as e:
            cause = str(e) or type(e).__name__
            logger.warning("fetch: failed base_url=%s error=%s", base_url, cause)
            raise AgentDocFetchError(f"Error fetching AGENT.md from {base_url}: {cause}") from e

    async def fetch_one(self, base_url: str) -> str:
        """Return the AGENT.md text for one reference or raise AgentDocFetchError."""
        async with self._client() as client:
            return await self._fetch(client, base_url)

    async def fetch_all(self, base_urls: Optional[Sequence[str]] = None) -> list[FetchOutcome]:
        """
        Fetch every reference concurrently.

        Always returns one outcome per reference, in input order; a failure only
        ever affects its own slot.
        """
        urls = self.base_urls if base_urls is None else tuple(base_urls)
        if not urls:
            return []

        async with self._client() as client:
            results = await asyncio.gather(
                *(self._fetch(client, u) for u in urls),
                return_exceptions=True,
            )

        outcomes: list[FetchOutcome] = []
        for base_url, result in zip(urls, results):
            if isinstance(result, BaseException):
                outcomes.append(FetchOutcome(base_url=base_url, content="", error=str(result) or type(result).__name__))
            else:
                outcomes.append(FetchOutcome(base_url=base_url, content=result))
        return outcomes
