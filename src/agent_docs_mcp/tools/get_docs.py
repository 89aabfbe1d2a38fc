from __future__ import annotations

from ..core.fetch import FetchOutcome
from ..server import fetcher, mcp

NO_URLS_MESSAGE = (
    "No base URLs configured. Please configure URLs in your MCP client settings."
)


def format_outcomes(outcomes: list[FetchOutcome]) -> str:
    """Render aggregate results as one markdown document, errors last."""
    ok = [o for o in outcomes if o.ok]
    failed = [o for o in outcomes if not o.ok]

    parts: list[str] = []
    if ok:
        parts.append("# AGENT.md Documentation Content\n\n")
        for o in ok:
            parts.append(f"## From: {o.base_url}\n\n")
            parts.append(o.content)
            parts.append("\n\n---\n\n")

    if failed:
        parts.append("\n## Errors:\n")
        for o in failed:
            parts.append(f"- {o.base_url}: {o.error}\n")

    return "".join(parts) or "No content available."


@mcp.tool()
async def get_docs() -> str:
    """
    Gets all AGENT.md documentation content from configured base URLs.
    """
    if not fetcher.base_urls:
        return NO_URLS_MESSAGE

    outcomes = await fetcher.fetch_all()
    return format_outcomes(outcomes)
