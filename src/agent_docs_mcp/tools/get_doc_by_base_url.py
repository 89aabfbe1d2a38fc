from __future__ import annotations

from mcp.server.fastmcp.exceptions import ToolError

from ..core.fetch import AgentDocFetchError
from ..server import fetcher, mcp


@mcp.tool()
async def get_doc_by_base_url(base_url: str) -> str:
    """
    Gets AGENT.md documentation content from a specific base URL
    (e.g. https://github.com/owner/repo/blob/main or https://github.com/owner/repo/blob/main/docs).
    """
    if not base_url or not base_url.strip():
        raise ToolError("base_url parameter is required")

    base_url = base_url.strip()
    try:
        content = await fetcher.fetch_one(base_url)
    except AgentDocFetchError as e:
        raise ToolError(str(e)) from e

    return f"# AGENT.md from: {base_url}\n\n{content}"
