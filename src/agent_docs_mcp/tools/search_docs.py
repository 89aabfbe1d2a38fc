from __future__ import annotations

from ..core.markdown import split_sections
from ..core.scoring import score_section
from ..server import fetcher, mcp

SNIPPET_CHARS = 800


@mcp.tool()
async def search_docs(query: str, max_results: int = 10) -> dict:
    """
    Search the AGENT.md files of all configured repositories and return the
    best matching sections.
    """
    outcomes = await fetcher.fetch_all()

    hits = []
    for o in outcomes:
        if not o.ok:
            continue
        for section in split_sections(o.content):
            s = score_section(query, section.heading, section.text)
            if s > 0:
                hits.append((s, o.base_url, section))

    # stable sort keeps configured order among equal scores
    hits.sort(key=lambda x: x[0], reverse=True)
    hits = hits[: max(0, max_results)]

    results = [
        {
            "base_url": base_url,
            "heading": section.heading,
            "score": float(s),
            "snippet": section.text[:SNIPPET_CHARS],
        }
        for s, base_url, section in hits
    ]
    errors = [{"base_url": o.base_url, "error": o.error} for o in outcomes if not o.ok]
    return {"query": query, "results": results, "errors": errors}
