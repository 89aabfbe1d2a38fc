from ..server import fetcher, mcp


@mcp.tool()
def list_configured_urls() -> str:
    """
    Lists all configured base URLs.
    """
    if fetcher.base_urls:
        url_list = "\n".join(f"{i}. {u}" for i, u in enumerate(fetcher.base_urls, start=1))
    else:
        url_list = "No URLs configured."

    return (
        f"# Configured Base URLs\n\n{url_list}\n\n"
        "Note: AGENT.md will be appended to each base URL."
    )
