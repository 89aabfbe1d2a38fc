from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .core.fetch import AgentDocFetcher
from .core.log import configure_logging, logger

load_dotenv()
settings = load_settings()
fetcher = AgentDocFetcher(settings.repo_urls, github_token=settings.github_token)

mcp = FastMCP("agent-docs-mcp")

from .tools import get_docs, get_doc_by_base_url, list_configured_urls, search_docs  # noqa: E402,F401


def main() -> None:
    configure_logging(settings.log_level)
    logger.info(
        "agent-docs-mcp running on stdio with %d configured base URLs",
        len(fetcher.base_urls),
    )
    mcp.run()


if __name__ == "__main__":
    main()
