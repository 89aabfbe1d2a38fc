from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger("agent_docs_mcp.config")


@dataclass(frozen=True)
class Settings:
    repo_urls: tuple[str, ...] = ()
    github_token: Optional[str] = None
    log_level: str = "INFO"


def parse_repo_urls(raw: Optional[str]) -> tuple[str, ...]:
    """
    Parse the REPO_URLS value: a JSON array of repository references.

    A malformed value is logged and treated as "nothing configured" so the
    server can still start and report that to the client.
    """
    if not raw or not raw.strip():
        return ()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Error parsing REPO_URLS environment variable: %s", e)
        return ()

    if not isinstance(data, list):
        logger.error("REPO_URLS must be a JSON array, got %s", type(data).__name__)
        return ()

    urls: list[str] = []
    for item in data:
        if not isinstance(item, str) or not item.strip():
            logger.warning("ignoring REPO_URLS entry %r", item)
            continue
        urls.append(item.strip())
    return tuple(urls)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        repo_urls=parse_repo_urls(env.get("REPO_URLS")),
        github_token=env.get("GITHUB_TOKEN") or env.get("GH_TOKEN") or None,
        log_level=env.get("AGENT_DOCS_LOG_LEVEL", "INFO"),
    )
