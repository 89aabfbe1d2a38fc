from __future__ import annotations

import re

GITHUB_HOST = "github.com"
RAW_HOST = "raw.githubusercontent.com"
DEFAULT_BRANCH = "main"
DOC_FILENAME = "AGENT.md"

_BARE_REPO_RE = re.compile(r"^https://github\.com/([^/]+)/([^/]+)$")


class UnsupportedURLError(ValueError):
    """Raised when a URL cannot be mapped to a raw GitHub content address."""


def _strip_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def normalize_github_url(url: str) -> str:
    """
    Turn a repository reference into a blob URL (.../blob/<branch>[/path]).

    Patterns are checked most specific first so an explicit branch is never
    replaced by the default one.
    """
    normalized = _strip_trailing_slash(url)

    if _BARE_REPO_RE.match(normalized):
        return f"{normalized}/blob/{DEFAULT_BRANCH}"

    if "/tree/" in normalized:
        return normalized.replace("/tree/", "/blob/", 1)

    if "/blob/" in normalized:
        return normalized

    if RAW_HOST in normalized:
        _, sep, rest = normalized.partition(f"{RAW_HOST}/")
        parts = rest.split("/")
        if sep and len(parts) >= 3:
            owner, repo, branch, *path = parts
            suffix = "/" + "/".join(path) if path else ""
            return f"https://{GITHUB_HOST}/{owner}/{repo}/blob/{branch}{suffix}"

    # Anything else is taken as a bare repository URL.
    return f"{normalized}/blob/{DEFAULT_BRANCH}"


def build_agent_md_url(base_url: str) -> str:
    """Blob URL of the AGENT.md file under ``base_url``."""
    base = _strip_trailing_slash(normalize_github_url(base_url))
    return f"{base}/{DOC_FILENAME}"


def to_raw_url(url: str) -> str:
    """
    Convert a GitHub blob URL into its raw.githubusercontent.com form.

    Raw URLs pass through untouched; any other host is rejected.
    """
    if GITHUB_HOST in url and "/blob/" in url:
        return url.replace(GITHUB_HOST, RAW_HOST, 1).replace("/blob/", "/", 1)

    if RAW_HOST in url:
        return url

    raise UnsupportedURLError(f"Unsupported GitHub URL format: {url}")
