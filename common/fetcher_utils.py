"""
Shared utilities and exceptions for the page fetcher.
"""

from urllib.parse import urlparse

# Some sites refuse the default python-requests agent outright.
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Encoding": "gzip,deflate",
}


class ContentFetchError(Exception):
    """Base exception for content fetching errors that should be raised to caller."""
    pass


class FetchError(ContentFetchError):
    """Raised when a page cannot be retrieved (network, timeout, non-2xx, bad URL)."""

    def __init__(self, url: str, reason: str, status: int | None = None):
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"Failed to fetch {url}: {reason}")


def is_fetchable_url(url: str) -> bool:
    """Check that a URL is absolute http(s) with a host.

    Fast syntactic check only, no network requests.
    """
    if not url:
        return False
    try:
        parsed = urlparse(url.strip())
        return parsed.scheme in ("http", "https") and bool(parsed.hostname)
    except ValueError:
        return False


def describe_status(status: int) -> str:
    """Short human-readable label for an HTTP status code."""
    if status == 404:
        return "HTTP 404 (not found)"
    if status in (401, 403):
        return f"HTTP {status} (access denied)"
    if status == 429:
        return "HTTP 429 (rate limited)"
    if status >= 500:
        return f"HTTP {status} (server error)"
    return f"HTTP {status}"
