"""
Page fetching over HTTP(S) using requests.

One GET per call: no retries, no caching, no content-type checks.
"""

from typing import Dict

import requests

from common.display import console
from common.fetcher_utils import DEFAULT_HEADERS, FetchError, describe_status, is_fetchable_url

DEFAULT_TIMEOUT = 30


def fetch_page(url: str, timeout: float | None = None, verbose: int = 0) -> Dict[str, str]:
    """
    Fetch the raw document for a URL.

    Args:
        url: Absolute http(s) URL
        timeout: Request timeout in seconds (default: DEFAULT_TIMEOUT)
        verbose: If True, show detailed fetch info

    Returns:
        Dict with the fetched document
        {
            "raw_html": str,
            "source_url": str,
        }

    Raises:
        FetchError: On malformed URL, network error, timeout or non-2xx status
    """
    if not is_fetchable_url(url):
        raise FetchError(url, "not an absolute http(s) URL")

    if timeout is None:
        timeout = DEFAULT_TIMEOUT

    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
    except requests.Timeout as e:
        raise FetchError(url, f"timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise FetchError(url, str(e) or e.__class__.__name__) from e

    if not 200 <= response.status_code < 300:
        raise FetchError(url, describe_status(response.status_code), status=response.status_code)

    raw_html = response.text
    if verbose:
        content_type = response.headers.get("content-type", "?")
        console.print(f"[dim]  Page downloaded ({len(raw_html):,} chars, {content_type})[/dim]")

    return {
        "raw_html": raw_html,
        "source_url": url,
    }
