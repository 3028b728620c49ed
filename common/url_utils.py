"""URL parsing utilities."""

from urllib.parse import urlparse


def get_domain(url: str) -> str:
    """Extract the hostname from a URL.

    Lowercased, without port or credentials. Returns an empty string when
    the URL has no host component.
    """
    if not url:
        return ""

    try:
        return urlparse(url.strip()).hostname or ""
    except ValueError:
        return ""


def strip_www(domain: str) -> str:
    """Remove a leading "www." from a domain for display."""
    if domain.startswith("www."):
        return domain[4:]
    return domain
