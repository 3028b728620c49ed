"""
Page metadata extraction using BeautifulSoup.

Each field is resolved from an ordered list of lookups; the first
non-empty value wins. The domain always comes from the request URL.
"""

from typing import Callable, Dict, Optional

from bs4 import BeautifulSoup

from common.url_utils import get_domain

DEFAULT_TITLE = "Untitled"

Lookup = Callable[[BeautifulSoup], Optional[str]]


def _title_tag(soup: BeautifulSoup) -> Optional[str]:
    tag = soup.find("title")
    return tag.get_text() if tag else None


def _meta_name(name: str) -> Lookup:
    def lookup(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.find("meta", attrs={"name": name})
        return tag.get("content") if tag else None
    return lookup


def _meta_property(prop: str) -> Lookup:
    def lookup(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.find("meta", attrs={"property": prop})
        return tag.get("content") if tag else None
    return lookup


TITLE_LOOKUPS: list[Lookup] = [_title_tag, _meta_property("og:title")]
DESCRIPTION_LOOKUPS: list[Lookup] = [_meta_name("description"), _meta_property("og:description")]
IMAGE_LOOKUPS: list[Lookup] = [_meta_property("og:image")]


def first_match(soup: BeautifulSoup | None, lookups: list[Lookup], default: str = "") -> str:
    """Return the first non-blank lookup result, or default."""
    if soup is None:
        return default
    for lookup in lookups:
        try:
            value = lookup(soup)
        except Exception:
            value = None
        # Multi-valued attributes come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        if value and value.strip():
            return value.strip()
    return default


def _parse(raw_html: str) -> BeautifulSoup | None:
    if not raw_html:
        return None
    try:
        return BeautifulSoup(raw_html, "html.parser")
    except Exception:
        return None


def extract_metadata(raw_html: str, url: str) -> Dict[str, str]:
    """Extract title, description, preview image and domain for a page.

    Never raises: malformed or non-HTML documents yield defaults for every
    field except domain.

    Args:
        raw_html: Document body as returned by fetch_page()
        url: The original request URL (source of the domain)

    Returns:
        Dict with keys: title, description, image_url, domain
    """
    soup = _parse(raw_html)

    return {
        "title": first_match(soup, TITLE_LOOKUPS, DEFAULT_TITLE),
        "description": first_match(soup, DESCRIPTION_LOOKUPS),
        "image_url": first_match(soup, IMAGE_LOOKUPS),
        "domain": get_domain(url),
    }
