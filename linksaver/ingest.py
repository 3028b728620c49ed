"""Link ingestion: fetch, extract, enrich, then persist.

The fetch is mandatory and any failure aborts before anything is stored.
Enrichment is best-effort and never aborts ingestion.
"""

from typing import Any, Callable, Dict

from enricher.content_enricher import enrich_url
from common.fetcher_utils import FetchError  # noqa: F401 (re-exported)
from .store import LinkStore, PersistenceError  # noqa: F401 (re-exported)


def prepare_link(
    url: str,
    owner_id: str,
    generate: Callable[[str], str] | None = None,
    timeout: float | None = None,
    verbose: int = 0,
    status=None,
) -> Dict[str, Any]:
    """Run the pipeline for a URL and assemble the unsaved link.

    Returns:
        Dict with keys: owner_id, url, title, description, image_url, domain,
        tags, summary (no id/created_at yet)

    Raises:
        FetchError: If the page cannot be fetched
    """
    enriched = enrich_url(url, generate=generate, timeout=timeout, verbose=verbose, status=status)

    return {
        "owner_id": owner_id,
        "url": url,
        "title": enriched["title"],
        "description": enriched["description"],
        "image_url": enriched["image_url"],
        "domain": enriched["domain"],
        "tags": enriched["tags"],
        "summary": enriched["summary"],
    }


def ingest(
    url: str,
    owner_id: str,
    store: LinkStore | None = None,
    generate: Callable[[str], str] | None = None,
    timeout: float | None = None,
    verbose: int = 0,
    status=None,
) -> Dict[str, Any]:
    """Turn a submitted URL into a stored, enriched link.

    Args:
        url: The submitted URL
        owner_id: Owner of the new link (trusted, already authenticated)
        store: Link store (default: LinkStore at the configured path)
        generate: Model collaborator, generate(prompt) -> text (default: call_api)
        timeout: Page fetch timeout in seconds
        verbose: Verbosity level (0=quiet, 1=details, 2=LLM prompts)
        status: Optional rich Status object to update with phase info

    Returns:
        The stored link, possibly with empty tags/summary

    Raises:
        FetchError: If the page cannot be fetched; nothing is stored
        PersistenceError: If the store write fails
    """
    link = prepare_link(url, owner_id, generate=generate, timeout=timeout, verbose=verbose, status=status)

    if store is None:
        store = LinkStore()

    if hasattr(status, "update"):
        status.update("  Saving link...")
    return store.insert(link)
