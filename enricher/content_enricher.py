"""Generic page fetching + metadata extraction + LLM enrichment orchestration."""

from typing import Callable

from .page_fetcher import fetch_page
from .metadata import extract_metadata
from .enrich_llm import enrich_metadata
from common.display import console


def enrich_url(
    url: str,
    generate: Callable[[str], str] | None = None,
    timeout: float | None = None,
    verbose: int = 0,
    status=None,
) -> dict:
    """Fetch a URL and build its enriched metadata (not persisted).

    This is the generic enrichment entry point. No storage dependencies.
    The fetch is mandatory; enrichment is best-effort.

    Args:
        url: The URL to enrich
        generate: Model collaborator, generate(prompt) -> text (default: call_api)
        timeout: Page fetch timeout in seconds
        verbose: Verbosity level (0=quiet, 1=details, 2=LLM prompts)
        status: Optional rich Status object to update with phase info

    Returns:
        Dict with keys: title, description, image_url, domain, tags, summary

    Raises:
        FetchError: If the page cannot be fetched
    """
    if hasattr(status, "update"):
        status.update("  Fetching page...")
    document = fetch_page(url, timeout=timeout, verbose=verbose)

    metadata = extract_metadata(document["raw_html"], url)
    if verbose >= 1:
        console.print(f"  [dim]Extracted metadata from {metadata['domain']}[/dim]")

    if hasattr(status, "update"):
        status.update("  Calling LLM...")
    enrichment = enrich_metadata(
        metadata["title"], metadata["description"], url,
        generate=generate, verbose=verbose,
    )

    return {**metadata, **enrichment}
