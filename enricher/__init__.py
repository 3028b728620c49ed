"""Generic page enrichment module (no storage dependencies)."""

from .content_enricher import enrich_url
from .enrich_llm import TAXONOMY, enrich_metadata
from .metadata import extract_metadata
from .page_fetcher import fetch_page

__all__ = ["TAXONOMY", "enrich_metadata", "enrich_url", "extract_metadata", "fetch_page"]
