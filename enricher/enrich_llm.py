"""Enrichment-specific LLM orchestration - builds prompts, calls LLM, filters results."""

from pathlib import Path
from typing import Callable

from rich.markup import escape

from .llm import call_api
from common.display import console

PROMPTS_DIR = Path(__file__).parent / "prompts"
TAGS_PROMPT_PATH = PROMPTS_DIR / "classify-tags.md"
SUMMARY_PROMPT_PATH = PROMPTS_DIR / "summary-link.md"

# Closed label set; model output outside it never reaches storage
TAXONOMY = ("Image", "Video", "News", "Blog", "Music", "Social Media Post")
TAXONOMY_SET = frozenset(TAXONOMY)


def load_prompt(prompt_path: str | Path) -> str:
    """Load prompt template from file."""
    path = Path(prompt_path)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {prompt_path}")
    return path.read_text(encoding="utf-8")


def build_tags_prompt(title: str, description: str, url: str) -> str:
    template = load_prompt(TAGS_PROMPT_PATH)
    return template.format(
        categories=", ".join(TAXONOMY),
        title=title,
        description=description,
        url=url,
    )


def build_summary_prompt(title: str, description: str) -> str:
    template = load_prompt(SUMMARY_PROMPT_PATH)
    return template.format(title=title, description=description)


def parse_tags(response_text: str | None) -> list[str]:
    """Parse a comma-separated tag list, keeping only taxonomy labels.

    Matching is exact and case-sensitive after trimming. Unknown labels are
    dropped and duplicates collapse, preserving first-seen order.
    """
    if not response_text:
        return []

    tags = []
    for token in response_text.split(","):
        tag = token.strip()
        if tag in TAXONOMY_SET and tag not in tags:
            tags.append(tag)
    return tags


def _default_generate(verbose: int = 0) -> Callable[[str], str]:
    """Model collaborator backed by call_api."""
    def generate(prompt: str) -> str:
        return call_api(prompt, verbose=verbose)
    return generate


def classify_tags(title: str, description: str, url: str, generate: Callable[[str], str] | None = None, verbose: int = 0) -> list[str]:
    """Ask the model to classify a page into taxonomy labels.

    Raises whatever the model call raises; callers own the fault boundary.
    """
    if generate is None:
        generate = _default_generate(verbose)

    response_text = generate(build_tags_prompt(title, description, url))
    tags = parse_tags(response_text)
    if verbose >= 1:
        console.print(f"[dim]  Tags: {', '.join(tags) or '(none)'}[/dim]")
    return tags


def summarize(title: str, description: str, generate: Callable[[str], str] | None = None, verbose: int = 0) -> str:
    """Ask the model for a short summary. Response text is used verbatim."""
    if generate is None:
        generate = _default_generate(verbose)

    summary = generate(build_summary_prompt(title, description)) or ""
    if verbose >= 1:
        console.print(f"[dim]  Summary: {len(summary):,} chars[/dim]")
    return summary


def enrich_metadata(
    title: str,
    description: str,
    url: str,
    generate: Callable[[str], str] | None = None,
    verbose: int = 0,
) -> dict:
    """Generate taxonomy tags and a summary for extracted page metadata.

    Best-effort: each model call is isolated on its own, so a failing tag call
    still lets the summary run and vice versa. Failures are reported on the
    console and leave that field at its default.

    Args:
        title: Extracted page title
        description: Extracted page description
        url: The original URL
        generate: Model collaborator, generate(prompt) -> text (default: call_api)
        verbose: Verbosity level (0=quiet, 1=details, 2=LLM prompts)

    Returns:
        Dict with keys: tags (list of taxonomy labels), summary (str, may be empty)
    """
    tags: list[str] = []
    summary = ""

    try:
        tags = classify_tags(title, description, url, generate=generate, verbose=verbose)
    except Exception as e:
        console.print(f"[yellow]  ⚠ Tag classification failed: {escape(str(e))}[/yellow]")

    try:
        summary = summarize(title, description, generate=generate, verbose=verbose)
    except Exception as e:
        console.print(f"[yellow]  ⚠ Summary generation failed: {escape(str(e))}[/yellow]")

    return {"tags": tags, "summary": summary}
