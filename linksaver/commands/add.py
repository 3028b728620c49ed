"""Add link command - fetches a URL, enriches it and saves it."""

import json
from contextlib import nullcontext

from rich.markup import escape
from rich.style import Style
from rich.text import Text

from common.display import console, format_tags_display
from common.fetcher_utils import FetchError
from ..config import get_fetch_timeout
from ..ingest import ingest, prepare_link
from ..store import LinkStore, PersistenceError


def _display_result(link: dict, dry_run: bool) -> None:
    """Display the enriched link."""
    url = link["url"]
    console.print(Text("URL: ").append(url, style=Style(link=url)))
    console.print(f"Domain: {escape(link['domain'])}")
    console.print()

    console.print(f"[green]+ title:[/green] {escape(link['title'])}")
    if link["description"]:
        desc_lines = link["description"].split("\n")
        console.print(f"[green]+ desc:[/green] {escape(desc_lines[0])}")
        for line in desc_lines[1:]:
            console.print(f"  {escape(line)}")
    if link["image_url"]:
        console.print(f"[green]+ image:[/green] [dim]{escape(link['image_url'])}[/dim]")
    if link["tags"]:
        console.print(f"[green]+ tags:[/green] {format_tags_display(link['tags'])}")
    if link["summary"]:
        console.print(f"[green]+ summary:[/green] {escape(link['summary'].strip())}")

    console.print()
    if dry_run:
        console.print("[yellow](dry-run) Would save link[/yellow]")
    else:
        console.print(f"[green]Added![/green] [dim]#{link['id']}[/dim]")


def add_link(
    url: str,
    owner_id: str,
    store: LinkStore | None = None,
    dry_run: bool = False,
    json_output: bool = False,
    silent: bool = False,
    verbose: int = 0,
) -> int:
    """Add a URL with page metadata and LLM enrichment.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    show_output = (not silent or dry_run) and not json_output

    try:
        timeout = get_fetch_timeout()
    except ValueError as e:
        if not silent:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    status = console.status("  Enriching link...", spinner="dots") if show_output else nullcontext()
    try:
        with status:
            if dry_run:
                link = prepare_link(url, owner_id, timeout=timeout, verbose=verbose, status=status)
            else:
                link = ingest(url, owner_id, store=store, timeout=timeout, verbose=verbose, status=status)
    except FetchError as e:
        if not silent or dry_run:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except PersistenceError as e:
        if not silent or dry_run:
            console.print(f"[red]Error: Failed to save link: {escape(str(e))}[/red]")
        return 1

    if json_output:
        print(json.dumps(link, ensure_ascii=False, indent=2))
    elif show_output:
        _display_result(link, dry_run)
    return 0
