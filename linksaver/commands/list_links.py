"""List links command."""

import shutil

from rich.markup import escape
from rich.style import Style
from rich.text import Text

from common.display import console, get_tag_color, truncate
from common.url_utils import strip_www
from ..store import LinkStore


def list_links(owner_id: str, store: LinkStore | None = None, verbose: int = 0) -> None:
    """List an owner's links, newest first.

    Args:
        owner_id: Owner whose links to list
        store: Link store (default: LinkStore at the configured path)
        verbose: If True, show URLs, full descriptions and summaries
    """
    if store is None:
        store = LinkStore()

    links = store.list_by_owner(owner_id)

    if not links:
        console.print("[dim]No links found.[/dim]")
        return

    # Calculate widths
    terminal_margin = 12
    terminal_width = shutil.get_terminal_size().columns or 120
    name_max = min(127, terminal_width - 2 * terminal_margin)
    desc_max = terminal_width - terminal_margin

    for link in links:
        link_id = link.get("id", "?")
        name = (link.get("title") or "").strip() or "Untitled"
        desc = (link.get("description") or "").replace("\n", " ").strip()
        domain = strip_www(link.get("domain", ""))
        tags = link.get("tags", [])

        if not verbose:
            name = truncate(name, name_max)
            desc = truncate(desc, desc_max)

        # Name line with domain and tags
        line = Text()
        line.append(f"  {link_id[:8]} ", style="dim")
        url = link.get("url", "")
        line.append(name, style=Style(link=url) if url else None)
        if domain:
            line.append(f"  {domain}", style="dim")
        for tag in tags:
            line.append(f" [{tag}]", style=f"dim {get_tag_color(tag)}")
        console.print(line)

        if verbose:
            console.print(f"           [dim]{escape(url)}[/dim]")

        if desc:
            console.print(f"           [dim]{escape(desc)}[/dim]")

        if verbose and link.get("summary"):
            console.print(f"           {escape(link['summary'].strip())}")

    console.print(f"\n[bold]{len(links)}[/bold] links total")
