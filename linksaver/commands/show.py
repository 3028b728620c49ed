"""Show a single link."""

import json

from rich.markup import escape
from rich.panel import Panel

from common.display import console, format_tags_display
from ..store import LinkStore


def _render_link(link: dict) -> None:
    lines = [
        f"[bold]Title:[/bold] {escape(link.get('title', ''))}",
        f"[bold]URL:[/bold] {escape(link.get('url', ''))}",
        f"[bold]Domain:[/bold] {escape(link.get('domain', ''))}",
    ]
    if link.get("description"):
        lines.append(f"[bold]Description:[/bold] {escape(link['description'])}")
    if link.get("image_url"):
        lines.append(f"[bold]Image:[/bold] {escape(link['image_url'])}")
    if link.get("tags"):
        lines.append(f"[bold]Tags:[/bold] {format_tags_display(link['tags'])}")
    lines.append(f"[bold]Saved:[/bold] {link.get('created_at', '?')}")

    console.print(Panel("\n".join(lines), title=f"#{link.get('id', '?')}", border_style="cyan"))

    if link.get("summary"):
        console.print(Panel(escape(link["summary"].strip()), title="Summary", border_style="green"))


def show_link(link_id: str, owner_id: str, store: LinkStore | None = None, json_output: bool = False) -> int:
    """Display one of the owner's links.

    Returns:
        Exit code (0 = success, 1 = not found)
    """
    if store is None:
        store = LinkStore()

    link = store.get_by_id_and_owner(link_id, owner_id)
    if link is None:
        console.print(f"[red]Error: Link {escape(link_id)} not found[/red]")
        return 1

    if json_output:
        print(json.dumps(link, ensure_ascii=False, indent=2))
    else:
        _render_link(link)
    return 0
