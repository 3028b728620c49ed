"""Delete link command."""

from rich.markup import escape

from common.display import console
from ..store import LinkStore


def delete_link(link_id: str, owner_id: str, store: LinkStore | None = None, dry_run: bool = False) -> int:
    """Delete one of the owner's links.

    Returns:
        Exit code (0 = success, 1 = not found)
    """
    if store is None:
        store = LinkStore()

    link = store.get_by_id_and_owner(link_id, owner_id)
    if link is None:
        console.print(f"[red]Error: Link {escape(link_id)} not found[/red]")
        return 1

    title = escape(link.get("title", "Untitled"))
    if dry_run:
        console.print(f"[dim](dry-run)[/dim] Would delete #{link_id} {title}")
        return 0

    store.delete_by_id_and_owner(link_id, owner_id)
    console.print(f"[red]Deleted[/red] #{link_id} {title}")
    return 0
