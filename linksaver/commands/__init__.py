"""Command implementations for linksaver."""

from .add import add_link
from .delete import delete_link
from .list_links import list_links
from .show import show_link

__all__ = ["add_link", "delete_link", "list_links", "show_link"]
