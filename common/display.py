"""Display and formatting utilities."""

import hashlib
from rich.console import Console

console = Console(highlight=False)

# Colors for tags (visually distinct, readable on dark backgrounds)
TAG_COLORS = [
    "bright_magenta", "bright_cyan", "bright_green", "bright_yellow",
    "bright_blue", "bright_red", "magenta", "cyan", "green", "yellow",
    "blue", "red", "deep_pink3", "dark_orange", "chartreuse3", "turquoise2",
]


def get_tag_color(tag_name: str) -> str:
    """Get a consistent color for a tag based on its name."""
    tag_hash = int(hashlib.md5(tag_name.encode()).hexdigest(), 16)
    return TAG_COLORS[tag_hash % len(TAG_COLORS)]


def format_tags_display(tags: list[str]) -> str:
    """Format a list of tag names as a colored Rich markup string."""
    return ", ".join(
        f"[{get_tag_color(t)}]{t}[/{get_tag_color(t)}]" for t in tags
    )


def truncate(text: str, max_chars: int) -> str:
    """Cut text to max_chars, marking the cut with an ellipsis."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars - 3] + "..."
