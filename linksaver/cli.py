"""CLI argument parsing and dispatch for linksaver."""

import argparse
import sys

from rich.markup import escape

from common.display import console
from .commands import add_link, delete_link, list_links, show_link
from .config import get_owner_id
from .store import PersistenceError


def _add_add_parser(subparsers):
    """Add the 'add' subcommand parser."""
    p = subparsers.add_parser("add", help="Save a URL with page metadata and LLM enrichment")
    p.add_argument("url", type=str, help="URL to add")
    p.add_argument("--dry-run", action="store_true", help="Preview without saving")
    p.add_argument("--json", dest="json_output", action="store_true", help="Output the link as JSON")
    p.add_argument("--silent", action="store_true", help="No output, just exit code (ignored with --dry-run)")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for details, -vv for LLM prompts")


def _add_list_parser(subparsers):
    """Add the 'list' subcommand parser."""
    p = subparsers.add_parser("list", help="List saved links, newest first")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for URLs, full descriptions and summaries")


def _add_show_parser(subparsers):
    """Add the 'show' subcommand parser."""
    p = subparsers.add_parser("show", help="Show one saved link")
    p.add_argument("id", type=str, help="Link ID")
    p.add_argument("--json", dest="json_output", action="store_true", help="Output as JSON")


def _add_delete_parser(subparsers):
    """Add the 'delete' subcommand parser."""
    p = subparsers.add_parser("delete", help="Delete one saved link")
    p.add_argument("id", type=str, help="Link ID")
    p.add_argument("--dry-run", action="store_true", help="Preview without deleting")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the main argument parser."""
    parser = argparse.ArgumentParser(
        description="linksaver: save links enriched with metadata, tags and summaries"
    )
    parser.add_argument("--owner", type=str, default=None, help="Owner ID (default: $LINKSAVER_OWNER)")
    subparsers = parser.add_subparsers(dest="command")

    _add_add_parser(subparsers)
    _add_list_parser(subparsers)
    _add_show_parser(subparsers)
    _add_delete_parser(subparsers)

    return parser


def dispatch(args) -> int:
    """Route parsed args to the appropriate command function.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    try:
        owner_id = get_owner_id(args.owner)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    try:
        if args.command == "add":
            return add_link(
                url=args.url,
                owner_id=owner_id,
                dry_run=args.dry_run,
                json_output=args.json_output,
                silent=args.silent,
                verbose=args.verbose,
            )
        elif args.command == "list":
            console.print(f"[bold]linksaver[/bold] {args.command}\n")
            list_links(owner_id=owner_id, verbose=args.verbose)
            return 0
        elif args.command == "show":
            return show_link(args.id, owner_id=owner_id, json_output=args.json_output)
        elif args.command == "delete":
            return delete_link(args.id, owner_id=owner_id, dry_run=args.dry_run)
    except PersistenceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return 1


def main():
    """Entry point for the linksaver CLI."""
    from dotenv import load_dotenv
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    exit_code = dispatch(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
