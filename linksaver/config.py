"""Configuration utility for linksaver settings."""

import os

DEFAULT_STORE_PATH = "data/links.json"
DEFAULT_FETCH_TIMEOUT = 30.0


def get_store_path() -> str:
    """Get the link store file path from environment."""
    return os.environ.get("LINKSAVER_STORE") or DEFAULT_STORE_PATH


def get_owner_id(override: str | None = None) -> str:
    """Get the owner id of the authenticated caller.

    The value is trusted as-is; authentication happens upstream.

    Args:
        override: Explicit owner id (e.g. from --owner), takes precedence

    Raises:
        ValueError: If neither override nor LINKSAVER_OWNER is set
    """
    owner_id = override or os.environ.get("LINKSAVER_OWNER")

    if not owner_id:
        raise ValueError("LINKSAVER_OWNER environment variable or --owner must be set")

    return owner_id


def get_fetch_timeout() -> float:
    """Get the page fetch timeout in seconds from environment.

    Raises:
        ValueError: If LINKSAVER_FETCH_TIMEOUT is not a positive number
    """
    raw = os.environ.get("LINKSAVER_FETCH_TIMEOUT")
    if not raw:
        return DEFAULT_FETCH_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"LINKSAVER_FETCH_TIMEOUT must be a number, got {raw!r}") from None

    if timeout <= 0:
        raise ValueError(f"LINKSAVER_FETCH_TIMEOUT must be positive, got {raw!r}")
    return timeout
