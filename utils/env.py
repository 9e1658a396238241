"""
Environment variable readers used by config.py.

Values pasted into a hosting dashboard often carry stray whitespace
(SECRET_KEY, EXPORT_PAGE_SIZE); every reader strips it.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


def get_env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Stripped value of `name`, or `default` when unset or whitespace-only.

    Examples:
        >>> get_env_str("EXPORT_PAGE_SIZE", default="A4")
        >>> get_env_str("SECRET_KEY")
    """
    value = (os.getenv(name) or "").strip()
    return value or default


def get_env_bool(name: str, default: bool = False) -> bool:
    """
    Truthy values: "1", "true", "yes", "on" (case-insensitive).
    Anything else set is False; unset or empty returns `default`.
    """
    value = (get_env_str(name) or "").lower()
    if not value:
        return default
    return value in _TRUTHY


def get_env_int(name: str, default: int) -> int:
    """
    Read an integer environment variable.

    Falls back to `default` (with a warning) when the value does not parse.
    """
    value = get_env_str(name)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        logger.warning(f"[Config] WARNING: {name}='{value}' is not an integer. Defaulting to {default}.")
        return default
