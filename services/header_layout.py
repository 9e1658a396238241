"""
Catalog Header Layout Engine.

Single source of truth for:
1. Logo sizing (size tier -> standardized pixel height).
2. Header placement (logo anchor, title anchor, collisions, title override).

Every catalog template, the editor preview, the public viewer and the export
pipeline call these two functions. Do not re-implement either anywhere else;
`scripts/check_layout_delegation.py` fails the build if a copy appears.

Both functions are pure: no I/O, no caching, no shared mutable state.
They never raise for unknown values; they degrade to a defined output so a
render pass can always complete.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from constants import (
    ANCHORS,
    ANCHOR_LEFT,
    ANCHOR_CENTER,
    ANCHOR_RIGHT,
    DEFAULT_LOGO_SIZE,
    DEFAULT_TITLE_POSITION,
    FOOTER_PREFIX,
    HEADER_PREFIX,
    LOGO_HEIGHTS,
    TITLE_OVERRIDE_PRECEDENCE,
)

logger = logging.getLogger(__name__)

# Prefixes allowed in front of an anchor ("header-left", "footer-right")
_LOGO_PREFIXES = (HEADER_PREFIX, FOOTER_PREFIX)
_TITLE_PREFIXES = (HEADER_PREFIX,)


@dataclass(frozen=True)
class ResolvedHeaderLayout:
    """Placement directives for one render pass. Never mutated."""
    is_header_logo: bool
    logo_alignment: str
    final_title_position: Any
    is_collision_left: bool = False
    is_collision_center: bool = False
    is_collision_right: bool = False

    @property
    def is_any_collision(self) -> bool:
        return self.is_collision_left or self.is_collision_center or self.is_collision_right

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the keys the browser templates read."""
        return {
            "isHeaderLogo": self.is_header_logo,
            "logoAlignment": self.logo_alignment,
            "finalTitlePosition": self.final_title_position,
            "isCollisionLeft": self.is_collision_left,
            "isCollisionCenter": self.is_collision_center,
            "isCollisionRight": self.is_collision_right,
            "isAnyCollision": self.is_any_collision,
        }


def get_standard_logo_height(logo_size: Optional[str]) -> int:
    """
    Map a logo size tier to its standardized pixel height.

    Missing tier -> medium height.
    Unknown tier -> medium height, logged as a warning (the catalog config
    holds a value this engine does not know about).
    """
    fallback = LOGO_HEIGHTS[DEFAULT_LOGO_SIZE]

    if logo_size is None or logo_size == "":
        return fallback

    height = LOGO_HEIGHTS.get(logo_size) if isinstance(logo_size, str) else None
    if height is None:
        logger.warning(
            f"[HeaderLayout] Unrecognized logo size tier: {logo_size!r}. "
            f"Defaulting to {DEFAULT_LOGO_SIZE} ({fallback}px)."
        )
        return fallback

    return height


def _anchor_of(position: Any, prefixes: tuple) -> Optional[str]:
    """
    Extract the horizontal anchor from a position value.

    'left' -> 'left', 'header-right' -> 'right', anything else -> None.
    """
    if not isinstance(position, str):
        return None
    if position in ANCHORS:
        return position

    prefix, sep, anchor = position.partition("-")
    if sep and prefix in prefixes and anchor in ANCHORS:
        return anchor
    return None


def _with_anchor(requested: Any, anchor: str) -> str:
    """Keep the caller's vocabulary: 'header-left' stays header-prefixed."""
    if isinstance(requested, str) and requested.startswith(f"{HEADER_PREFIX}-"):
        return f"{HEADER_PREFIX}-{anchor}"
    return anchor


def _override_anchor(logo_anchor: str, title_anchor: str) -> str:
    """First anchor in precedence order that the logo does not claim."""
    for candidate in TITLE_OVERRIDE_PRECEDENCE.get(logo_anchor, ()):
        if candidate != logo_anchor:
            return candidate
    # Degenerate: nowhere to go. Keep the requested anchor, deterministically.
    return title_anchor


def is_header_position(logo_position: Any) -> bool:
    return isinstance(logo_position, str) and logo_position.startswith(HEADER_PREFIX)


def title_anchor_of(final_title_position: Any) -> str:
    """Anchor to paint a resolved title at. Unknown values paint like 'left'."""
    return _anchor_of(final_title_position, _TITLE_PREFIXES) or ANCHOR_LEFT


def get_header_layout(logo_position: Optional[str], title_position: Optional[str]) -> ResolvedHeaderLayout:
    """
    Resolve where the logo and the title render inside the page header.

    Args:
        logo_position: e.g. 'header-left', 'footer-right', 'none'
        title_position: 'left' | 'center' | 'right' (or 'header-*' spelling)

    Returns:
        ResolvedHeaderLayout. When the title and a header logo claim the same
        slot, the matching collision flag is set and the title is moved:
        logo left -> title center, logo right -> title center,
        logo center -> title left.
    """
    requested_title = title_position if title_position else DEFAULT_TITLE_POSITION

    logo_alignment = _anchor_of(logo_position, _LOGO_PREFIXES) or ANCHOR_LEFT
    is_header_logo = is_header_position(logo_position)

    if not is_header_logo:
        return ResolvedHeaderLayout(
            is_header_logo=False,
            logo_alignment=logo_alignment,
            final_title_position=requested_title,
        )

    title_anchor = _anchor_of(requested_title, _TITLE_PREFIXES)
    collides = title_anchor is not None and title_anchor == logo_alignment

    final_title_position = requested_title
    if collides:
        final_title_position = _with_anchor(requested_title, _override_anchor(logo_alignment, title_anchor))

    return ResolvedHeaderLayout(
        is_header_logo=True,
        logo_alignment=logo_alignment,
        final_title_position=final_title_position,
        is_collision_left=collides and logo_alignment == ANCHOR_LEFT,
        is_collision_center=collides and logo_alignment == ANCHOR_CENTER,
        is_collision_right=collides and logo_alignment == ANCHOR_RIGHT,
    )
