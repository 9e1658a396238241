# Logo Size Tiers (ordered small -> large)
LOGO_SIZE_SMALL = "small"
LOGO_SIZE_MEDIUM = "medium"
LOGO_SIZE_LARGE = "large"
LOGO_SIZE_EXTRA_LARGE = "extra-large"

LOGO_SIZE_TIERS = (
    LOGO_SIZE_SMALL,
    LOGO_SIZE_MEDIUM,
    LOGO_SIZE_LARGE,
    LOGO_SIZE_EXTRA_LARGE,
)

# Standardized logo heights (CSS px). Must stay non-decreasing in tier order.
LOGO_HEIGHTS = {
    LOGO_SIZE_SMALL: 24,
    LOGO_SIZE_MEDIUM: 36,
    LOGO_SIZE_LARGE: 48,
    LOGO_SIZE_EXTRA_LARGE: 60,
}

DEFAULT_LOGO_SIZE = LOGO_SIZE_MEDIUM

# Horizontal anchors shared by logo and title positions
ANCHOR_LEFT = "left"
ANCHOR_CENTER = "center"
ANCHOR_RIGHT = "right"

ANCHORS = (ANCHOR_LEFT, ANCHOR_CENTER, ANCHOR_RIGHT)

# Logo Positions
HEADER_PREFIX = "header"
FOOTER_PREFIX = "footer"

LOGO_POSITION_NONE = "none"
LOGO_POSITIONS = (
    LOGO_POSITION_NONE,
    "header-left",
    "header-center",
    "header-right",
    "footer-left",
    "footer-center",
    "footer-right",
)

DEFAULT_LOGO_POSITION = "header-left"

# Title Positions
TITLE_POSITIONS = ANCHORS
DEFAULT_TITLE_POSITION = ANCHOR_LEFT

# Where the title goes when it collides with the logo, keyed by logo anchor.
# First anchor not claimed by the logo wins.
TITLE_OVERRIDE_PRECEDENCE = {
    ANCHOR_LEFT: (ANCHOR_CENTER, ANCHOR_RIGHT),
    ANCHOR_RIGHT: (ANCHOR_CENTER, ANCHOR_LEFT),
    ANCHOR_CENTER: (ANCHOR_LEFT, ANCHOR_RIGHT),
}

# Render Surfaces
SURFACE_EDITOR = "editor"
SURFACE_PUBLIC = "public"
SURFACE_EXPORT = "export"

RENDER_SURFACES = frozenset({
    SURFACE_EDITOR,
    SURFACE_PUBLIC,
    SURFACE_EXPORT,
})

DEFAULT_CATALOG_NAME = "Catalog"
DEFAULT_PRIMARY_COLOR = "#4F46E5"

# Layout Version - Bump this when header geometry changes
# Returned to clients so cached previews can be invalidated
LAYOUT_VERSION = 1
