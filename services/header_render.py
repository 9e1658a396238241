"""
Header render pass shared by every rendering surface.

The editor preview, the public viewer and the export pipeline all call
render_header(). It asks the layout engine once for the logo height and once
for the placement, then turns those directives into boxes on the page using
the template's geometry. Geometry never depends on the surface.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from constants import (
    ANCHOR_CENTER,
    ANCHOR_RIGHT,
    DEFAULT_CATALOG_NAME,
    DEFAULT_PRIMARY_COLOR,
    LAYOUT_VERSION,
    RENDER_SURFACES,
)
from services.catalog_templates import CatalogTemplate, get_template
from services.export_geometry import page_width_px as default_page_width_px
from services.header_layout import (
    ResolvedHeaderLayout,
    get_header_layout,
    get_standard_logo_height,
    title_anchor_of,
)
from utils.template_helpers import build_background_style, sanitize_image_src

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoBox:
    x: float
    y: float
    width: float
    height: int
    alignment: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "alignment": self.alignment,
            "url": self.url,
        }


@dataclass(frozen=True)
class TitleBox:
    x: float
    y: float
    anchor: str
    text: str
    font_size: int
    bold: bool
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "anchor": self.anchor,
            "text": self.text,
            "fontSize": self.font_size,
            "bold": self.bold,
            "color": self.color,
        }


@dataclass(frozen=True)
class HeaderComposition:
    """
    Header band of one catalog page, in CSS px with a top-left origin.
    x of the title is its anchor point (left edge, center or right edge).
    """
    template_id: str
    page_width: float
    header_height: int
    padding_x: int
    logo_height: int
    layout: ResolvedHeaderLayout
    logo: Optional[LogoBox]
    title: TitleBox
    background: Dict[str, str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "template": self.template_id,
            "layoutVersion": LAYOUT_VERSION,
            "pageWidth": self.page_width,
            "headerHeight": self.header_height,
            "paddingX": self.padding_x,
            "logoHeight": self.logo_height,
            "layout": self.layout.to_dict(),
            "logo": self.logo.to_dict() if self.logo else None,
            "title": self.title.to_dict(),
            "background": dict(self.background),
        }


def _logo_width(logo_height: int, logo_aspect: Optional[float], max_width: int) -> float:
    aspect = logo_aspect if logo_aspect and logo_aspect > 0 else 1.0
    return round(min(logo_height * aspect, max_width), 2)


def _slot_x(anchor: str, page_width: float, padding_x: int, box_width: float = 0) -> float:
    """x of a box of box_width placed at anchor. box_width=0 gives the anchor point."""
    if anchor == ANCHOR_CENTER:
        return round((page_width - box_width) / 2, 2)
    if anchor == ANCHOR_RIGHT:
        return round(page_width - padding_x - box_width, 2)
    return float(padding_x)


def _build_logo_box(template: CatalogTemplate, layout: ResolvedHeaderLayout, logo_height: int,
                    page_width: float, logo_aspect: Optional[float], logo_url: Optional[str]) -> Optional[LogoBox]:
    if not layout.is_header_logo:
        return None

    width = _logo_width(logo_height, logo_aspect, template.logo_max_width_px)
    return LogoBox(
        x=_slot_x(layout.logo_alignment, page_width, template.padding_x_px, width),
        y=round((template.header_height_px - logo_height) / 2, 2),
        width=width,
        height=logo_height,
        alignment=layout.logo_alignment,
        url=sanitize_image_src(logo_url),
    )


def _build_title_box(template: CatalogTemplate, layout: ResolvedHeaderLayout,
                     page_width: float, catalog_name: Optional[str], color: Optional[str]) -> TitleBox:
    anchor = title_anchor_of(layout.final_title_position)
    text = (catalog_name or "").strip() or DEFAULT_CATALOG_NAME
    if template.title_uppercase:
        text = text.upper()

    return TitleBox(
        x=_slot_x(anchor, page_width, template.padding_x_px),
        y=round((template.header_height_px - template.title_font_px) / 2, 2),
        anchor=anchor,
        text=text,
        font_size=template.title_font_px,
        bold=template.title_bold,
        color=(color or DEFAULT_PRIMARY_COLOR).upper(),
    )


def render_header(settings: Dict[str, Any], template_id: str, surface: str,
                  page_width_px: Optional[float] = None,
                  logo_aspect: Optional[float] = None) -> HeaderComposition:
    """
    One header render pass.

    Args:
        settings: normalized catalog header settings
            (see services.validation.normalize_header_settings)
        template_id: registry id, e.g. 'modern-grid'
        surface: 'editor' | 'public' | 'export' (tags logs only)
        page_width_px: logical page width in CSS px
            (defaults to the configured export page, see export_geometry.page_width_px)
        logo_aspect: logo width / height, if known

    Raises:
        KeyError: unknown template_id
        ValueError: unknown surface
    """
    if surface not in RENDER_SURFACES:
        raise ValueError(f"Unknown render surface: {surface!r}")

    template = get_template(template_id)
    if page_width_px is None:
        page_width_px = default_page_width_px()

    logo_height = get_standard_logo_height(settings.get("logo_size"))
    layout = get_header_layout(settings.get("logo_position"), settings.get("title_position"))

    composition = HeaderComposition(
        template_id=template.template_id,
        page_width=page_width_px,
        header_height=template.header_height_px,
        padding_x=template.padding_x_px,
        logo_height=logo_height,
        layout=layout,
        logo=_build_logo_box(template, layout, logo_height, page_width_px, logo_aspect, settings.get("logo_url")),
        title=_build_title_box(template, layout, page_width_px, settings.get("catalog_name"),
                               settings.get("primary_color")),
        background=build_background_style(
            settings.get("background_color"),
            settings.get("background_image"),
            settings.get("background_image_fit"),
            settings.get("background_gradient"),
        ),
    )

    if layout.is_any_collision:
        logger.debug(
            f"[HeaderRender] {surface}/{template.template_id}: title moved "
            f"{settings.get('title_position')!r} -> {layout.final_title_position!r} "
            f"(logo {layout.logo_alignment})"
        )

    return composition
