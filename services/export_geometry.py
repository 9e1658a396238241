"""
Export Geometry for catalog PDF pages.

Handles:
1. CSS px <-> PDF point conversion (shared logical page width with the editor).
2. Header band conversion from a HeaderComposition into PDF point space.
3. Title text metrics (reportlab base-14 fonts).
4. Logo aspect measurement from uploaded bytes.

No PDF bytes are written here; the PDF renderer consumes the returned
directives as-is so the export matches the browser preview.
"""
import io
import logging
from collections import namedtuple

from PIL import Image, ImageOps, UnidentifiedImageError
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import inch
from reportlab.pdfbase import pdfmetrics

import config
from constants import ANCHOR_CENTER, ANCHOR_RIGHT

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    "A4": A4,
    "LETTER": LETTER,
}

FONT_TITLE = "Helvetica"
FONT_TITLE_BOLD = "Helvetica-Bold"

MAX_LOGO_PIXELS = 25_000_000

# reportlab canvas call matching each title anchor
DRAW_METHODS = {
    ANCHOR_CENTER: "drawCentredString",
    ANCHOR_RIGHT: "drawRightString",
}

PdfBox = namedtuple('PdfBox', ['x', 'y', 'width', 'height'])


def _css_dpi(css_dpi=None):
    return css_dpi or config.EXPORT_CSS_DPI


def px_to_pt(px, css_dpi=None):
    return round(px * inch / _css_dpi(css_dpi), 2)


def page_size_pt(name=None):
    """(width, height) in points. Unknown names fall back to A4."""
    key = (name or config.EXPORT_PAGE_SIZE).upper()
    if key not in PAGE_SIZES:
        logger.warning(f"[ExportGeometry] Unknown page size '{name}'. Defaulting to A4.")
        key = "A4"
    return PAGE_SIZES[key]


def page_width_px(name=None, css_dpi=None):
    """
    Logical page width in CSS px.
    Editor preview, public viewer and export all lay out on this width.
    """
    width_pt, _ = page_size_pt(name)
    return round(width_pt * _css_dpi(css_dpi) / inch, 2)


def _box_to_pt(x, y, width, height, page_height_pt, css_dpi):
    """Top-left px box -> bottom-left pt box."""
    return PdfBox(
        x=px_to_pt(x, css_dpi),
        y=round(page_height_pt - px_to_pt(y + height, css_dpi), 2),
        width=px_to_pt(width, css_dpi),
        height=px_to_pt(height, css_dpi),
    )


def to_pdf_header(composition, page_size=None, css_dpi=None):
    """
    Convert a HeaderComposition to PDF drawing directives.

    Args:
        composition: HeaderComposition from services.header_render
        page_size: 'A4' | 'LETTER' (defaults to EXPORT_PAGE_SIZE)

    Returns:
        dict with 'page', 'band', 'logo' (or None) and 'title' in points,
        origin bottom-left.
    """
    page_w, page_h = page_size_pt(page_size)

    band = _box_to_pt(0, 0, composition.page_width, composition.header_height, page_h, css_dpi)

    logo = None
    if composition.logo:
        box = composition.logo
        logo = _box_to_pt(box.x, box.y, box.width, box.height, page_h, css_dpi)._asdict()
        logo["alignment"] = box.alignment
        logo["url"] = box.url

    title = composition.title
    font_name = FONT_TITLE_BOLD if title.bold else FONT_TITLE
    font_size = px_to_pt(title.font_size, css_dpi)
    text_width = round(pdfmetrics.stringWidth(title.text, font_name, font_size), 2)
    ascent, _descent = pdfmetrics.getAscentDescent(font_name, font_size)

    anchor_x = px_to_pt(title.x, css_dpi)
    if title.anchor == ANCHOR_CENTER:
        left_x = anchor_x - text_width / 2
    elif title.anchor == ANCHOR_RIGHT:
        left_x = anchor_x - text_width
    else:
        left_x = anchor_x

    top_y = page_h - px_to_pt(title.y, css_dpi)

    return {
        "page": {"width": round(page_w, 2), "height": round(page_h, 2)},
        "band": band._asdict(),
        "logo": logo,
        "title": {
            "text": title.text,
            "font": font_name,
            "fontSize": font_size,
            "anchor": title.anchor,
            "drawMethod": DRAW_METHODS.get(title.anchor, "drawString"),
            "x": anchor_x,
            "baselineY": round(top_y - ascent, 2),
            "left": round(left_x, 2),
            "width": text_width,
            "color": title.color,
        },
    }


def measure_logo_aspect(file_bytes):
    """
    Measure width / height of an uploaded logo.

    Raises:
        ValueError: oversize, decompression bomb or unreadable image.
    """
    if len(file_bytes) > config.MAX_LOGO_BYTES:
        raise ValueError("Image too large (max 5MB)")

    try:
        img = Image.open(io.BytesIO(file_bytes))

        # Security: Decompression bomb check
        if img.width * img.height > MAX_LOGO_PIXELS:
            raise ValueError("Image dimensions too large (max 25MP)")

        # Normalize EXIF orientation (rotated phone photos)
        img = ImageOps.exif_transpose(img)
        width, height = img.size
    except Image.DecompressionBombError:
        raise ValueError("Image dimensions too large (max 25MP)")
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Logo measurement failed: {e}")
        raise ValueError("Invalid image file.")

    if not width or not height:
        raise ValueError("Invalid image file.")

    return round(width / height, 4)
