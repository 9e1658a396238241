# services/catalog_templates.py
"""
Catalog template registry.

Each template only describes header *geometry* (band height, padding, title
type). Positioning decisions come from services/header_layout.py; a template
must never carry its own logo-size or collision logic.

All measurements are CSS px on the logical page (see export_geometry.page_width_px).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class CatalogTemplate:
    template_id: str
    name: str
    header_height_px: int
    padding_x_px: int
    title_font_px: int
    title_uppercase: bool = False
    title_bold: bool = True
    logo_max_width_px: int = 120

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.template_id,
            "name": self.name,
            "headerHeight": self.header_height_px,
            "paddingX": self.padding_x_px,
            "titleFontSize": self.title_font_px,
            "titleUppercase": self.title_uppercase,
            "titleBold": self.title_bold,
            "logoMaxWidth": self.logo_max_width_px,
        }


_TEMPLATES: List[CatalogTemplate] = [
    CatalogTemplate("modern-grid", "Modern Grid", 56, 24, 18),
    CatalogTemplate("compact-list", "Compact List", 48, 24, 16, title_uppercase=True),
    CatalogTemplate("magazine", "Magazine", 120, 40, 30, title_uppercase=True),
    CatalogTemplate("minimalist", "Minimalist", 60, 32, 20, title_uppercase=True, title_bold=False),
    CatalogTemplate("bold", "Bold", 80, 24, 18, title_uppercase=True),
    CatalogTemplate("elegant-cards", "Elegant Cards", 128, 48, 24, title_bold=False),
    CatalogTemplate("classic-catalog", "Classic Catalog", 64, 32, 20),
    CatalogTemplate("showcase", "Showcase", 56, 32, 14, title_uppercase=True, title_bold=False),
    CatalogTemplate("catalog-pro", "Catalog Pro", 56, 24, 18),
    CatalogTemplate("retail", "Retail", 128, 48, 12, title_uppercase=True),
    CatalogTemplate("tech-modern", "Tech Modern", 64, 32, 18),
    CatalogTemplate("fashion-lookbook", "Fashion Lookbook", 64, 16, 20, title_bold=False),
    CatalogTemplate("industrial", "Industrial", 96, 40, 24, title_uppercase=True),
    CatalogTemplate("luxury", "Luxury", 96, 48, 24, title_uppercase=True, title_bold=False),
    CatalogTemplate("clean-white", "Clean White", 64, 48, 18),
    CatalogTemplate("product-tiles", "Product Tiles", 48, 20, 16),
]

TEMPLATE_REGISTRY: Dict[str, CatalogTemplate] = {t.template_id: t for t in _TEMPLATES}

DEFAULT_TEMPLATE_ID = "modern-grid"


def get_template(template_id: str) -> CatalogTemplate:
    """Raises KeyError for unknown template ids."""
    try:
        return TEMPLATE_REGISTRY[template_id]
    except (KeyError, TypeError):
        raise KeyError(f"Unknown catalog template: {template_id!r}")


def list_templates() -> List[CatalogTemplate]:
    return list(_TEMPLATES)
