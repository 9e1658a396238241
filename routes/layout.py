from flask import Blueprint, request, jsonify, g

from constants import LAYOUT_VERSION, LOGO_HEIGHTS, LOGO_SIZE_TIERS, SURFACE_EDITOR
from services.catalog_templates import list_templates
from services.export_geometry import page_width_px
from services.header_layout import get_header_layout, get_standard_logo_height
from services.header_render import render_header
from services.validation import normalize_header_settings
from utils.payloads import read_header_payload, read_logo_aspect, read_page_size

layout_bp = Blueprint('layout', __name__, url_prefix='/api/layout')


@layout_bp.route("/header", methods=["POST"])
def resolve_header():
    """
    Resolve logo height and header placement for the live editor.

    Body (JSON):
      logoPosition, titlePosition, logoSize (camelCase or snake_case)
    """
    g.render_surface = SURFACE_EDITOR

    payload, errors = read_header_payload()
    if errors:
        return jsonify({"ok": False, "errors": errors}), 400

    settings = normalize_header_settings(payload)
    logo_height = get_standard_logo_height(settings["logo_size"])
    layout = get_header_layout(settings["logo_position"], settings["title_position"])

    return jsonify({
        "ok": True,
        "layoutVersion": LAYOUT_VERSION,
        "logoHeight": logo_height,
        "layout": layout.to_dict(),
    })


@layout_bp.route("/logo-height", methods=["GET"])
def logo_height():
    """Standardized logo height for ?size=<tier>."""
    size = request.args.get("size")
    return jsonify({"ok": True, "size": size, "logoHeight": get_standard_logo_height(size)})


@layout_bp.route("/logo-sizes", methods=["GET"])
def logo_sizes():
    """Size tiers in small -> large order, for the editor's size picker."""
    return jsonify({
        "ok": True,
        "sizes": [{"size": tier, "logoHeight": LOGO_HEIGHTS[tier]} for tier in LOGO_SIZE_TIERS],
    })


@layout_bp.route("/templates", methods=["GET"])
def templates():
    return jsonify({"ok": True, "templates": [t.to_dict() for t in list_templates()]})


@layout_bp.route("/preview/<template_id>", methods=["POST"])
def preview_header(template_id):
    """
    Editor preview render pass for one template.

    Query Params:
      page_size (str): 'A4' or 'LETTER' (default from EXPORT_PAGE_SIZE)
    """
    g.render_surface = SURFACE_EDITOR
    page_size = read_page_size()

    payload, errors = read_header_payload()
    logo_aspect, aspect_error = read_logo_aspect(payload)
    if aspect_error:
        errors.append(aspect_error)
    if errors:
        return jsonify({"ok": False, "errors": errors}), 400

    try:
        composition = render_header(
            normalize_header_settings(payload),
            template_id,
            SURFACE_EDITOR,
            page_width_px=page_width_px(page_size),
            logo_aspect=logo_aspect,
        )
    except KeyError:
        return jsonify({"ok": False, "error": "template_not_found"}), 404

    return jsonify({"ok": True, "surface": SURFACE_EDITOR, "header": composition.to_dict()})
