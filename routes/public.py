from flask import Blueprint, jsonify, g

from constants import SURFACE_PUBLIC
from services.export_geometry import page_width_px
from services.header_render import render_header
from services.validation import normalize_header_settings
from utils.payloads import read_header_payload, read_logo_aspect, read_page_size

public_bp = Blueprint('public', __name__, url_prefix='/api/public')


@public_bp.route("/catalog/<template_id>/header", methods=["GET", "POST"])
def catalog_header(template_id):
    """
    Header render pass for the published (page-flip) viewer.

    GET reads the published catalog settings from the query string so the
    result can be cached by the CDN; POST accepts the same fields as JSON.

    Query Params:
      page_size (str): 'A4' or 'LETTER' (default from EXPORT_PAGE_SIZE)
    """
    g.render_surface = SURFACE_PUBLIC
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
            SURFACE_PUBLIC,
            page_width_px=page_width_px(page_size),
            logo_aspect=logo_aspect,
        )
    except KeyError:
        return jsonify({"ok": False, "error": "template_not_found"}), 404

    return jsonify({"ok": True, "surface": SURFACE_PUBLIC, "header": composition.to_dict()})
