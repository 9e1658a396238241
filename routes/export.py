from flask import Blueprint, request, jsonify, current_app, g

from constants import SURFACE_EXPORT
from services.export_geometry import measure_logo_aspect, page_width_px, to_pdf_header
from services.header_render import render_header
from services.validation import normalize_header_settings
from utils.payloads import read_header_payload, read_logo_aspect, read_page_size

export_bp = Blueprint('export', __name__, url_prefix='/api/export')


@export_bp.route("/<template_id>/header", methods=["POST"])
def export_header(template_id):
    """
    Header directives for the PDF export pipeline.

    Runs the same render pass as the editor preview, then converts it to
    PDF points. Accepts JSON, or multipart with an optional 'logo' file whose
    aspect ratio is measured server-side.

    Query Params:
      page_size (str): 'A4' or 'LETTER' (default from EXPORT_PAGE_SIZE)
    """
    g.render_surface = SURFACE_EXPORT
    page_size = read_page_size()

    payload, errors = read_header_payload()
    logo_aspect, aspect_error = read_logo_aspect(payload)
    if aspect_error:
        errors.append(aspect_error)

    logo_file = request.files.get("logo")
    if logo_file and logo_file.filename:
        try:
            logo_aspect = measure_logo_aspect(logo_file.read())
        except ValueError as e:
            errors.append(str(e))

    if errors:
        return jsonify({"ok": False, "errors": errors}), 400

    try:
        composition = render_header(
            normalize_header_settings(payload),
            template_id,
            SURFACE_EXPORT,
            page_width_px=page_width_px(page_size),
            logo_aspect=logo_aspect,
        )
    except KeyError:
        return jsonify({"ok": False, "error": "template_not_found"}), 404

    current_app.logger.info(
        f"[Export] Header directives for template={template_id} page_size={page_size or 'default'}"
    )

    return jsonify({
        "ok": True,
        "surface": SURFACE_EXPORT,
        "header": composition.to_dict(),
        "pdf": to_pdf_header(composition, page_size),
    })
