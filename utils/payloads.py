"""
Request payload helpers shared by the editor, public and export routes.
"""
from flask import request

from services.validation import validate_header_settings

MAX_LOGO_ASPECT = 20.0


def read_header_payload():
    """
    Read catalog header settings from the current request.

    GET -> query string, multipart/form -> form fields, otherwise JSON body.

    Returns:
        tuple(payload_dict, errors)
    """
    if request.method == "GET":
        payload = request.args.to_dict()
    elif request.mimetype in ("multipart/form-data", "application/x-www-form-urlencoded"):
        payload = request.form.to_dict()
    else:
        payload = request.get_json(silent=True)
        if payload is None:
            if request.get_data():
                return {}, ["Invalid JSON body"]
            payload = {}

    errors = validate_header_settings(payload)
    return payload if isinstance(payload, dict) else {}, errors


def read_logo_aspect(payload):
    """
    Optional logo width/height ratio sent by the client.

    Returns:
        tuple(aspect_or_None, error_or_None)
    """
    raw = payload.get("logo_aspect", payload.get("logoAspect"))
    if raw is None or raw == "":
        return None, None

    try:
        aspect = float(raw)
    except (TypeError, ValueError):
        return None, "logo_aspect must be a number"

    if not 0 < aspect <= MAX_LOGO_ASPECT:
        return None, f"logo_aspect must be in (0, {MAX_LOGO_ASPECT:g}]"
    return aspect, None


def read_page_size():
    """
    Page size the header is laid out for, from ?page_size=.

    Every surface reads it the same way so the editor preview, the public
    viewer and the export share one logical page width. None means the
    configured EXPORT_PAGE_SIZE.
    """
    return request.args.get("page_size") or None
