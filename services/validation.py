"""Validation for catalog header settings payloads.

Rejects malformed data only (wrong types, over-long strings, bad colors).
Unknown position or size values are NOT errors: the layout engine degrades
them to a defined output.

Accepts both camelCase (editor state) and snake_case (stored catalog rows)
keys. Normalizes internally.
"""
import re

MAX_POSITION_LENGTH = 50
MAX_CATALOG_NAME_LENGTH = 120
MAX_LOGO_URL_LENGTH = 2048

# Free-form background strings and their length limits
BACKGROUND_LIMITS = {
    "background_color": 64,
    "background_image": 2048,
    "background_image_fit": 20,
    "background_gradient": 512,
}

_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")

# camelCase -> snake_case
KEY_MAP = {
    "logoPosition": "logo_position",
    "logoSize": "logo_size",
    "titlePosition": "title_position",
    "catalogName": "catalog_name",
    "primaryColor": "primary_color",
    "logoUrl": "logo_url",
    "backgroundColor": "background_color",
    "backgroundImage": "background_image",
    "backgroundImageFit": "background_image_fit",
    "backgroundGradient": "background_gradient",
}

HEADER_SETTING_KEYS = tuple(KEY_MAP.values())


def normalize_header_settings(payload):
    """
    Map camelCase keys to snake_case and keep only header settings.
    snake_case wins when both spellings are present.
    """
    payload = payload or {}
    normalized = {key: None for key in HEADER_SETTING_KEYS}

    for camel_key, snake_key in KEY_MAP.items():
        if payload.get(snake_key) is not None:
            normalized[snake_key] = payload[snake_key]
        elif payload.get(camel_key) is not None:
            normalized[snake_key] = payload[camel_key]

    return normalized


def validate_header_settings(payload):
    """
    Validate header settings.
    Returns list of error strings. Empty list = valid.
    """
    if payload is not None and not isinstance(payload, dict):
        return ["payload must be a JSON object"]

    settings = normalize_header_settings(payload)
    errors = []

    for key in ("logo_position", "logo_size", "title_position"):
        value = settings[key]
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(f"{key} must be a string")
        elif len(value) > MAX_POSITION_LENGTH:
            errors.append(f"{key} exceeds {MAX_POSITION_LENGTH} characters")

    name = settings["catalog_name"]
    if name is not None:
        if not isinstance(name, str):
            errors.append("catalog_name must be a string")
        elif len(name) > MAX_CATALOG_NAME_LENGTH:
            errors.append(f"catalog_name exceeds {MAX_CATALOG_NAME_LENGTH} characters")

    color = settings["primary_color"]
    if color is not None and (not isinstance(color, str) or not _HEX_COLOR_RE.fullmatch(color)):
        errors.append(f"primary_color must be #RRGGBB: {color}")

    logo_url = settings["logo_url"]
    if logo_url is not None:
        if not isinstance(logo_url, str):
            errors.append("logo_url must be a string")
        elif len(logo_url) > MAX_LOGO_URL_LENGTH:
            errors.append(f"logo_url exceeds {MAX_LOGO_URL_LENGTH} characters")

    for key, limit in BACKGROUND_LIMITS.items():
        value = settings[key]
        if value is None:
            continue
        if not isinstance(value, str):
            errors.append(f"{key} must be a string")
        elif len(value) > limit:
            errors.append(f"{key} exceeds {limit} characters")

    return errors
