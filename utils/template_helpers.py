"""
Shared helpers for catalog templates.

URL sanitization and background style generation.
Every template goes through these instead of formatting values inline.
"""
import re
from typing import Dict, Optional
from urllib.parse import quote

_HTTP_URL_RE = re.compile(r"^https?://", re.IGNORECASE)

# Characters that would break out of a CSS url(...) context
_CSS_URL_UNSAFE_RE = re.compile(r"[()'\"]")


def sanitize_css_url(url: Optional[str]) -> Optional[str]:
    """
    Sanitize a URL for use in CSS `url()`.
    Only http(s) is allowed; parens and quotes are percent-encoded.
    Returns None if the URL is not safe.
    """
    if not url or not isinstance(url, str):
        return None
    trimmed = url.strip()
    if not _HTTP_URL_RE.match(trimmed):
        return None
    return _CSS_URL_UNSAFE_RE.sub(lambda m: quote(m.group(0), safe=""), trimmed)


def sanitize_image_src(url: Optional[str]) -> Optional[str]:
    """
    Sanitize a URL for use as an image source (logo `src`).
    Only http(s); mailto:, tel:, data: and javascript: are rejected.
    """
    if not url or not isinstance(url, str):
        return None
    trimmed = url.strip()
    return trimmed if _HTTP_URL_RE.match(trimmed) else None


def safe_background_image_url(url: Optional[str]) -> Optional[str]:
    safe = sanitize_css_url(url)
    return f"url({safe})" if safe else None


def build_background_style(background_color: Optional[str] = None,
                           background_image: Optional[str] = None,
                           background_image_fit: Optional[str] = None,
                           background_gradient: Optional[str] = None) -> Dict[str, str]:
    """
    Build the CSS properties for a page container background.
    Priority: Image > Gradient > Color.
    """
    base = {"backgroundColor": background_color or "transparent"}

    if background_image:
        safe_url = safe_background_image_url(background_image)
        if safe_url:
            return {
                **base,
                "backgroundImage": safe_url,
                "backgroundSize": background_image_fit or "cover",
                "backgroundPosition": "center",
                "backgroundRepeat": "no-repeat",
            }

    if background_gradient and background_gradient != "none":
        return {**base, "backgroundImage": background_gradient}

    return base

