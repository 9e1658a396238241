import pytest

from utils.template_helpers import (
    build_background_style,
    safe_background_image_url,
    sanitize_css_url,
    sanitize_image_src,
)


class TestUrlSanitization:

    def test_css_url_allows_http(self):
        assert sanitize_css_url(" https://cdn.example.com/bg.jpg ") == "https://cdn.example.com/bg.jpg"

    def test_css_url_encodes_breakout_characters(self):
        assert sanitize_css_url("https://x.com/a(b)'c\".png") == "https://x.com/a%28b%29%27c%22.png"

    @pytest.mark.parametrize("url", [None, "", "data:image/png;base64,AAAA", "javascript:alert(1)", 42])
    def test_css_url_rejects_unsafe(self, url):
        assert sanitize_css_url(url) is None

    def test_image_src_allows_http_only(self):
        assert sanitize_image_src(" https://cdn.example.com/logo.png ") == "https://cdn.example.com/logo.png"
        assert sanitize_image_src("HTTP://EXAMPLE.COM/L.PNG") == "HTTP://EXAMPLE.COM/L.PNG"

    @pytest.mark.parametrize("url", [
        "mailto:a@b.com", "tel:+905551112233", "javascript:alert(1)", "data:image/png;base64,AAAA", "/relative", None,
    ])
    def test_image_src_blocks(self, url):
        assert sanitize_image_src(url) is None

    def test_background_image_url(self):
        assert safe_background_image_url("https://x.com/bg.png") == "url(https://x.com/bg.png)"
        assert safe_background_image_url("ftp://x.com/bg.png") is None


class TestBackgroundStyle:

    def test_image_wins(self):
        style = build_background_style("#fff", "https://x.com/bg.png", "contain", "linear-gradient(red, blue)")
        assert style == {
            "backgroundColor": "#fff",
            "backgroundImage": "url(https://x.com/bg.png)",
            "backgroundSize": "contain",
            "backgroundPosition": "center",
            "backgroundRepeat": "no-repeat",
        }

    def test_unsafe_image_falls_through_to_gradient(self):
        style = build_background_style("#fff", "javascript:alert(1)", None, "linear-gradient(red, blue)")
        assert style == {"backgroundColor": "#fff", "backgroundImage": "linear-gradient(red, blue)"}

    def test_gradient_none_is_ignored(self):
        assert build_background_style(None, None, None, "none") == {"backgroundColor": "transparent"}

