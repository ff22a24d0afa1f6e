"""Tests échappement — esc_html/esc_attr, URLs, rich text (kses_post)."""
from proto_blocks.core.escaping import clean_url, esc_attr, esc_html, esc_url, kses_post


# ── Texte ─────────────────────────────────────────────────────────────────────

def test_esc_html_escapes_markup():
    assert esc_html("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"


def test_esc_attr_escapes_quotes():
    assert esc_attr('a "b" \'c\'') == "a &quot;b&quot; &#x27;c&#x27;"


def test_esc_none_and_numbers():
    assert esc_html(None) == ""
    assert esc_attr(None) == ""
    assert esc_html(42) == "42"


# ── URLs ──────────────────────────────────────────────────────────────────────

def test_esc_url_keeps_http_and_relative():
    assert esc_url("https://example.com/page") == "https://example.com/page"
    assert esc_url("/contact") == "/contact"
    assert esc_url("#section") == "#section"
    assert esc_url("mailto:hello@example.com") == "mailto:hello@example.com"


def test_esc_url_escapes_ampersand():
    assert esc_url("https://example.com/?a=1&b=2") == "https://example.com/?a=1&amp;b=2"


def test_esc_url_rejects_javascript():
    assert esc_url("javascript:alert(1)") == ""
    assert esc_url("  JavaScript:alert(1)") == ""
    assert esc_url("java\tscript:alert(1)") == ""
    assert esc_url("data:text/html;base64,PHNjcmlwdD4=") == ""


def test_esc_url_empty():
    assert esc_url(None) == ""
    assert esc_url("") == ""
    assert esc_url("   ") == ""


def test_clean_url_encodes_spaces_without_html_escaping():
    assert clean_url("/img/my photo.jpg?a=1&b=2") == "/img/my%20photo.jpg?a=1&b=2"


def test_allowed_protocols_from_env(monkeypatch):
    monkeypatch.setenv("PROTO_BLOCKS_URL_PROTOCOLS", "https")
    assert esc_url("https://example.com") == "https://example.com"
    assert esc_url("http://example.com") == ""


# ── Rich text ─────────────────────────────────────────────────────────────────

def test_kses_keeps_safe_markup():
    out = kses_post("<p>Hello <strong>world</strong> <em>!</em></p>")
    assert out == "<p>Hello <strong>world</strong> <em>!</em></p>"


def test_kses_strips_script():
    out = kses_post("<p>Hi</p><script>alert(1)</script>")
    assert "<script" not in out
    assert "alert(1)" not in out
    assert "<p>Hi</p>" in out


def test_kses_strips_event_handlers():
    out = kses_post('<p onclick="steal()">Hi</p>')
    assert "onclick" not in out
    assert "Hi" in out


def test_kses_strips_javascript_href():
    out = kses_post('<a href="javascript:alert(1)">x</a>')
    assert "javascript:" not in out
    assert ">x</a>" in out


def test_kses_keeps_link_attributes():
    out = kses_post('<a href="https://example.com" target="_blank" rel="noopener">x</a>')
    assert 'href="https://example.com"' in out
    assert 'target="_blank"' in out
    assert 'rel="noopener"' in out


def test_kses_empty():
    assert kses_post("") == ""
    assert kses_post(None) == ""
