"""
Noteful Backend — Sanitizer Unit Tests
========================================

What we test:
    ✅ Markup delimiters are encoded, everything else is untouched
    ✅ Idempotence on raw, already-sanitized and entity-laden input
    ✅ None / non-string values pass through
    ✅ sanitize_fields only touches the named fields
"""

import pytest

from app.services.sanitizer import sanitize, sanitize_fields

HOSTILE_INPUTS = [
    '<script>alert("xss");</script>',
    '<img src="x" onerror="alert(document.cookie);">',
    "<style>body { background: url(//evil.example/steal) }</style>",
    "<<script>>nested<</script>>",
    "&lt;already&gt; escaped & then <b>raw</b>",
    "a < b > c",
    "",
    "plain text with 'quotes' & ampersands",
    "unicode ✓ <ü> 日本語",
]


class TestSanitize:

    def test_script_tag_is_neutralized(self):
        assert (
            sanitize('Naughty naughty very naughty <script>alert("xss");</script>')
            == 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
        )

    def test_plain_text_is_unchanged(self):
        text = "Dogs are loyal. Cats \"aren't\" & that's fine; 100% true"
        assert sanitize(text) == text

    @pytest.mark.parametrize("text", HOSTILE_INPUTS)
    def test_output_has_no_markup_delimiters(self, text):
        cleaned = sanitize(text)
        assert "<" not in cleaned
        assert ">" not in cleaned

    @pytest.mark.parametrize("text", HOSTILE_INPUTS)
    def test_idempotent(self, text):
        once = sanitize(text)
        assert sanitize(once) == once

    @pytest.mark.parametrize("text", HOSTILE_INPUTS)
    def test_non_markup_characters_preserved(self, text):
        cleaned = sanitize(text)
        assert cleaned.replace("&lt;", "<").replace("&gt;", ">") == text.replace(
            "&lt;", "<"
        ).replace("&gt;", ">")

    def test_none_passes_through(self):
        assert sanitize(None) is None

    def test_non_string_passes_through(self):
        assert sanitize(42) == 42


class TestSanitizeFields:

    def test_only_named_fields_are_sanitized(self):
        record = {"title": "<b>t</b>", "style": "<News>", "content": "<i>c</i>"}
        result = sanitize_fields(record, ("title", "content"))
        assert result == {
            "title": "&lt;b&gt;t&lt;/b&gt;",
            "style": "<News>",
            "content": "&lt;i&gt;c&lt;/i&gt;",
        }

    def test_missing_fields_are_skipped(self):
        assert sanitize_fields({"title": "x"}, ("title", "content")) == {"title": "x"}

    def test_input_is_not_mutated(self):
        record = {"title": "<b>"}
        sanitize_fields(record, ("title",))
        assert record == {"title": "<b>"}

    def test_key_order_preserved(self):
        record = {"id": 1, "title": "<a>", "content": "b", "folder_id": None}
        assert list(sanitize_fields(record, ("title", "content"))) == list(record)
