"""Tests for submission sanitization"""
from datetime import datetime

from app.services.sanitizer import sanitize_data, sanitize_input, utc_timestamp


class TestSanitizeInput:

    def test_script_tag_is_escaped(self):
        assert sanitize_input("<script>") == "&lt;script&gt;"

    def test_quotes_are_escaped(self):
        assert sanitize_input("""He said "it's" fine""") == "He said &quot;it&#x27;s&quot; fine"

    def test_second_pass_changes_nothing(self):
        once = sanitize_input("<script>alert('x')</script>")
        assert sanitize_input(once) == once
        assert "&amp;" not in sanitize_input(once)

    def test_ampersand_is_kept(self):
        assert sanitize_input("Tom & Jerry") == "Tom & Jerry"

    def test_non_strings_pass_through(self):
        assert sanitize_input(42) == 42
        assert sanitize_input(True) is True
        assert sanitize_input(None) is None
        assert sanitize_input(["<b>"]) == ["<b>"]


class TestSanitizeData:

    def test_control_fields_are_dropped(self):
        result = sanitize_data({"email": "x@y.com", "_honey": "", "_timestamp": 1}, "newsletter")
        assert "_honey" not in result
        assert "_timestamp" not in result
        assert not any(key.startswith("_") for key in result)

    def test_metadata_is_injected(self):
        result = sanitize_data({"email": "x@y.com"}, "newsletter")
        assert set(result) == {"email", "form_id", "submitted_at"}
        assert result["form_id"] == "newsletter"

    def test_metadata_overrides_submitted_values(self):
        result = sanitize_data({"form_id": "<contact>", "submitted_at": "1999"}, "contact")
        assert result["form_id"] == "contact"
        assert result["submitted_at"] != "1999"

    def test_values_are_escaped(self):
        result = sanitize_data({"name": "<b>A</b>", "budget": 5000}, "quote")
        assert result["name"] == "&lt;b&gt;A&lt;/b&gt;"
        assert result["budget"] == 5000

    def test_input_is_not_modified(self):
        data = {"name": "<b>", "_honey": ""}
        sanitize_data(data, "contact")
        assert data == {"name": "<b>", "_honey": ""}


class TestUtcTimestamp:

    def test_iso_format_with_z_suffix(self):
        value = utc_timestamp()
        assert value.endswith("Z")
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert parsed.utcoffset().total_seconds() == 0
