"""Tests for the form registry"""
import pytest

from app.services.form_registry import (
    FORM_SCHEMAS,
    FormId,
    FormRegistry,
    build_registry,
    form_registry,
)


class TestFormRegistry:

    def test_default_forms(self):
        assert form_registry.available_forms() == ["contact", "newsletter", "quote", "callback"]

    def test_every_form_id_has_a_schema(self):
        for form in FormId:
            assert form_registry.lookup(form.value).id == form.value

    def test_contact_schema(self):
        schema = form_registry.lookup("contact")
        assert schema.required_fields == ("name", "email", "message")
        assert schema.optional_fields == ("phone", "company")

    def test_lookup_is_case_sensitive(self):
        assert form_registry.lookup("Contact") is None
        assert form_registry.lookup("CONTACT") is None

    @pytest.mark.parametrize("form_id", ["bogus", "", None, 1, ["contact"]])
    def test_unknown_ids_are_not_found(self, form_id):
        assert form_registry.lookup(form_id) is None

    def test_schemas_are_immutable(self):
        schema = form_registry.lookup("newsletter")
        with pytest.raises(Exception):
            schema.required_fields = ()

    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(ValueError, match="Duplicate form id: contact"):
            FormRegistry([FORM_SCHEMAS[0], FORM_SCHEMAS[0]])

    def test_build_requires_every_form_id(self):
        with pytest.raises(ValueError, match="callback"):
            build_registry(FORM_SCHEMAS[:3])
