"""Form registry

Add new forms here: a FormId member plus its schema. The registry refuses to
build if any FormId is left without a schema.
"""
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional

from app.models.forms import FormSchema
from app.services import form_actions


class FormId(str, Enum):
    CONTACT = "contact"
    NEWSLETTER = "newsletter"
    QUOTE = "quote"
    CALLBACK = "callback"


FORM_SCHEMAS = (
    FormSchema(
        id=FormId.CONTACT.value,
        required_fields=("name", "email", "message"),
        optional_fields=("phone", "company"),
        on_success=form_actions.handle_contact,
    ),
    FormSchema(
        id=FormId.NEWSLETTER.value,
        required_fields=("email",),
        optional_fields=("name", "preferences"),
        on_success=form_actions.handle_newsletter,
    ),
    FormSchema(
        id=FormId.QUOTE.value,
        required_fields=("name", "email", "service_type", "budget"),
        optional_fields=("phone", "company", "details", "timeline"),
        on_success=form_actions.handle_quote,
    ),
    FormSchema(
        id=FormId.CALLBACK.value,
        required_fields=("name", "phone"),
        optional_fields=("preferred_time", "notes"),
        on_success=form_actions.handle_callback,
    ),
)


class FormRegistry:
    """Read-only mapping from form id to schema"""

    def __init__(self, schemas: Iterable[FormSchema]):
        forms = {}
        for schema in schemas:
            if schema.id in forms:
                raise ValueError(f"Duplicate form id: {schema.id}")
            forms[schema.id] = schema
        self._forms: Mapping[str, FormSchema] = MappingProxyType(forms)

    def lookup(self, form_id: Any) -> Optional[FormSchema]:
        """Exact, case-sensitive match. Non-string ids are never found."""
        if not isinstance(form_id, str):
            return None
        return self._forms.get(form_id)

    def available_forms(self) -> List[str]:
        return list(self._forms)

    def __contains__(self, form_id: Any) -> bool:
        return self.lookup(form_id) is not None

    def __len__(self) -> int:
        return len(self._forms)


def build_registry(schemas: Iterable[FormSchema] = FORM_SCHEMAS) -> FormRegistry:
    """Build the registry, checking that every FormId has a schema"""
    registry = FormRegistry(schemas)
    missing = [form.value for form in FormId if form.value not in registry]
    if missing:
        raise ValueError(f"No schema configured for forms: {', '.join(missing)}")
    return registry


form_registry = build_registry()
