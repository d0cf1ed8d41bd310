"""Shared fixtures for the form submission tests"""
import pytest

from app.config import get_settings
from app.database import get_supabase_admin
from app.services.dispatcher import FormDispatcher
from app.services.form_registry import FORM_SCHEMAS, FormRegistry


class RecordingAction:
    """Success action that records every submission it receives"""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    async def __call__(self, data):
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def settings(monkeypatch):
    """Run every test with side effects disabled and default policy"""
    settings = get_settings()
    monkeypatch.setattr(settings, "resend_api_key", None)
    monkeypatch.setattr(settings, "supabase_url", None)
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    monkeypatch.setattr(settings, "webhook_urls", {})
    monkeypatch.setattr(settings, "min_submit_ms", 2000)
    monkeypatch.setattr(settings, "cors_allow_origin", "*")
    get_supabase_admin.cache_clear()
    yield settings
    get_supabase_admin.cache_clear()


@pytest.fixture
def make_action():
    return RecordingAction


@pytest.fixture
def actions():
    """One recording action per default form"""
    return {schema.id: RecordingAction() for schema in FORM_SCHEMAS}


@pytest.fixture
def registry(actions):
    return FormRegistry(
        schema.model_copy(update={"on_success": actions[schema.id]})
        for schema in FORM_SCHEMAS
    )


@pytest.fixture
def form_dispatcher(registry):
    return FormDispatcher(registry=registry)
