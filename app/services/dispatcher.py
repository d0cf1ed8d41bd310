"""Form submission pipeline

method check -> body parse -> form lookup -> anti-spam -> validation ->
sanitization -> success action -> response. Each step either advances or
ends the request with exactly one response.
"""
import json
import logging
from typing import Any, Dict, Optional, Union

from app.errors import (
    ActionError,
    ConfigError,
    FormSubmissionError,
    ParseError,
    SpamDetected,
    TransportError,
    ValidationError,
)
from app.models.forms import FormSchema
from app.services.form_registry import FormRegistry, form_registry
from app.services.responses import FormResponse, error_response, preflight_response, success_response
from app.services.sanitizer import sanitize_data
from app.services.spam_filter import run_spam_checks
from app.services.validators import validate_required_fields

logger = logging.getLogger(__name__)


class FormDispatcher:
    """Runs a raw request through the submission pipeline"""

    def __init__(self, registry: FormRegistry = form_registry):
        self.registry = registry

    async def handle(
        self,
        method: str,
        body: Union[str, bytes, None],
        now_ms: Optional[int] = None
    ) -> FormResponse:
        """
        Process one request

        Args:
            method: HTTP method
            body: Raw request body
            now_ms: Server time in epoch milliseconds, defaults to now

        Returns:
            The response to send. Never raises for pipeline failures.
        """
        if method.upper() == "OPTIONS":
            return preflight_response()

        try:
            return await self._process(method, body, now_ms)
        except SpamDetected as e:
            if e.silent:
                return success_response(e.message)
            return error_response(e.message, e.status_code)
        except FormSubmissionError as e:
            return error_response(e.message, e.status_code)

    async def _process(self, method: str, body: Union[str, bytes, None], now_ms: Optional[int]) -> FormResponse:
        if method.upper() != "POST":
            raise TransportError("Method not allowed. Use POST.")

        data = self.parse_body(body)
        form_id, schema = self.resolve_form(data)

        run_spam_checks(form_id, data, now_ms)

        errors = validate_required_fields(data, schema.required_fields)
        if errors:
            logger.info(f"[{form_id}] Validation failed: {errors}")
            raise ValidationError(errors)

        sanitized = sanitize_data(data, form_id)
        await self.run_action(schema, sanitized)

        return success_response(f"{form_id} form submitted successfully")

    @staticmethod
    def parse_body(body: Union[str, bytes, None]) -> Dict[str, Any]:
        if not body:
            raise ParseError("Invalid JSON in request body")
        try:
            data = json.loads(body)
        except ValueError:
            raise ParseError("Invalid JSON in request body")
        if not isinstance(data, dict):
            raise ParseError("Request body must be a JSON object")
        return data

    def resolve_form(self, data: Dict[str, Any]):
        form_id = data.get("form_id")
        if form_id is None or form_id == "":
            raise ConfigError("Missing form_id in request body")

        schema = self.registry.lookup(form_id)
        if schema is None:
            available = ", ".join(self.registry.available_forms())
            raise ConfigError(f"Unknown form_id: {form_id}. Available forms: {available}")
        return schema.id, schema

    @staticmethod
    async def run_action(schema: FormSchema, sanitized: Dict[str, Any]) -> None:
        try:
            result = await schema.on_success(sanitized)
        except Exception as e:
            logger.exception(f"[{schema.id}] onSuccess handler failed: {e}")
            raise ActionError(schema.id) from e

        if result is False:
            logger.error(f"[{schema.id}] onSuccess handler reported failure")
            raise ActionError(schema.id)


dispatcher = FormDispatcher()
