"""Response envelope helpers"""
from dataclasses import dataclass, field
from typing import Any, Dict

from fastapi.responses import JSONResponse

from app.config import get_settings
from app.models.forms import FormSubmitResponse


def cors_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_settings().cors_allow_origin,
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }


@dataclass
class FormResponse:
    """Status code, JSON body and headers for one submission"""
    status_code: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=cors_headers)

    def to_json_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body, headers=self.headers)


def json_response(status_code: int, body: Dict[str, Any]) -> FormResponse:
    return FormResponse(status_code=status_code, body=body)


def success_response(message: str = "Form submitted successfully") -> FormResponse:
    envelope = FormSubmitResponse(success=True, message=message)
    return json_response(200, envelope.model_dump(exclude_none=True))


def error_response(error: str, status_code: int = 400) -> FormResponse:
    envelope = FormSubmitResponse(success=False, error=error)
    return json_response(status_code, envelope.model_dump(exclude_none=True))


def preflight_response() -> FormResponse:
    return json_response(200, {})
