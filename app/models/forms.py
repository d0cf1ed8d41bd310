"""Form-related Pydantic models"""
from pydantic import BaseModel, ConfigDict
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

# A sanitized submission: user fields (escaped) plus form_id and submitted_at
SanitizedSubmission = Dict[str, Any]

# Success actions return None/True on success. Returning False or raising
# marks the submission as failed.
SuccessAction = Callable[[SanitizedSubmission], Awaitable[Optional[bool]]]


class FormSchema(BaseModel):
    """Per-form validation schema and success action"""
    model_config = ConfigDict(frozen=True)

    id: str
    required_fields: Tuple[str, ...]
    optional_fields: Tuple[str, ...] = ()
    on_success: SuccessAction


class FormSubmitResponse(BaseModel):
    """Form submission response envelope"""
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
