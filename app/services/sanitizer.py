"""Submission sanitization"""
from datetime import datetime, timezone
from typing import Any, Dict

from app.config import get_settings
from app.models.forms import SanitizedSubmission

# '&' is left alone so escaped text stays stable on a second pass
_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
})


def sanitize_input(value: Any) -> Any:
    """Escape markup characters in strings; other values pass through"""
    if not isinstance(value, str):
        return value
    return value.translate(_ESCAPES)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sanitize_data(data: Dict[str, Any], form_id: str) -> SanitizedSubmission:
    """
    Build the submission handed to a form's success action

    Control fields are dropped, strings escaped, then the trusted
    form_id and submitted_at metadata are added.
    """
    prefix = get_settings().control_prefix
    sanitized = {
        key: sanitize_input(value)
        for key, value in data.items()
        if not key.startswith(prefix)
    }
    sanitized["form_id"] = form_id
    sanitized["submitted_at"] = utc_timestamp()
    return sanitized
