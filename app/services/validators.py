"""Field validators and required-field validation"""
import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from app.config import get_settings

# A validator returns None when the value is valid, otherwise a reason string
FieldValidator = Callable[[Any], Optional[str]]

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def build_phone_regex(allowed_chars: str, min_length: int, max_length: int) -> re.Pattern:
    return re.compile(rf"^[{allowed_chars}]{{{min_length},{max_length}}}$")


def validate_email(value: Any) -> Optional[str]:
    if EMAIL_REGEX.fullmatch(str(value)):
        return None
    return "Invalid email format"


def validate_phone(value: Any) -> Optional[str]:
    # Empty phone is left to the required-field check
    if value is None or value == "":
        return None
    settings = get_settings()
    phone_regex = build_phone_regex(
        settings.phone_allowed_chars,
        settings.phone_min_length,
        settings.phone_max_length,
    )
    if phone_regex.fullmatch(str(value)):
        return None
    return "Invalid phone format"


VALIDATORS: Dict[str, FieldValidator] = {
    "email": validate_email,
    "phone": validate_phone,
}


def register_validator(field: str, validator: FieldValidator) -> None:
    """Add or replace the validator for a field name"""
    VALIDATORS[field] = validator


def validate_field(field: str, value: Any) -> Optional[str]:
    """
    Run the field's validator, if it has one

    Args:
        field: Field name used to look up the validator
        value: Submitted value

    Returns:
        None if valid (or no validator exists), otherwise the reason
    """
    validator = VALIDATORS.get(field)
    if validator is None:
        return None
    return validator(value)


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_required_fields(data: Dict[str, Any], required_fields: Iterable[str]) -> List[str]:
    """
    Check every required field and collect all problems

    Args:
        data: Raw submission
        required_fields: Field names in declaration order

    Returns:
        Error messages in declaration order, empty when the submission is valid
    """
    errors = []

    for field in required_fields:
        value = data.get(field)
        if is_missing(value):
            errors.append(f"Missing required field: {field}")
            continue

        reason = validate_field(field, value)
        if reason:
            errors.append(f"{field}: {reason}")

    return errors
