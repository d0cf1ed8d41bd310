"""Anti-spam heuristics: honeypot field and minimum fill time"""
import math
import re
import time
import logging
from typing import Any, Dict, Optional

from app.config import get_settings
from app.errors import SpamDetected

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def current_time_ms() -> int:
    return int(time.time() * 1000)


def parse_timestamp(value: Any) -> Optional[int]:
    """Read the leading integer of a client timestamp, None if there isn't one"""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def check_honeypot(data: Dict[str, Any]) -> bool:
    """
    Honeypot field must be empty for human submissions.
    Forms render it hidden so only automated fillers populate it.

    Returns:
        True if the submission passes, False if a bot filled the field
    """
    value = data.get(get_settings().honeypot_field)
    if not isinstance(value, str):
        # null, false and 0 count as empty
        return not value
    return value.strip() == ""


def check_timestamp(data: Dict[str, Any], now_ms: Optional[int] = None) -> bool:
    """
    Reject submissions made faster than a human could fill the form.
    The timestamp field holds the epoch milliseconds when the form loaded.

    Returns:
        True if the submission passes or carries no usable timestamp
    """
    settings = get_settings()
    value = data.get(settings.timestamp_field)
    if value is None or value == "":
        return True

    rendered_at = parse_timestamp(value)
    if rendered_at is None:
        return True

    if now_ms is None:
        now_ms = current_time_ms()
    return now_ms - rendered_at >= settings.min_submit_ms


def run_spam_checks(form_id: str, data: Dict[str, Any], now_ms: Optional[int] = None) -> None:
    """
    Apply both heuristics in order

    Raises:
        SpamDetected: silent for the honeypot, visible for the timestamp
    """
    if not check_honeypot(data):
        logger.warning(f"[{form_id}] Honeypot triggered, suppressing submission")
        raise SpamDetected("Form submitted successfully", reason="honeypot", silent=True)

    if not check_timestamp(data, now_ms):
        logger.warning(f"[{form_id}] Submitted too quickly after render")
        raise SpamDetected("Please wait a moment before submitting", reason="timestamp")
