"""Email and webhook side effects for form submissions"""
import asyncio
import logging
from typing import Dict, Optional

import httpx

from app.config import get_settings
from app.errors import NotificationError
from app.models.forms import SanitizedSubmission
from app.services.sanitizer import sanitize_input

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"

# Rate limiting settings for Resend API
MAX_RETRIES = 3
RETRY_BACKOFF_BASE = 2  # seconds
WEBHOOK_TIMEOUT = 10.0


def render_submission_html(title: str, data: SanitizedSubmission) -> str:
    """Render a submission as an HTML table. Values arrive escaped; field names do not."""
    rows = "".join(
        f'<tr><td style="padding: 4px 12px; color: #6b7280;">{sanitize_input(key)}</td>'
        f'<td style="padding: 4px 12px;">{value}</td></tr>'
        for key, value in data.items()
    )
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #111827;">{sanitize_input(title)}</h2>
        <table style="border-collapse: collapse;">{rows}</table>
    </div>
    """


async def send_submission_email(
    to_email: str,
    subject: str,
    data: SanitizedSubmission,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> Dict:
    """
    Send a submission notification via Resend with retry on rate limits

    Args:
        to_email: Recipient address
        subject: Email subject
        data: Sanitized submission to include in the body
        transport: Optional httpx transport, used in tests

    Returns:
        Dict with success flag and Resend message id

    Raises:
        NotificationError: If Resend is not configured or the send fails
    """
    settings = get_settings()
    if not settings.resend_api_key:
        raise NotificationError("Resend API key is not configured")

    payload = {
        "from": settings.notification_from,
        "to": [to_email],
        "subject": subject,
        "html": render_submission_html(subject, data),
    }

    async with httpx.AsyncClient(transport=transport) as client:
        for retry in range(MAX_RETRIES + 1):
            try:
                response = await client.post(
                    RESEND_API_URL,
                    headers={
                        "Authorization": f"Bearer {settings.resend_api_key}",
                        "Content-Type": "application/json"
                    },
                    json=payload
                )
            except httpx.RequestError as e:
                if retry < MAX_RETRIES:
                    await asyncio.sleep(RETRY_BACKOFF_BASE * (2 ** retry))
                    continue
                raise NotificationError(f"Email request failed: {e}") from e

            if response.status_code == 200:
                logger.info(f"Submission email sent to {to_email}")
                return {"success": True, "id": response.json().get("id")}

            if response.status_code == 429 and retry < MAX_RETRIES:
                backoff_time = RETRY_BACKOFF_BASE * (2 ** retry)
                logger.warning(f"Rate limited, retrying in {backoff_time}s (attempt {retry + 1}/{MAX_RETRIES})")
                await asyncio.sleep(backoff_time)
                continue

            raise NotificationError(f"Email send failed: {response.status_code} - {response.text}")

    raise NotificationError("Email send failed after retries")


async def trigger_webhook(
    url: str,
    data: SanitizedSubmission,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> int:
    """
    POST the submission as JSON to a webhook

    Returns:
        The webhook's response status code

    Raises:
        NotificationError: On connection failure or a non-2xx response
    """
    try:
        async with httpx.AsyncClient(transport=transport, timeout=WEBHOOK_TIMEOUT) as client:
            response = await client.post(url, json=data)
    except httpx.RequestError as e:
        raise NotificationError(f"Webhook request to {url} failed: {e}") from e

    if not response.is_success:
        raise NotificationError(f"Webhook {url} returned {response.status_code}")

    logger.info(f"[{data.get('form_id')}] Webhook delivered to {url}")
    return response.status_code


def webhook_url_for(form_id: str) -> Optional[str]:
    """Webhook URL configured for a form, if any"""
    return get_settings().webhook_urls.get(form_id)
