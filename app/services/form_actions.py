"""Per-form success actions

Each action receives the sanitized submission. Storage, email and webhook
delivery only run when configured; otherwise the action just logs receipt.
Storage is always the last step, so a failed email or webhook never leaves
a stored row behind for the client's retry to duplicate.
"""
import logging
from typing import Optional

from app.config import get_settings
from app.models.forms import SanitizedSubmission
from app.services.notifications import send_submission_email, trigger_webhook, webhook_url_for
from app.services.storage import add_to_mailing_list, save_submission

logger = logging.getLogger(__name__)


async def forward_submission(data: SanitizedSubmission) -> None:
    """Deliver the submission to the form's webhook, then store it"""
    url = webhook_url_for(data["form_id"])
    if url:
        await trigger_webhook(url, data)

    await save_submission(data)


async def notify(to_email: Optional[str], subject: str, data: SanitizedSubmission) -> None:
    if to_email and get_settings().resend_api_key:
        await send_submission_email(to_email, subject, data)


async def handle_contact(data: SanitizedSubmission) -> None:
    logger.info(f"[Contact Form] Submission received: {data}")
    await notify(get_settings().contact_notify_email, f"New Contact: {data['name']}", data)
    await forward_submission(data)


async def handle_newsletter(data: SanitizedSubmission) -> None:
    logger.info(f"[Newsletter] Subscription received: {data}")
    url = webhook_url_for(data["form_id"])
    if url:
        await trigger_webhook(url, data)

    await add_to_mailing_list(data)


async def handle_quote(data: SanitizedSubmission) -> None:
    logger.info(f"[Quote Form] Request received: {data}")
    await notify(get_settings().sales_notify_email, f"Quote Request: {data['service_type']}", data)
    await forward_submission(data)


async def handle_callback(data: SanitizedSubmission) -> None:
    logger.info(f"[Callback Form] Request received: {data}")
    await forward_submission(data)
