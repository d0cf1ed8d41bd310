"""Supabase storage for form submissions

The Supabase client and the retry backoff are blocking, so writes run in a
worker thread to keep the event loop free.
"""
import asyncio
import logging
from typing import Optional

from supabase import Client

from app.database import get_supabase_admin
from app.errors import NotificationError
from app.models.forms import SanitizedSubmission
from app.utils.retry import retry_supabase_query

logger = logging.getLogger(__name__)

SUBMISSIONS_TABLE = "form_submissions"
SUBSCRIBERS_TABLE = "newsletter_subscribers"


async def save_submission(data: SanitizedSubmission, client: Optional[Client] = None) -> bool:
    """
    Store a submission in the form_submissions table

    Returns:
        True if stored, False if storage is not configured

    Raises:
        NotificationError: If the insert fails
    """
    client = client or get_supabase_admin()
    if client is None:
        return False

    row = {
        "form_id": data["form_id"],
        "submitted_at": data["submitted_at"],
        "submitted_data": {
            key: value for key, value in data.items()
            if key not in ("form_id", "submitted_at")
        },
    }

    try:
        await asyncio.to_thread(
            retry_supabase_query,
            lambda: client.table(SUBMISSIONS_TABLE).insert(row).execute()
        )
    except Exception as e:
        raise NotificationError(f"Failed to store {data['form_id']} submission: {e}") from e

    logger.info(f"[{data['form_id']}] Submission stored")
    return True


async def add_to_mailing_list(data: SanitizedSubmission, client: Optional[Client] = None) -> bool:
    """Upsert a newsletter subscriber keyed by email"""
    client = client or get_supabase_admin()
    if client is None:
        return False

    row = {
        "email": data["email"],
        "name": data.get("name"),
        "preferences": data.get("preferences"),
        "subscribed_at": data["submitted_at"],
    }

    try:
        await asyncio.to_thread(
            retry_supabase_query,
            lambda: client.table(SUBSCRIBERS_TABLE).upsert(row, on_conflict="email").execute()
        )
    except Exception as e:
        raise NotificationError(f"Failed to add subscriber: {e}") from e

    logger.info("[newsletter] Subscriber saved")
    return True
