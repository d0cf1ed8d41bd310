"""
Retry utility for handling transient database connection errors.
Storage writes for form submissions go through this so a dropped
connection doesn't fail the whole submission.
"""
import time
import logging
from typing import Callable, Any

logger = logging.getLogger(__name__)


def is_connection_reset(error: Exception) -> bool:
    error_str = str(error).lower()
    return "connection reset" in error_str or "errno 104" in error_str


def retry_supabase_query(
    query_func: Callable,
    max_retries: int = 3,
    base_delay: float = 0.5,
    sleep: Callable[[float], None] = time.sleep
) -> Any:
    """
    Execute a Supabase query with retry logic for transient errors.

    Usage:
        result = retry_supabase_query(
            lambda: client.table("form_submissions").insert(row).execute()
        )

    Args:
        query_func: A callable that executes the Supabase query
        max_retries: Maximum number of retry attempts
        base_delay: First backoff delay in seconds, doubled per attempt
        sleep: Sleep function, replaceable in tests

    Returns:
        The query result
    """
    for attempt in range(max_retries + 1):
        try:
            return query_func()
        except Exception as e:
            if not is_connection_reset(e) or attempt >= max_retries:
                raise
            delay = min(base_delay * (2 ** attempt), 4.0)
            logger.warning(
                f"Supabase connection reset, retry {attempt + 1}/{max_retries}. "
                f"Waiting {delay}s..."
            )
            sleep(delay)
