"""Global error handling middleware"""
from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
import traceback
import logging

from app.services.responses import error_response

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a 500 response envelope"""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.error(f"Unhandled error: {exc}")
            logger.error(traceback.format_exc())

            return error_response(
                "An unexpected error occurred",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            ).to_json_response()
