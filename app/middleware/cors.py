"""CORS preflight handling"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.services.responses import preflight_response


class PreflightMiddleware(BaseHTTPMiddleware):
    """Answer OPTIONS on any path with an empty 200 and the CORS headers"""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return preflight_response().to_json_response()
        return await call_next(request)


def setup_cors(app):
    """
    Configure CORS preflight handling for the application

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(PreflightMiddleware)
