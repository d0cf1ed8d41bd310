"""Main FastAPI application"""
from fastapi import FastAPI
from app.config import get_settings
from app.middleware.cors import setup_cors
from app.middleware.error_handler import ErrorHandlerMiddleware
from app.services.form_registry import form_registry
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Multi-Form Submission API",
    description="Validates, filters and dispatches submissions for multiple forms",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Setup CORS
setup_cors(app)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "form-submission-api", "forms": form_registry.available_forms()}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Multi-Form Submission API",
        "version": "1.0.0",
        "submit": "/api/forms/submit",
        "docs": "/docs"
    }

# Import and include routers
from app.routers import forms

app.include_router(forms.router, prefix="/api/forms", tags=["Forms"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
