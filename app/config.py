"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Dict, Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    cors_allow_origin: str = "*"  # Configure for your domain in production

    # Anti-spam
    honeypot_field: str = "_honey"
    timestamp_field: str = "_timestamp"
    control_prefix: str = "_"
    min_submit_ms: int = 2000

    # Phone format policy
    phone_allowed_chars: str = r"\d \-+()"
    phone_min_length: int = 7
    phone_max_length: int = 20

    # Email notifications (Resend). Disabled when no API key is set.
    resend_api_key: Optional[str] = None
    notification_from: str = "Forms <forms@example.com>"
    contact_notify_email: Optional[str] = None
    sales_notify_email: Optional[str] = None

    # Per-form webhooks, e.g. WEBHOOK_URLS='{"contact": "https://hooks.example.com/contact"}'
    webhook_urls: Dict[str, str] = {}

    # Supabase storage. Disabled when credentials are missing.
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
