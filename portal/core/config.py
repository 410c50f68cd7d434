import os
import logging
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class MailSettings(BaseModel):
    smtp_host: str = Field(default=os.getenv("SMTP_HOST", "smtp.gmail.com"))
    smtp_port: int = Field(default=int(os.getenv("SMTP_PORT", "587")))
    smtp_user: Optional[str] = Field(default=os.getenv("SMTP_USER"))
    smtp_pass: Optional[str] = Field(default=os.getenv("SMTP_PASS"))
    sender_name: str = Field(default=os.getenv("SENDER_NAME", "Recruitment Team"))

    @property
    def enabled(self) -> bool:
        return bool(self.smtp_user and self.smtp_pass)

class Config(BaseModel):
    app_name: str = "Recruit Portal"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./portal.db")
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"

    # Sessions
    secret_key: str = os.getenv("SECRET_KEY", "dev-only-insecure-key-DO-NOT-USE-IN-PROD")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))  # 24 hours

    # Resumes
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    text_extractor: str = os.getenv("TEXT_EXTRACTOR", "canned")  # canned | document
    rate_limit_uploads: str = os.getenv("RATE_LIMIT_UPLOADS", "10/minute")

    # Outgoing mail
    mail: MailSettings = MailSettings()

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,http://localhost:8080,"
                "http://127.0.0.1:5173,http://127.0.0.1:8080",
            ).split(",")
            if o.strip()
        ]
    )

settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if "dev-only" in settings.secret_key:
        raise RuntimeError(
            "FATAL: SECRET_KEY must be set for non-development environments. "
            "Set it as an environment variable."
        )
elif "dev-only" in settings.secret_key:
    _logger.warning("Using insecure default SECRET_KEY, only acceptable in development.")
