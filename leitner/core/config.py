from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

# Load .env explicitly before creating Settings
project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")


class Settings(BaseSettings):
    """Scheduler settings loaded from environment variables."""

    # Database - DATABASE_URL is honoured without the prefix too
    database_url: str = "sqlite:///./leitner.db"

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Leitner system
    default_box_count: int = 5
    due_limit: int = 10
    strict: bool = False  # Raise on duplicate adds and unknown card ids

    # Day boundaries are computed in this timezone
    timezone: str = "UTC"

    log_level: str = "INFO"

    class Config:
        env_prefix = "LEITNER_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        if not kwargs.get("database_url") and os.getenv("DATABASE_URL"):
            kwargs["database_url"] = os.getenv("DATABASE_URL")
        super().__init__(**kwargs)


settings = Settings()
