from pydantic_settings import BaseSettings
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Look for .env in api directory (parent of sentencelab directory)
api_dir = Path(__file__).parent.parent.parent
env_path = api_dir / ".env"

if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")
else:
    # Fallback to current directory
    current_env = Path(".env")
    if current_env.exists():
        load_dotenv(current_env, override=False)
        _logger.info(f"Loaded .env file from: {current_env.absolute()}")

DEFAULT_DATABASE_URL = "sqlite:///./data/app.db"


def normalize_database_url(url: str) -> str:
    """SQLAlchemy prefers postgresql:// over postgres://."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = ""
    database_echo: bool = False

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def __init__(self, **kwargs):
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        kwargs["database_url"] = normalize_database_url(kwargs["database_url"])
        super().__init__(**kwargs)


# Create settings instance
settings = Settings()

# Validate DATABASE_URL (an explicit empty value is a misconfiguration)
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable must not be empty")
