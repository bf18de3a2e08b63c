# jobboard/core/config.py
from typing import Optional
from pydantic import AnyUrl
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Tokens are issued by the managed auth provider; we only verify them
    SECRET_KEY: str = "change-me"  # override in .env / secrets
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017/job_board"
    MONGODB_DB: str = "job_board"
    # "in" queries are chunked to this many ids
    QUERY_BATCH_SIZE: int = 30

    # Redis (AI flow result cache)
    REDIS_URL: str = "redis://localhost:6379/0"
    AI_CACHE_ENABLED: bool = False
    AI_CACHE_TTL_SEC: int = 60 * 60 * 24

    # LLM
    # Adapter selection: 'mock', 'http', 'gemini' or a dotted module path
    LLM_ADAPTER: str = "mock"
    LLM_API_KEY: Optional[str] = None
    LLM_HTTP_URL: Optional[AnyUrl] = None
    LLM_MODEL: str = "gemini-2.0-flash"
    GEMINI_ENDPOINT: str = "https://generativelanguage.googleapis.com/v1beta/models"
    LLM_TIMEOUT_SEC: int = 20
    # flows do not retry by default; a failed call yields the flow's default result
    LLM_RETRIES: int = 0
    LLM_BACKOFF_FACTOR: float = 0.5
    # allow fallback to mock adapter when the configured adapter fails
    LLM_ALLOW_FALLBACK: bool = False

    # Admin tables
    ADMIN_PAGE_SIZE: int = 10

    # Pydantic v2 settings: read from .env file
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

# single shared settings instance
settings = Settings()
