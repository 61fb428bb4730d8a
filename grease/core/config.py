# grease/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SECRET_KEY: str = "change-this-grease-secret-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    DATABASE_URL: str = "sqlite:///./grease.db"

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8000",
    ]

    # RSVPs close this many hours before call time
    RSVP_CUTOFF_HOURS: int = 24

    # Used for lateness when an event has no usable release time
    DEFAULT_EVENT_MINUTES: int = 60

    class Config:
        env_file = ".env"


settings = Settings()
