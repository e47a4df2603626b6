# taskboard/config/settings.py
# Environment driven configuration for the task manager API

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application configuration"""

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")
    DB_SSLMODE = os.getenv("DB_SSLMODE", "prefer")

    # Tokens
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 24 * 60))

    # Default admin seeded on startup
    SEED_ADMIN = os.getenv("SEED_ADMIN", "true").lower() == "true"
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@taskmanager.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "password")
    ADMIN_FULL_NAME = os.getenv("ADMIN_FULL_NAME", "System Administrator")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """Split the comma separated CORS_ORIGINS value"""
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]
