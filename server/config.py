# server/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()

config_logger = logging.getLogger(__name__)

_DEFAULT_SECRET_KEY = "dev-secret-please-change"


class Config:
    """Base configuration, read from the environment."""

    # Token signing
    SECRET_KEY = os.getenv("JWT_SECRET_KEY", _DEFAULT_SECRET_KEY)
    ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS = 7

    # Storage
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/brain.db")
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "./uploads")

    # Where the client serves the shared view
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:8501").rstrip("/")

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    MIN_PASSWORD_LENGTH = 6
    SHARE_HASH_LENGTH = 10

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


if Config.SECRET_KEY == _DEFAULT_SECRET_KEY:
    config_logger.warning(
        "Configuration: JWT_SECRET_KEY is not set, tokens are signed with the development key."
    )
