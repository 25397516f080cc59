import os
import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_DB_URL = "sqlite:///local.db"
PLACEHOLDER_GEMINI_KEY = "placeholder-key"
PLACEHOLDER_JWT_SECRET = "your-secret-key"


def _database_url() -> str:
    db_url = os.getenv("DATABASE_URL") or os.getenv("SUPABASE_DB_URL") or PLACEHOLDER_DB_URL
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)
    return db_url


class Config:
    """
    Values are read when the class body runs, so call load_dotenv() before
    importing this module.
    """
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or PLACEHOLDER_GEMINI_KEY
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

    GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID", "")
    GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET", "")

    JWT_SECRET = os.getenv("JWT_SECRET") or PLACEHOLDER_JWT_SECRET
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_DAYS = 7

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 10MB upload limit
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024


def warn_missing(config) -> list:
    """Logs a warning for every setting still on its placeholder. Never raises."""
    missing = []
    if config.get("SQLALCHEMY_DATABASE_URI") == PLACEHOLDER_DB_URL:
        missing.append("DATABASE_URL")
    if config.get("GEMINI_API_KEY") == PLACEHOLDER_GEMINI_KEY:
        missing.append("GEMINI_API_KEY")
    if not config.get("GOOGLE_CLIENT_ID") or not config.get("GOOGLE_CLIENT_SECRET"):
        missing.append("GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET")
    if config.get("JWT_SECRET") == PLACEHOLDER_JWT_SECRET:
        missing.append("JWT_SECRET")

    for name in missing:
        logger.warning("%s not set, using a placeholder value", name)
    return missing
