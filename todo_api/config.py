import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


APP_TITLE = "Task Manager API"
APP_VERSION = "1.0.0"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./tasks.db")
if DATABASE_URL.startswith("postgresql://"):
    DATABASE_URL = DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
DB_ECHO = _env_bool("DB_ECHO", False)

SECRET_KEY = os.getenv("SECRET_KEY", "insecure-development-key-change-me-in-production")
TOKEN_ALGORITHM = "HS256"
ACCESS_TOKEN_LIFETIME = _env_int("ACCESS_TOKEN_LIFETIME", 60 * 60 * 24)

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

DEFAULT_PAGE_LIMIT = _env_int("DEFAULT_PAGE_LIMIT", 10)
MAX_PAGE_LIMIT = _env_int("MAX_PAGE_LIMIT", 100)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 8000)
DEBUG = _env_bool("DEBUG", False)
