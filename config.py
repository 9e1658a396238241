import os
import logging

from utils.env import get_env_str, get_env_bool, get_env_int

logger = logging.getLogger(__name__)

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

# -----------------------------------------------------------------------------
# Dotenv loading (LOCAL ONLY)
# -----------------------------------------------------------------------------
# Rules:
# - Deployed stages are configured via real environment variables.
# - Tests must be deterministic and must NOT implicitly ingest a developer's repo-root .env.
# - Local dev may use .env for convenience.
_FLASK_ENV_EARLY = (os.getenv("FLASK_ENV") or "").strip().lower()
_APP_STAGE_EARLY = (os.getenv("APP_STAGE") or "").strip().lower()

if _FLASK_ENV_EARLY not in {"test", "testing"} and _APP_STAGE_EARLY not in {"test", "testing"}:
    from dotenv import load_dotenv
    load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"), override=False)

# -----------------------------------------------------------------------------
# Environment / Stage
# -----------------------------------------------------------------------------
def _normalize_stage(raw: str) -> str:
    raw = (raw or "").strip().lower()
    if raw in {"prod", "production"}:
        return "production"
    if raw in {"stage", "staging"}:
        return "staging"
    if raw in {"test", "testing"}:
        return "test"
    return "dev"


FLASK_ENV = (os.getenv("FLASK_ENV", "development") or "development").strip().lower()
APP_STAGE = _normalize_stage(os.getenv("APP_STAGE", "dev"))

IS_TEST = APP_STAGE == "test" or FLASK_ENV in {"test", "testing"}
IS_STAGING = APP_STAGE == "staging"
IS_PRODUCTION = APP_STAGE == "production"

DEBUG = FLASK_ENV != "production" and not IS_PRODUCTION
TESTING = IS_TEST

# -----------------------------------------------------------------------------
# Secrets
# -----------------------------------------------------------------------------
SECRET_KEY = get_env_str("SECRET_KEY")
if not SECRET_KEY:
    if IS_STAGING or IS_PRODUCTION:
        raise ValueError(f"SECRET_KEY must be set in {APP_STAGE} environment.")
    SECRET_KEY = "dev-secret-key-change-this"
    logger.warning("[Config] WARNING: Using default SECRET_KEY for development. DO NOT use in real environments!")

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LOG_LEVEL = get_env_str("LOG_LEVEL", default="INFO").upper()
if LOG_LEVEL not in _VALID_LOG_LEVELS:
    logger.warning(f"[Config] WARNING: Invalid LOG_LEVEL '{LOG_LEVEL}'. Defaulting to INFO.")
    LOG_LEVEL = "INFO"

# -----------------------------------------------------------------------------
# Export Geometry
# -----------------------------------------------------------------------------
_VALID_PAGE_SIZES = {"A4", "LETTER"}

EXPORT_PAGE_SIZE = get_env_str("EXPORT_PAGE_SIZE", default="A4").upper()
if EXPORT_PAGE_SIZE not in _VALID_PAGE_SIZES:
    logger.warning(f"[Config] WARNING: Invalid EXPORT_PAGE_SIZE '{EXPORT_PAGE_SIZE}'. Defaulting to A4.")
    EXPORT_PAGE_SIZE = "A4"

# CSS reference pixel density. Editor preview and export must agree on it.
EXPORT_CSS_DPI = get_env_int("EXPORT_CSS_DPI", default=96)
if EXPORT_CSS_DPI <= 0:
    raise ValueError(f"CRITICAL: EXPORT_CSS_DPI must be positive. Got: {EXPORT_CSS_DPI}")

# -----------------------------------------------------------------------------
# Upload limits
# -----------------------------------------------------------------------------
MAX_LOGO_BYTES = 5 * 1024 * 1024
MAX_CONTENT_LENGTH = MAX_LOGO_BYTES + 64 * 1024

# -----------------------------------------------------------------------------
# Rate Limiting
# -----------------------------------------------------------------------------
RATELIMIT_ENABLED = get_env_bool("RATELIMIT_ENABLED", default=not IS_TEST)
RATELIMIT_DEFAULT = get_env_str("RATELIMIT_DEFAULT", default="600 per minute")
RATELIMIT_STORAGE_URI = get_env_str("RATELIMIT_STORAGE_URI", default="memory://")

if (IS_STAGING or IS_PRODUCTION) and RATELIMIT_STORAGE_URI.startswith("memory://"):
    logger.warning("[Config] WARNING: In-memory rate limit storage is per-worker. Use redis:// in deployed stages.")
