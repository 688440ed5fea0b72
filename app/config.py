import os

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").strip().lower()
    JSON_INDENT = int(os.getenv("JSON_INDENT", "2"))

    # Media payloads arrive inline as encoded strings.
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(50 * 1024 * 1024)))

    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw:
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = "*"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    LOG_REQUESTS = _env_bool("LOG_REQUESTS", False)

    PORT = int(os.getenv("PORT", "3000"))
