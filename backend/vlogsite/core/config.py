from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so local secrets (e.g. CLOUDINARY_API_SECRET)
# are available without exporting them in the shell.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _float_env(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except Exception:
        return default


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except Exception:
        return default


class Settings:
    PROJECT_NAME = "Vlogsite API"
    API_V1_STR = "/api"

    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB = os.getenv("MONGODB_DB", "vlogsite")
    MONGODB_TIMEOUT_MS = _int_env("MONGODB_TIMEOUT_MS", 5000)

    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-prod")
    ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = _int_env("ACCESS_TOKEN_EXPIRE_MINUTES", 60)

    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "password")

    _cors_origins = os.getenv("CORS_ORIGINS", "*")

    # If wildcard is present, treat as allow-all for local development
    if "*" in _cors_origins:
        CORS_ORIGINS = ["*"]
    else:
        CORS_ORIGINS = [o.strip() for o in _cors_origins.split(",") if o.strip()]

    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", "")
    CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "")
    CLOUDINARY_API_URL = os.getenv("CLOUDINARY_API_URL", "https://api.cloudinary.com/v1_1")
    UPLOAD_TIMEOUT_SECONDS = _float_env("UPLOAD_TIMEOUT_SECONDS", 30.0)
    MAX_UPLOAD_BYTES = _int_env("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
