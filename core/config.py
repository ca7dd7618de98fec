from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List

# Resolve the project root .env file (core/../.env)
_THIS_DIR = Path(__file__).resolve().parent          # core/
_PROJECT_ROOT = _THIS_DIR.parent                     # project root
_ENV_FILE = _PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    # Server config
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 3000
    ENVIRONMENT: str = "development"

    # Frontend config
    FRONTEND_URL: str = "http://localhost:5173"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017"
    DB_NAME: str = "doctorPortal"
    MONGODB_TIMEOUT_MS: int = 5000

    # Value the "role" header must carry on admin-only routes
    ADMIN_ROLE_VALUE: str = "admin"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
