"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str = "mongodb://localhost:27017/lifesync"

    # Application Configuration
    app_name: str = "LifeSync API"
    app_version: str = "1.0.0"
    debug: bool = True
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # Auth Configuration
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: int = 60 * 24 * 7

    # CORS Configuration
    cors_allow_origin: str = "*"
    cors_allow_methods: List[str] = ["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"]
    cors_allow_headers: List[str] = [
        "X-CSRF-Token",
        "X-Requested-With",
        "Accept",
        "Accept-Version",
        "Content-Length",
        "Content-MD5",
        "Content-Type",
        "Date",
        "X-Api-Version",
        "Authorization",
    ]

    # Goals: "preserve" or "target_ratio"
    goal_progress_formula: str = "preserve"

    # Client Configuration
    api_base_url: str = "http://localhost:8000/api"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
