from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central settings object.
    Deployments provide env vars; locally you can use backend/.env.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Upstream spec-form API
    BIHINKANRI_API_BASE: str = "https://api.bihinkanri.cloud/public-prod"
    BIHINKANRI_API_KEY: str = ""
    BIHINKANRI_ACCOUNT_ID: str = ""
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # HTTP
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Versioning
    APP_VERSION: str = "0.1.0"
    BUILD_ID: str = "dev"


# ✅ MUST EXIST: other modules import this
settings = Settings()
