from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr
from typing import List, Optional


class Settings(BaseSettings):
    PROJECT_NAME: str = "Coworking Marketplace"
    DATABASE_URL: str
    SECRET_KEY: SecretStr
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 8  # 8 days

    RESEND_API_KEY: SecretStr | None = None
    EMAIL_FROM_ADDRESS: str = "Coworking Marketplace <no-reply@coworking.example>"
    FRONTEND_URL: str = Field(default="http://localhost:3000", description="Base URL for the buyer/seller portal")
    ADMIN_URL: str = Field(default="http://localhost:8000/admin", description="Base URL for the admin panel")
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: Optional[bool] = False

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

settings = Settings()
