"""
Application configuration settings
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    APP_NAME: str = "Seller Analytics Service"
    LOG_LEVEL: str = "INFO"

    # Demo dataset
    SEED_ON_STARTUP: bool = True
    SEED: int = 42

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
