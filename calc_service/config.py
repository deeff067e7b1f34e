from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Calculator Service"
    DEBUG: bool = False
    BANNER: str = "Task 5.1P - Containerization"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Frontend assets, served only when the directory exists
    STATIC_DIR: str = "public"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
