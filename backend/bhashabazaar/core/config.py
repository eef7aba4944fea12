from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "BhashaBazaar"
    ENVIRONMENT: str = "development"

    # Logging (resolved against ENVIRONMENT when unset)
    LOG_LEVEL: Optional[str] = None
    LOG_FORMAT: Optional[str] = None

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Voice
    DEFAULT_LANGUAGE: str = "hi"
    MAX_TRANSCRIPT_LENGTH: int = 500

    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL or ("INFO" if self.is_production else "DEBUG")

    @property
    def log_format(self) -> str:
        return self.LOG_FORMAT or ("json" if self.is_production else "text")

settings = Settings()
