from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Healthspan Survey"
    APP_VERSION: str = "1.0.0"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # ko = source copy, en = translation
    SUPPORTED_LOCALES: List[str] = ["ko", "en"]
    DEFAULT_LOCALE: str = "ko"

    ALLOWED_ORIGINS: List[str] = ["*"]

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, v: str, info: ValidationInfo) -> str:
        supported = info.data.get("SUPPORTED_LOCALES", [])
        if v not in supported:
            raise ValueError(f"DEFAULT_LOCALE '{v}' must be one of {supported}.")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
