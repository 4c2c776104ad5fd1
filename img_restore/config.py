from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Security: Read from .env, never hardcode defaults here
    # Each key is only needed for its own provider
    GEMINI_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None

    # Provider Configuration
    DEFAULT_IMAGE_PROVIDER: Literal["gemini", "openai"] = "gemini"

    GEMINI_MODEL: str = "gemini-2.5-flash-image"
    OPENAI_IMAGE_MODEL: str = "gpt-image-1"

    # Upload / Download
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    DOWNLOAD_FILENAME: str = "IMGRestore-Result.png"

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    # Built on first use so that importing the package never requires credentials.
    return Settings()
