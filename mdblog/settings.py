from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    TEMPLATES_DIR: str = "templates"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"

    # Rendering
    MARKDOWN_EXTENSIONS: List[str] = ["fenced_code", "tables"]

    # Order posts by the formatted display date string instead of the
    # resolved datetime. Month-name dates do not sort chronologically.
    SORT_BY_DISPLAY_DATE: bool = False

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def templates_path(self) -> Path:
        return Path(self.TEMPLATES_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
