from pathlib import Path

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
    ARTICLES_DIR: str = "articles"
    AUTHORS_DIR: str = "author"
    PUBLIC_DIR: str = "public"

    # Site
    SITE_URL: str = "https://blog.zendfi.tech"
    SITE_NAME: str = "Zendfi"
    DEFAULT_OG_IMAGE: str = "/icon.jpg"

    # Rendering
    CODE_THEME: str = "github-dark"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def articles_path(self) -> Path:
        return Path(self.ARTICLES_DIR)

    @property
    def authors_path(self) -> Path:
        return Path(self.AUTHORS_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)

    @property
    def base_url(self) -> str:
        return self.SITE_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
