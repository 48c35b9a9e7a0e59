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
    CONTENT_DIR: str = "posts"
    CONTENT_EXTENSION: str = ".md"

    # Site
    SITE_URL: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Mailchimp
    MAILCHIMP_AUDIENCE_ID: str = ""
    MAILCHIMP_API_KEY: str = ""
    MAILCHIMP_TIMEOUT_SECONDS: float = 10.0
    SUBSCRIBE_ERROR_MESSAGE: str = (
        "There was an error subscribing to the newsletter. "
        "DM me on Twitter and I'll add you to the list."
    )

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
