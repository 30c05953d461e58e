from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "Namebook"
    ENV: str = "production"
    LOG_LEVEL: str = "INFO"

    # Database
    # Hosted Postgres providers export POSTGRES_URL; either name works.
    DATABASE_URL: str = Field(
        default="sqlite:///./data.db",
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"),
    )

settings = Settings()
