"""Settings for SoqlBuilder."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SoqlBuilderSettings(BaseSettings):
    """SoqlBuilder configuration settings."""

    LOG_LEVEL: str = "INFO"
    # Log every rendered query through Logger.message
    LOG_QUERIES: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = SoqlBuilderSettings()
