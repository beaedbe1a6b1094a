from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.review import ReviewMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    anthropic_api_key: str = ""
    model_name: str = "claude-haiku-4-5-20251001"
    review_mode: ReviewMode = ReviewMode.LITERAL
    diversity_temperature: float = 0.95
    max_tokens: int = 512
    provider_timeout: float = 60.0


settings = Settings()
