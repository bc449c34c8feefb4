from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AnyUrl

class Settings(BaseSettings):
    APP_NAME: str = "BurnScale API"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: AnyUrl

    SUPABASE_JWT_SECRET: str | None = None
    JWT_AUDIENCE: str = "authenticated"

    OPENAI_API_KEY: str
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_IMAGE_MODEL: str = "dall-e-3"
    OPENAI_IMAGE_SIZE: str = "1024x1024"

    # Look-back window for trends, dashboard and mood boards
    TRENDS_WINDOW_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

settings = Settings()  # type: ignore
