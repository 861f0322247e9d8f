from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Multilingua"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Storage settings
    database_url: str = "sqlite+aiosqlite:///./multilingua.db"
    storage_backend: str = "sql"  # "sql" or "memory"
    seed_demo_data: bool = True

    # Language settings
    default_language: str = "en"
    supported_languages: list[str] = ["en", "fr", "es", "ar"]
    recent_articles_limit: int = 5

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5000"]

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
