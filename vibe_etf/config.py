from pydantic_settings import BaseSettings, SettingsConfigDict

from vibe_etf.schemas import DataSource


class Settings(BaseSettings):
    api_base_url: str = "https://vibe-etf-be-production.up.railway.app/api"
    default_data_source: DataSource = "mock"
    log_level: str = "INFO"
    log_format: str = "json"
    log_include_stack: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="VIBE_ETF_")


settings = Settings()
