from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False)

    app_name: str = Field("Travel Itinerary Planner", validation_alias="APP_NAME")
    environment: str = Field("local", validation_alias="ENVIRONMENT")
    default_user_id: str = Field("demo-user", validation_alias="DEFAULT_USER_ID")
    llm_provider: str = Field("mock", validation_alias="LLM_PROVIDER")
    ollama_host: str = Field("http://localhost:11434", validation_alias="OLLAMA_HOST")
    ollama_model: str = Field("llama3", validation_alias="OLLAMA_MODEL")
    ollama_timeout: int = Field(60, validation_alias="OLLAMA_TIMEOUT")
    llm_max_tokens: int = Field(4000, validation_alias="LLM_MAX_TOKENS")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
