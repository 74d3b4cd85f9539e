from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	# Model to use, default to Gemini 2.5 Flash
	gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
	gemini_timeout_seconds: float = Field(default=30, validation_alias="GEMINI_TIMEOUT_SECONDS")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")

	# When true, a selected section without details is written by the model instead of rejected
	auto_generate_empty_sections: bool = Field(default=False, validation_alias="BULLETIN_AUTO_GENERATE_EMPTY_SECTIONS")

	log_level: str = Field(default="INFO", validation_alias="BULLETIN_LOG_LEVEL")
	cookie_secure: bool = Field(default=False, validation_alias="BULLETIN_COOKIE_SECURE")
	# Browser sessions untouched for this long are dropped, with their saved comments
	session_idle_minutes: int = Field(default=720, validation_alias="BULLETIN_SESSION_IDLE_MINUTES")
	session_sweep_seconds: int = Field(default=600, validation_alias="BULLETIN_SESSION_SWEEP_SECONDS")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
	return Settings()


settings = get_settings()
