from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Model to use when GEMINI_MODEL is not set
	gemini_model: str = Field(default="gemini-1.5-flash-lite", validation_alias="GEMINI_MODEL")
	# Google AI Studio (Generative Language API) root; model path is appended per call
	gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta", validation_alias="GEMINI_BASE_URL")
	gemini_timeout_seconds: float = Field(default=30.0, validation_alias="GEMINI_TIMEOUT_SECONDS")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_settings() -> Settings:
	# Read on every call so a changed key or model is picked up without a restart
	return Settings()


settings = get_settings()
