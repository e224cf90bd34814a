from enum import Enum
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class DialogueMode(str, Enum):
	# "plain" asks for Teacher:/Student: lines, "structured" asks for a JSON object
	PLAIN = "plain"
	STRUCTURED = "structured"


class Settings(BaseSettings):
	# Mistral chat-completion endpoint
	mistral_api_key: str | None = Field(default=None, validation_alias="MISTRAL_API_KEY")
	mistral_api_url: str = Field(default="https://api.mistral.ai/v1/chat/completions", validation_alias="MISTRAL_API_URL")
	mistral_model: str = Field(default="mistral-medium", validation_alias="MISTRAL_MODEL")
	llm_temperature: float = Field(default=0.7, validation_alias="LLM_TEMPERATURE")
	llm_max_tokens: int = Field(default=2000, validation_alias="LLM_MAX_TOKENS")
	llm_timeout_seconds: float = Field(default=30.0, validation_alias="LLM_TIMEOUT_SECONDS")

	dialogue_mode: DialogueMode = Field(default=DialogueMode.PLAIN, validation_alias="DIALOGUE_MODE")
	max_source_chars: int = Field(default=5000, validation_alias="MAX_SOURCE_CHARS")

	# Uploads
	max_upload_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="MAX_UPLOAD_BYTES")

	# Server
	cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=5000, validation_alias="PORT")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

	@property
	def cors_origin_list(self) -> List[str]:
		return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
	return Settings()
