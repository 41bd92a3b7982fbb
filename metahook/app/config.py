from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.validators import is_nonempty_string


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

	# App
	APP_ENV: str = "dev"
	LOG_LEVEL: str = "INFO"
	HOST: str = "0.0.0.0"
	PORT: int = 3000

	# Meta webhook secrets
	VERIFY_TOKEN: Optional[str] = None
	APP_TOKEN: Optional[str] = None

	# HMAC back-end selection
	HMAC_BACKEND: Literal["auto", "hashlib", "cryptography"] = "auto"

	@field_validator("VERIFY_TOKEN", "APP_TOKEN", mode="before")
	@classmethod
	def _blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
		if isinstance(value, str) and not is_nonempty_string(value):
			return None
		return value

	@property
	def signature_checks_enabled(self) -> bool:
		return self.APP_TOKEN is not None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
	return Settings()
