from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	JWT_SECRET: str = Field(min_length=1)
	JWT_ALGORITHM: str = 'HS256'
	TOKEN_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 7
	# Set to True behind TLS
	COOKIE_SECURE: bool = False
	BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

	FIXERIO_API_KEY: str = ''
	FIXER_API_URL: str = 'http://data.fixer.io/api'
	COUNTRY_API_URL: str = 'https://restcountries.com/v3.1'
	REFERENCE_CURRENCY: str = 'SEK'
	HTTP_TIMEOUT_SECONDS: float = 10.0

	# Application
	APP_NAME: str = 'Country Rates API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_FORMAT: str = 'text'
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
