from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Exchange rate source
	RATES_BASE_URL: str = 'https://api.exchangerate-api.com/v4/latest'
	BASE_CURRENCY: str = 'TWD'
	HTTP_TIMEOUT_SECONDS: int = 10

	# Refresh schedule
	REFRESH_INTERVAL_SECONDS: int = 3600
	REFRESH_TOLERANCE_SECONDS: int = 60

	# Calculator defaults
	DEFAULT_FROM_CURRENCY: str = 'TWD'
	DEFAULT_TO_CURRENCY: str = 'JPY'

	# Application
	APP_NAME: str = 'Currency Keypad Converter'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
