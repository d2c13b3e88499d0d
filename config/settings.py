from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	REDIS_URL: str = 'redis://localhost:6379'

	# External market-data service
	COMPARISON_API_URL: str = 'http://localhost:8080/api'
	COMPARISON_API_KEY: str = ''
	COMPARISON_TIMEOUT: float = 30
	COMPARISON_MAX_ATTEMPTS: int = 3

	CLICK_HISTORY_LIMIT: int = 500
	MAX_SESSIONS: int = 1000

	# Application
	APP_NAME: str = 'Remittance Comparison API'
	DEBUG: bool = True
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
