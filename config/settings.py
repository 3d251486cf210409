from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	CRYPTO_API_URL: str = 'https://api.coingecko.com/api/v3/exchange_rates'
	PROVIDER_TIMEOUT: int = 10

	REDIS_HOST: str = 'localhost'
	REDIS_PORT: int = 6379
	REDIS_TIMEOUT: float = 2.0

	# Rates cache
	RATES_CACHE_KEY: str = 'cryptoRates'
	RATES_CACHE_TTL_SECONDS: int = 300
	RATES_REFRESH_INTERVAL_SECONDS: int = 300
	RATES_REFRESH_ENABLED: bool = True

	# Exchange
	EXCHANGE_FEE_RATE: Decimal = Decimal('0.01')
	EXCHANGE_SCALE: int = 8

	# Application
	APP_NAME: str = 'Crypto Exchange API'
	HOST: str = '0.0.0.0'
	PORT: int = 8080
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
