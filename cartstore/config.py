"""Environment-driven settings."""
import os
from dataclasses import dataclass

CURRENCY = os.environ.get("CURRENCY", "USD").upper()
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
CARTSTORE_ENV = os.environ.get("CARTSTORE_ENV", "development")


@dataclass(frozen=True)
class Settings:
    currency: str
    log_level: str
    environment: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings(
    currency=CURRENCY,
    log_level=LOG_LEVEL,
    environment=CARTSTORE_ENV,
)
