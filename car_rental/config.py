from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from car_rental.domain.services.booking_policy import AvailabilityMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./car_rental.db
    use_in_memory: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    # EFFECTIVE: stock - reservas superpuestas; STOCK: sólo stock > 0
    availability_mode: AvailabilityMode = AvailabilityMode.EFFECTIVE
    booking_retry_attempts: int = 3
    booking_retry_base_delay: float = 0.05

    seed_demo_data: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
