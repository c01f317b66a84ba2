"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveFloat = Annotated[float, Field(gt=0.0)]
PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven credential hashing settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    scrypt_cost: PositiveInt = Field(default=16_384, validation_alias="SCRYPT_COST")
    scrypt_block_size: PositiveInt = Field(default=8, validation_alias="SCRYPT_BLOCK_SIZE")
    scrypt_parallelization: PositiveInt = Field(
        default=1,
        validation_alias="SCRYPT_PARALLELIZATION",
    )
    scrypt_maxmem_bytes: PositiveInt = Field(
        default=32 * 1024 * 1024,
        validation_alias="SCRYPT_MAXMEM_BYTES",
    )
    hasher_max_concurrency: PositiveInt = Field(
        default=4,
        validation_alias="HASHER_MAX_CONCURRENCY",
    )
    hasher_timeout_seconds: PositiveFloat | None = Field(
        default=None,
        validation_alias="HASHER_TIMEOUT_SECONDS",
    )
    password_min_length: PositiveInt = Field(default=6, validation_alias="PASSWORD_MIN_LENGTH")
    bootstrap_admin_username: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_ADMIN_USERNAME",
    )
    bootstrap_admin_password: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_ADMIN_PASSWORD",
    )
    bootstrap_admin_password_file: NonEmptyStr | None = Field(
        default=None,
        validation_alias="BOOTSTRAP_ADMIN_PASSWORD_FILE",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("scrypt_cost")
    @classmethod
    def _require_power_of_two_cost(cls, value: int) -> int:
        if value < 2 or value & (value - 1):
            raise ValueError("SCRYPT_COST must be a power of two greater than 1")
        return value


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
