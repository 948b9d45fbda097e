from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    PROJECT_NAME: str = "Quizlet"
    DATABASE_URL: str
    SECRET_KEY: str = Field(min_length=32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=15, gt=0)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=30, gt=0)
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)
    TOKEN_CLEANUP_INTERVAL_SECONDS: int = Field(default=86400, gt=0)
    ALLOWED_ORIGINS: list[str] = []

    model_config = SettingsConfigDict(env_file=".env")

    @field_validator("ALGORITHM")
    @classmethod
    def validate_algorithm(cls, value: str) -> str:
        if value not in HMAC_ALGORITHMS:
            raise ValueError(f"ALGORITHM must be one of {', '.join(HMAC_ALGORITHMS)}")
        return value


@lru_cache
def get_settings():
    return Settings()
