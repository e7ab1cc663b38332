# File: userhub/core/config.py

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import AnyHttpUrl, BaseModel, Field, field_validator


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "userhub"
    VERSION: str = "0.1.0"

    # Routes are served at the root by default ("/register", "/login", ...)
    api_prefix: str = ""

    # Server
    host: str = Field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(_env("PORT", "3000")))
    log_level: str = Field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = Field(
        default_factory=lambda: _env("BACKEND_CORS_ORIGINS"),
        validate_default=True,
    )

    # Database
    database_url: str = Field(
        default_factory=lambda: _env("DATABASE_URL", "sqlite:///./userhub.db")
    )

    # Security / auth
    # Empty means "not configured": token issuance and verification will
    # raise ConfigurationError until JWT_SECRET is set.
    jwt_secret: str = Field(default_factory=lambda: _env("JWT_SECRET"))
    jwt_algorithm: str = Field(default_factory=lambda: _env("JWT_ALGORITHM", "HS256"))
    access_token_expire_minutes: int = Field(
        default_factory=lambda: int(_env("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    )
    password_hash_rounds: int = Field(
        default_factory=lambda: int(_env("PASSWORD_HASH_ROUNDS", "10")),
        ge=4,
        le=31,
    )

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    """
    Read settings from the process environment (and a local .env file, if any).

    Cached so the environment is only consulted once per process.
    """
    load_dotenv()
    return Settings()
