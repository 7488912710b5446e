"""Module: config."""

from typing import Literal

from pydantic_settings import BaseSettings


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # "map" keeps every entity in process memory; "sqlalchemy" uses database_url.
    storage_backend: Literal["map", "sqlalchemy"] = "map"
    # SQLAlchemy connection string, only read by the sqlalchemy backend.
    database_url: str = "sqlite:///./petclinic.db"
    # Seed pet types, specialities, owners and vets into an empty store on start-up.
    load_sample_data: bool = True

    log_level: str = "INFO"
    log_file: str | None = None

    # Browser origins allowed to call the API during local development.
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"
        env_prefix = "PETCLINIC_"


# Global settings instance imported by app modules at runtime.
settings = Settings()
