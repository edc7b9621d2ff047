# config.py

import logging
import sys
from functools import lru_cache
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from the environment and a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(default="sqlite+aiosqlite:///./recruitment.db")
    database_ssl: bool = Field(default=False)
    database_echo: bool = Field(default=False)

    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed origins"
    )
    log_level: str = Field(default="INFO")

    recommendation_limit: int = Field(default=10)
    min_resume_length: int = Field(default=50)

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "INFO") -> None:
    """Send every logger's output to stdout with a single formatter."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)


def add_cors_middleware(app: FastAPI) -> None:
    origins = get_settings().cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests against a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
