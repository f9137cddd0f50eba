"""
Configuration settings for the population window analysis.

Uses Pydantic Settings to read environment variables (or a `.env` file) for
logging, the default query window, the span guard and the sample/benchmark
harness defaults.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Query window
    start_year: int = Field(1900, alias="POPULATION_START_YEAR")
    end_year: int = Field(2000, alias="POPULATION_END_YEAR")
    max_span_years: int = Field(1_000_000, alias="POPULATION_MAX_SPAN_YEARS", gt=0)

    # Sample and benchmark defaults
    sample_size: int = Field(100, alias="SAMPLE_SIZE", ge=0)
    sample_seed: int | None = Field(None, alias="SAMPLE_SEED")
    benchmark_runs: int = Field(1, alias="BENCHMARK_RUNS", ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
