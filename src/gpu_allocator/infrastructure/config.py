"""Configuration for the GPU allocator."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gpu_allocator.domain.value_objects.sharing import SharingStrategy


class TimeSlicingConfig(BaseModel):
    """Time-slicing configuration."""

    strategy: SharingStrategy = Field(default=SharingStrategy.NONE)


class SharingConfig(BaseModel):
    """GPU sharing configuration."""

    time_slicing: TimeSlicingConfig = Field(default_factory=TimeSlicingConfig)


class AllocationConfig(BaseModel):
    """Allocation configuration."""

    validate_required_subset: bool = Field(default=False)


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0")
    metrics_port: int = Field(default=8004)


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    service_name: str = Field(default="gpu_allocator")
    environment: str = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    otlp_endpoint: str | None = Field(default=None)


class Config(BaseSettings):
    """Main configuration."""

    model_config = SettingsConfigDict(env_prefix="GPU_ALLOCATOR_", env_nested_delimiter="__")

    sharing: SharingConfig = Field(default_factory=SharingConfig)
    allocation: AllocationConfig = Field(default_factory=AllocationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    return Config()
