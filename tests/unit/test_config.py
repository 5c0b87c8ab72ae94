"""Unit tests for GPU allocator configuration."""

import pytest

from gpu_allocator.domain.value_objects.sharing import SharingStrategy
from gpu_allocator.infrastructure.config import (
    AllocationConfig,
    Config,
    ServerConfig,
    TimeSlicingConfig,
)


@pytest.mark.unit
class TestConfig:
    """Test configuration loading and validation."""

    def test_time_slicing_config_defaults(self):
        """Test time-slicing configuration defaults."""
        config = TimeSlicingConfig()
        assert config.strategy is SharingStrategy.NONE

    def test_strategy_parsed_from_string(self):
        """Strategies are read by value."""
        assert TimeSlicingConfig(strategy="packed").strategy is SharingStrategy.PACKED
        assert TimeSlicingConfig(strategy="distributed").strategy is SharingStrategy.DISTRIBUTED

    def test_allocation_config_defaults(self):
        """Test allocation configuration defaults."""
        assert AllocationConfig().validate_required_subset is False

    def test_server_config_defaults(self):
        """Test server configuration defaults."""
        server_config = ServerConfig()
        assert server_config.host == "0.0.0.0"
        assert server_config.metrics_port == 8004

    def test_strategy_from_environment(self, monkeypatch):
        """Nested settings are read from prefixed environment variables."""
        monkeypatch.setenv("GPU_ALLOCATOR_SHARING__TIME_SLICING__STRATEGY", "distributed")
        monkeypatch.setenv("GPU_ALLOCATOR_ALLOCATION__VALIDATE_REQUIRED_SUBSET", "true")

        config = Config()

        assert config.sharing.time_slicing.strategy is SharingStrategy.DISTRIBUTED
        assert config.allocation.validate_required_subset is True
