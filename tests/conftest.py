"""Pytest configuration and shared fixtures for GPU allocator tests."""

import pytest
from unittest.mock import patch
from prometheus_client import CollectorRegistry

from gpu_allocator.domain.entities.device import Device, DeviceSet
from gpu_allocator.domain.entities.topology import AlignedDevice, DeviceGraph, NVLink
from gpu_allocator.domain.value_objects.device_identifiers import DeviceId
from gpu_allocator.infrastructure.config import Config
from gpu_allocator.infrastructure.container import Container
from gpu_allocator.infrastructure.metrics import MetricsRegistry


@pytest.fixture(autouse=True)
def reset_container():
    """Reset the DI container before each test."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def gpu_devices() -> DeviceSet:
    """Four whole GPUs, no sharing."""
    return DeviceSet(Device(id=DeviceId(f"GPU-{i}"), index=str(i)) for i in range(4))


@pytest.fixture
def replicated_devices(gpu_devices: DeviceSet) -> DeviceSet:
    """Four GPUs time-sliced into two replicas each."""
    return gpu_devices.replicate(2)


@pytest.fixture
def device_graph() -> DeviceGraph:
    """Two NUMA nodes with two GPUs each; GPU-0/GPU-1 and GPU-2/GPU-3 are NVLinked."""
    devices = [
        AlignedDevice(uuid=DeviceId(f"GPU-{i}"), index=i, numa_node=i // 2)
        for i in range(4)
    ]
    nvlinks = [
        NVLink(gpu_a=DeviceId("GPU-0"), gpu_b=DeviceId("GPU-1"), links=4),
        NVLink(gpu_a=DeviceId("GPU-2"), gpu_b=DeviceId("GPU-3"), links=4),
    ]
    return DeviceGraph.from_devices(devices, nvlinks)


@pytest.fixture
def metrics() -> MetricsRegistry:
    """Metrics bound to a private registry."""
    return MetricsRegistry(CollectorRegistry())


@pytest.fixture
def container(test_config: Config) -> Container:
    """Provide a configured container for testing."""
    with patch("gpu_allocator.infrastructure.container.get_config", return_value=test_config):
        return Container.create()


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
