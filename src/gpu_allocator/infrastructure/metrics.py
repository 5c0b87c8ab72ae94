"""Prometheus metrics for the GPU allocator."""

from __future__ import annotations

from prometheus_client import Counter, Histogram, Info, start_http_server, REGISTRY, CollectorRegistry


class MetricsRegistry:
    """Preferred-allocation metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or REGISTRY

        self.allocation_requests_total = Counter("allocation_requests_total", "Preferred allocation requests", ["policy"], registry=self._registry)
        self.allocation_failures_total = Counter("allocation_failures_total", "Failed preferred allocations", ["policy", "reason"], registry=self._registry)
        self.allocation_latency_seconds = Histogram("allocation_latency_seconds", "Preferred allocation latency", buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05), registry=self._registry)
        self.allocation_devices_selected = Histogram("allocation_devices_selected", "Devices returned per allocation", buckets=(1, 2, 4, 8, 16, 32, 64), registry=self._registry)

        self.info = Info("gpu_allocator", "Allocator info", registry=self._registry)


_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8004, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    global _metrics
    if _metrics is None or registry is not None:
        _metrics = MetricsRegistry(registry)
    start_http_server(port, registry=registry or REGISTRY)
    return _metrics


def get_metrics() -> MetricsRegistry:
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
