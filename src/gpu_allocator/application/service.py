"""Preferred Allocation Service.

Entry point for preferred-allocation requests. Reads the inventory snapshot
and sharing strategy once per call, runs the policy selector, and wraps the
call with structured logging, Prometheus metrics and an OpenTelemetry span.

References:
    - DESIGN.md (Ledger, Application service)
"""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from gpu_allocator.domain.entities.device import DeviceSet
from gpu_allocator.domain.errors import AllocationError
from gpu_allocator.domain.services.policy import AllocationPolicySelector
from gpu_allocator.domain.value_objects.sharing import SharingStrategy
from gpu_allocator.infrastructure.logging import get_logger
from gpu_allocator.infrastructure.metrics import MetricsRegistry, get_metrics
from gpu_allocator.infrastructure.tracing import get_tracer


class PreferredAllocationService:
    """Computes preferred allocations with full observability."""

    def __init__(
        self,
        selector: AllocationPolicySelector,
        inventory: Callable[[], DeviceSet],
        strategy: Callable[[], SharingStrategy],
        logger: Optional[structlog.stdlib.BoundLogger] = None,
        tracer: Optional[trace.Tracer] = None,
        metrics: Optional[MetricsRegistry] = None,
    ) -> None:
        """Initialize the service.

        Args:
            selector: Policy selector running the allocation algorithms.
            inventory: Returns the current inventory snapshot.
            strategy: Returns the configured sharing strategy.
            logger: Structured logger. Uses the default structlog logger if None.
            tracer: OpenTelemetry tracer. Uses the global provider if None.
            metrics: Metrics registry. Uses the process-wide one if None.
        """
        self._selector = selector
        self._inventory = inventory
        self._strategy = strategy
        self._logger = logger or get_logger("preferred_allocation")
        self._tracer = tracer or get_tracer()
        self._metrics = metrics or get_metrics()

    def get_preferred_allocation(
        self,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[str]:
        """Select ``size`` devices from ``available``, leading with ``required``.

        Args:
            available: Devices that may be selected.
            required: Devices that must be part of the result. Must be a
                subset of ``available``.
            size: Number of devices to return.

        Returns:
            Ordered device IDs. Empty when the topology allocator cannot
            satisfy the request.

        Raises:
            AllocationError: If no allocation can be computed.
        """
        devices = self._inventory()
        strategy = self._strategy()
        policy_label = "none"
        start = time.perf_counter()

        with self._tracer.start_as_current_span(
            "allocation.preferred",
            attributes={
                "allocation.size": size,
                "allocation.available": len(available),
                "allocation.required": len(required),
                "allocation.strategy": strategy.value,
            },
        ) as span:
            try:
                policy = self._selector.classify(devices, available, strategy)
                policy_label = policy.value
                span.set_attribute("allocation.policy", policy_label)
                result = self._selector.allocate(policy, devices, available, required, size)
            except AllocationError as e:
                self._metrics.allocation_failures_total.labels(
                    policy=policy_label, reason=type(e).__name__
                ).inc()
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                self._logger.warning(
                    "preferred_allocation_failed",
                    policy=policy_label,
                    size=size,
                    available=len(available),
                    required=len(required),
                    error=str(e),
                )
                raise
            finally:
                self._metrics.allocation_requests_total.labels(policy=policy_label).inc()
                self._metrics.allocation_latency_seconds.observe(time.perf_counter() - start)

        if not result:
            self._logger.warning(
                "preferred_allocation_empty",
                policy=policy_label,
                size=size,
                available=len(available),
                required=len(required),
            )
            return []

        self._metrics.allocation_devices_selected.observe(len(result))
        self._logger.info(
            "preferred_allocation_selected",
            policy=policy_label,
            size=size,
            devices=result,
        )
        return [str(d) for d in result]
