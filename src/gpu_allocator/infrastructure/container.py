"""Dependency injection container for the GPU allocator."""

from dataclasses import dataclass
from typing import Callable, Optional

import structlog
from opentelemetry import trace

from gpu_allocator import __version__
from gpu_allocator.adapters.outbound.best_effort import BestEffortPolicy
from gpu_allocator.application.service import PreferredAllocationService
from gpu_allocator.domain.entities.device import DeviceSet
from gpu_allocator.domain.entities.topology import DeviceGraph
from gpu_allocator.domain.services.aligned import AlignedAllocator
from gpu_allocator.domain.services.policy import AllocationPolicySelector
from gpu_allocator.infrastructure.config import Config, get_config
from gpu_allocator.infrastructure.logging import setup_logging
from gpu_allocator.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from gpu_allocator.infrastructure.tracing import setup_tracing
from gpu_allocator.ports.outbound.allocator import TopologyAllocator


@dataclass
class Container:
    """Dependency injection container for allocator components."""

    config: Config
    logger: structlog.stdlib.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry

    _instance: "Container | None" = None

    @classmethod
    def create(cls) -> "Container":
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = get_config()
        logger = setup_logging()
        tracer = setup_tracing()
        metrics = get_metrics()

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
        )

        metrics.info.info({"version": __version__, "environment": config.observability.environment})

        logger.info(
            "gpu_allocator_container_initialized",
            environment=config.observability.environment,
            strategy=config.sharing.time_slicing.strategy.value,
        )

        return cls._instance

    @classmethod
    def get(cls) -> "Container":
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None

    def serve_metrics(self) -> MetricsRegistry:
        """Expose metrics over HTTP on the configured port."""
        self.metrics = setup_metrics(self.config.server.metrics_port)
        return self.metrics

    def build_service(
        self,
        graph: DeviceGraph,
        inventory: Callable[[], DeviceSet],
        policy: Optional[TopologyAllocator] = None,
    ) -> PreferredAllocationService:
        """Wire a preferred-allocation service.

        Args:
            graph: GPU topology for aligned allocation.
            inventory: Returns the current inventory snapshot.
            policy: Topology allocator. Defaults to BestEffortPolicy over ``graph``.
        """
        aligned = AlignedAllocator(graph, policy or BestEffortPolicy(graph))
        selector = AllocationPolicySelector(
            aligned,
            validate_required_subset=self.config.allocation.validate_required_subset,
        )
        return PreferredAllocationService(
            selector=selector,
            inventory=inventory,
            strategy=lambda: self.config.sharing.time_slicing.strategy,
            logger=self.logger.bind(component="preferred_allocation"),
            tracer=self.tracer,
            metrics=self.metrics,
        )


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
