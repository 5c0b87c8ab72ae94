"""Aligned allocation for plain, unshared GPUs.

Translates device IDs into the topology allocator's device representation,
lets the injected allocator pick a topology-optimized selection, and
translates the answer back into IDs.

References:
    - DESIGN.md (Open question decisions, item 5)
"""

from __future__ import annotations

import logging
from typing import Sequence

from gpu_allocator.domain.entities.topology import DeviceGraph
from gpu_allocator.domain.errors import InvalidDeviceListError
from gpu_allocator.domain.value_objects.device_identifiers import DeviceId
from gpu_allocator.ports.outbound.allocator import TopologyAllocator

logger = logging.getLogger(__name__)


class AlignedAllocator:
    """Adapter between string device IDs and a topology allocator."""

    def __init__(self, graph: DeviceGraph, policy: TopologyAllocator) -> None:
        """Initialize the adapter.

        Args:
            graph: GPU topology used to resolve device IDs.
            policy: Topology-aware allocation policy, constructed once.
        """
        self._graph = graph
        self._policy = policy

    def allocate(self, available: Sequence[str], required: Sequence[str], size: int) -> list[DeviceId]:
        """Run the topology allocator over the given devices.

        The count of the result is not checked here; an empty list means the
        allocator could not satisfy the request.

        Raises:
            InvalidDeviceListError: If any ID is not part of the topology.
        """
        try:
            available_devices = self._graph.devices_from(available)
        except KeyError as e:
            raise InvalidDeviceListError("available", e) from e

        try:
            required_devices = self._graph.devices_from(required)
        except KeyError as e:
            raise InvalidDeviceListError("required", e) from e

        allocated = self._policy.allocate(available_devices, required_devices, size)
        logger.debug(f"Aligned allocation selected {len(allocated)} of {len(available_devices)} GPUs")
        return [device.uuid for device in allocated]
