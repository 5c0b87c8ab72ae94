"""Topology allocator port.

The aligned allocation path hands plain, unshared GPUs to a topology-aware
allocator and trusts its answer. The allocator is a policy object built once
and injected; the engine never looks inside it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from gpu_allocator.domain.entities.topology import AlignedDevice


class TopologyAllocator(Protocol):
    """Protocol for topology-aware device selection.

    Thread Safety:
        Implementations must be safe to call concurrently; they receive
        every input as arguments and keep no per-request state.
    """

    @abstractmethod
    def allocate(
        self,
        available: list[AlignedDevice],
        required: list[AlignedDevice],
        size: int,
    ) -> list[AlignedDevice]:
        """Select ``size`` devices from ``available``, including ``required``.

        Args:
            available: Devices that may be selected.
            required: Devices that must be part of the selection.
            size: Number of devices to select.

        Returns:
            The selected devices, or an empty list if no selection of the
            requested size exists.
        """
        ...
