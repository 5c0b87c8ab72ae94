"""Inbound port interfaces for the GPU allocator.

Inbound ports define what the system offers to its host, typically a
device plugin answering the kubelet's preferred-allocation calls.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class PreferredAllocationAPI(Protocol):
    """Main API offered by the GPU allocator."""

    def get_preferred_allocation(
        self,
        available: Sequence[str],
        required: Sequence[str],
        size: int,
    ) -> list[str]:
        """Compute the preferred allocation for one request.

        Args:
            available: Device IDs that may be selected.
            required: Device IDs that must be part of the result.
            size: Number of devices to return.

        Returns:
            Ordered device IDs, starting with ``required``.
        """
        ...
