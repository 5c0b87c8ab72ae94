"""Inbound ports - interfaces offered by the GPU allocator."""

from gpu_allocator.ports.inbound.api import PreferredAllocationAPI

__all__ = [
    "PreferredAllocationAPI",
]
