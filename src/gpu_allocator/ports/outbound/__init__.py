"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for external systems that the
allocation engine depends on, such as the topology-aware allocator.
"""

from gpu_allocator.ports.outbound.allocator import TopologyAllocator

__all__ = [
    "TopologyAllocator",
]
